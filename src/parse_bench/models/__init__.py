"""Data models for corpus buffers, parse results and benchmark results.

This module provides Pydantic-validated models for:
- MemoryBuffer: A source file loaded into memory
- CorpusStats: File, byte and line totals of the corpus
- ParseOptions / ParseResult: Input flags and outcome of one parse call
- TimingSample / BenchmarkResult: Measured time and derived throughput
"""

from .corpus import MemoryBuffer, CorpusStats
from .results import (
    NANOS_PER_SECOND,
    BenchmarkResult,
    ParseError,
    ParseOptions,
    ParseResult,
    TimingSample,
)

__all__ = [
    "MemoryBuffer",
    "CorpusStats",
    "ParseOptions",
    "ParseResult",
    "ParseError",
    "TimingSample",
    "BenchmarkResult",
    "NANOS_PER_SECOND",
]
