"""Benchmark suite for parser throughput."""

from .collector import collect_sources, DEFAULT_EXTENSION
from .timing import Measurer, CPU_CLOCKS
from .runner import BenchmarkRunner, BenchmarkConfig
from .report import format_corpus_stats, format_result, format_report

__all__ = [
    "collect_sources",
    "DEFAULT_EXTENSION",
    "Measurer",
    "CPU_CLOCKS",
    "BenchmarkRunner",
    "BenchmarkConfig",
    "format_corpus_stats",
    "format_result",
    "format_report",
]
