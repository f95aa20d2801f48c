"""Data models for the source corpus.

This module provides Pydantic models for:
- MemoryBuffer: One source file loaded into memory
- CorpusStats: Aggregate size of the loaded corpus
"""

from typing import Iterable

from pydantic import BaseModel, Field


class MemoryBuffer(BaseModel):
    """An immutable, named, in-memory copy of one source file.

    Buffers are created once by the collector and then shared read-only by
    every parse call of every iteration.

    Attributes:
        identifier: Path the buffer was loaded from.
        data: Raw file contents.

    Example:
        >>> buf = MemoryBuffer(identifier="a.py", data=b"x = 1\\n")
        >>> buf.size, buf.line_count
        (6, 1)
    """

    identifier: str = Field(..., description="Path the buffer was loaded from")
    data: bytes = Field(default=b"", description="Raw file contents")

    model_config = {"frozen": True}

    @property
    def size(self) -> int:
        """Return the buffer length in bytes."""
        return len(self.data)

    @property
    def line_count(self) -> int:
        """Return the number of newline bytes in the buffer."""
        return self.data.count(b"\n")


class CorpusStats(BaseModel):
    """Aggregate counts over the whole corpus.

    Computed once per run and reused as the throughput denominator for
    every parser, so all parsers are measured against the same corpus.
    """

    file_count: int = Field(default=0, ge=0)
    total_bytes: int = Field(default=0, ge=0)
    total_lines: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

    @classmethod
    def from_buffers(cls, buffers: Iterable[MemoryBuffer]) -> "CorpusStats":
        """Compute corpus statistics from loaded buffers.

        Args:
            buffers: Loaded source buffers.

        Returns:
            CorpusStats with file, byte and line totals.
        """
        file_count = 0
        total_bytes = 0
        total_lines = 0
        for buffer in buffers:
            file_count += 1
            total_bytes += buffer.size
            total_lines += buffer.line_count
        return cls(
            file_count=file_count,
            total_bytes=total_bytes,
            total_lines=total_lines,
        )
