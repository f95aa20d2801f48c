"""Data models for parse calls and benchmark results.

This module provides Pydantic models for:
- ParseOptions: Flags passed to every parse call
- ParseResult: Outcome of a single parse call
- TimingSample: Wall clock and CPU time of one measured call
- BenchmarkResult: Totals and throughput for one parser
"""

from pydantic import BaseModel, Field, field_validator

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000


class ParseError(Exception):
    """A parser failed, or is not available in this installation.

    The message is expected to describe the failure on its own and is
    shown to the user unchanged.
    """

    @property
    def message(self) -> str:
        return str(self)


class ParseOptions(BaseModel):
    """Options applied to every parse call.

    Attributes:
        skip_bodies: Skip function bodies and type members where the parser
            supports it.
    """

    skip_bodies: bool = Field(default=False)

    model_config = {"frozen": True}


class ParseResult(BaseModel):
    """Result of parsing one buffer.

    Parsers never raise; a failure is reported through ``success`` and
    ``error`` instead.

    Attributes:
        parser_name: Name of the parser that produced this result.
        identifier: Identifier of the parsed buffer.
        success: Whether the parse completed.
        error: Error message if the parse failed.
    """

    parser_name: str | None = Field(default=None)
    identifier: str | None = Field(default=None)
    success: bool = Field(default=True)
    error: str | None = Field(default=None)

    @classmethod
    def ok(cls, parser_name: str, identifier: str) -> "ParseResult":
        return cls(parser_name=parser_name, identifier=identifier)

    @classmethod
    def failure(cls, parser_name: str, identifier: str | None, error: str) -> "ParseResult":
        return cls(
            parser_name=parser_name,
            identifier=identifier,
            success=False,
            error=error,
        )


class TimingSample(BaseModel):
    """Elapsed wall clock and CPU time, in nanoseconds."""

    wall_nanos: int = Field(default=0)
    cpu_nanos: int = Field(default=0)

    model_config = {"frozen": True}

    @field_validator("wall_nanos", "cpu_nanos")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Ensure elapsed time is non-negative."""
        if v < 0:
            raise ValueError("Elapsed time cannot be negative")
        return v

    def __add__(self, other: "TimingSample") -> "TimingSample":
        if not isinstance(other, TimingSample):
            return NotImplemented
        return TimingSample(
            wall_nanos=self.wall_nanos + other.wall_nanos,
            cpu_nanos=self.cpu_nanos + other.cpu_nanos,
        )


class BenchmarkResult(BaseModel):
    """Complete result from benchmarking one parser.

    Throughput is derived from CPU time and covers the corpus processed
    across all iterations. Both throughput fields are None when no CPU time
    was recorded.

    Attributes:
        parser_name: Display name of the parser.
        iterations: Number of passes over the corpus.
        total_wall_nanos: Accumulated wall clock time.
        total_cpu_nanos: Accumulated CPU time.
        byte_throughput: Bytes parsed per CPU second.
        line_throughput: Lines parsed per CPU second.
    """

    parser_name: str = Field(..., min_length=1)
    iterations: int = Field(default=1, ge=1)
    total_wall_nanos: int = Field(default=0, ge=0)
    total_cpu_nanos: int = Field(default=0, ge=0)
    byte_throughput: int | None = Field(default=None, ge=0)
    line_throughput: int | None = Field(default=None, ge=0)

    model_config = {"frozen": True}

    @property
    def wall_ms(self) -> int:
        """Return accumulated wall clock time in whole milliseconds."""
        return self.total_wall_nanos // NANOS_PER_MILLI

    @property
    def cpu_ms(self) -> int:
        """Return accumulated CPU time in whole milliseconds."""
        return self.total_cpu_nanos // NANOS_PER_MILLI

    @property
    def has_throughput(self) -> bool:
        return self.byte_throughput is not None and self.line_throughput is not None
