"""Tests for data models."""

import pytest
from pydantic import ValidationError

from parse_bench.models import (
    BenchmarkResult,
    CorpusStats,
    MemoryBuffer,
    ParseError,
    ParseOptions,
    ParseResult,
    TimingSample,
)


class TestMemoryBuffer:
    """Tests for MemoryBuffer model."""

    def test_size_and_lines(self):
        """Test byte and newline counts."""
        buf = MemoryBuffer(identifier="a.py", data=b"x = 1\ny = 2\n")
        assert buf.size == 12
        assert buf.line_count == 2

    def test_no_trailing_newline(self):
        """Test the last line is only counted if it ends in a newline."""
        buf = MemoryBuffer(identifier="a.py", data=b"x = 1\ny = 2")
        assert buf.line_count == 1

    def test_is_frozen(self):
        """Test buffers cannot be modified."""
        buf = MemoryBuffer(identifier="a.py", data=b"")
        with pytest.raises(ValidationError):
            buf.data = b"changed"

    def test_missing_identifier_raises(self):
        """Test that a missing identifier raises validation error."""
        with pytest.raises(ValidationError):
            MemoryBuffer(data=b"")


class TestCorpusStats:
    """Tests for CorpusStats model."""

    def test_from_buffers(self):
        """Test totals over several buffers."""
        buffers = [
            MemoryBuffer(identifier="a.py", data=b"a\nb\n"),
            MemoryBuffer(identifier="b.py", data=b"import os\n"),
            MemoryBuffer(identifier="c.py", data=b""),
        ]
        stats = CorpusStats.from_buffers(buffers)
        assert stats == CorpusStats(file_count=3, total_bytes=14, total_lines=3)

    def test_empty_corpus(self):
        """Test an empty corpus gives zero counts."""
        assert CorpusStats.from_buffers([]) == CorpusStats()

    def test_negative_counts_rejected(self):
        """Test counts must be non-negative."""
        with pytest.raises(ValidationError):
            CorpusStats(file_count=-1)


class TestTimingSample:
    """Tests for TimingSample model."""

    def test_addition(self):
        """Test samples accumulate field by field."""
        total = TimingSample(wall_nanos=5, cpu_nanos=3) + TimingSample(wall_nanos=2, cpu_nanos=1)
        assert total == TimingSample(wall_nanos=7, cpu_nanos=4)

    def test_negative_time_rejected(self):
        """Test elapsed time cannot be negative."""
        with pytest.raises(ValidationError):
            TimingSample(wall_nanos=-1)


class TestParseResult:
    """Tests for ParseResult model."""

    def test_ok(self):
        """Test creating a successful result."""
        result = ParseResult.ok("ast", "a.py")
        assert result.success
        assert result.error is None

    def test_failure(self):
        """Test creating a failed result."""
        result = ParseResult.failure("ast", "a.py", "a.py:1: invalid syntax")
        assert not result.success
        assert result.error == "a.py:1: invalid syntax"


class TestBenchmarkResult:
    """Tests for BenchmarkResult model."""

    def test_milliseconds_truncate(self):
        """Test wall and CPU time are reported in whole milliseconds."""
        result = BenchmarkResult(
            parser_name="ast",
            total_wall_nanos=2_999_999,
            total_cpu_nanos=1_000_000,
        )
        assert result.wall_ms == 2
        assert result.cpu_ms == 1

    def test_throughput_optional(self):
        """Test throughput defaults to absent."""
        result = BenchmarkResult(parser_name="ast")
        assert result.byte_throughput is None
        assert not result.has_throughput

    def test_empty_name_rejected(self):
        """Test parser name is required."""
        with pytest.raises(ValidationError):
            BenchmarkResult(parser_name="")


def test_parse_options_default():
    """Test skip_bodies is off by default."""
    assert ParseOptions().skip_bodies is False


def test_parse_error_message():
    """Test ParseError keeps its message unchanged."""
    assert ParseError("LibCST is not supported").message == "LibCST is not supported"
