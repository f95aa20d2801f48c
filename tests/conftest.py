"""Shared fixtures: a controllable clock and parsers with a fixed cost."""

import pytest

from parse_bench.benchmark import Measurer
from parse_bench.models import MemoryBuffer, ParseOptions, ParseResult
from parse_bench.parsers import BaseParser


class FakeClock:
    """Wall and CPU clocks that only move when told to."""

    def __init__(self):
        self.wall = 0
        self.cpu = 0

    def advance(self, wall_nanos: int, cpu_nanos: int) -> None:
        self.wall += wall_nanos
        self.cpu += cpu_nanos

    def measurer(self, cpu_ticks_per_second: int = 1_000_000_000) -> Measurer:
        return Measurer(
            wall_clock=lambda: self.wall,
            cpu_clock=lambda: self.cpu,
            cpu_ticks_per_second=cpu_ticks_per_second,
        )


class FixedCostParser(BaseParser):
    """Parser that spends a fixed amount of fake time per call.

    Records every buffer it was asked to parse and can be told to fail on
    the n-th call (1-based).
    """

    def __init__(self, clock, name="fixed", wall_nanos=2_000_000, cpu_nanos=1_000_000, fail_on=None):
        self.clock = clock
        self._name = name
        self.wall_nanos = wall_nanos
        self.cpu_nanos = cpu_nanos
        self.fail_on = fail_on
        self.calls: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    def parse(self, buffer: MemoryBuffer, options: ParseOptions) -> ParseResult:
        self.calls.append(buffer.identifier)
        self.clock.advance(self.wall_nanos, self.cpu_nanos)
        if self.fail_on is not None and len(self.calls) == self.fail_on:
            return ParseResult.failure(self.name, buffer.identifier, f"{buffer.identifier}: boom")
        return ParseResult.ok(self.name, buffer.identifier)


@pytest.fixture
def clock():
    """Create a fake clock."""
    return FakeClock()


@pytest.fixture
def make_parser(clock):
    """Factory for fixed cost parsers sharing the fake clock."""
    def factory(**kwargs):
        return FixedCostParser(clock, **kwargs)
    return factory


@pytest.fixture
def buffers():
    """A small in-memory corpus."""
    return [
        MemoryBuffer(identifier="a.py", data=b"import os\nprint(os.sep)\n"),
        MemoryBuffer(identifier="b.py", data=b"x = 1\n"),
        MemoryBuffer(identifier="c.py", data=b"def f():\n    return 2\n"),
    ]


@pytest.fixture
def corpus_dir(tmp_path):
    """A directory tree with matching and non-matching files."""
    (tmp_path / "pkg" / "sub").mkdir(parents=True)
    (tmp_path / "empty").mkdir()
    (tmp_path / "top.py").write_bytes(b"a = 1\nb = 2\n")
    (tmp_path / "pkg" / "__init__.py").write_bytes(b"")
    (tmp_path / "pkg" / "mod.py").write_bytes(b"def f():\n    return 1\n\n\nx = f()\n")
    (tmp_path / "pkg" / "sub" / "deep.py").write_bytes(b"class A:\n    pass\n")
    (tmp_path / "README.md").write_bytes(b"# readme\n\ntext\n")
    (tmp_path / "pkg" / "data.json").write_bytes(b"{}\n")
    (tmp_path / "pkg" / "mod.pyc").write_bytes(b"\x00\x01\n")
    return tmp_path
