"""Benchmark runner for parser evaluation."""

import logging
from dataclasses import dataclass, field

from parse_bench.benchmark.timing import Measurer
from parse_bench.models import (
    NANOS_PER_SECOND,
    BenchmarkResult,
    CorpusStats,
    MemoryBuffer,
    ParseError,
    ParseOptions,
    TimingSample,
)
from parse_bench.parsers.base import BaseParser

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkConfig:
    """Configuration for benchmark runs."""
    iterations: int = 1
    options: ParseOptions = field(default_factory=ParseOptions)

    def __post_init__(self):
        if self.iterations < 1:
            raise ValueError(f"iterations must be at least 1, got {self.iterations}")


def throughput(amount: int, iterations: int, cpu_nanos: int) -> int | None:
    """Units processed per CPU second over all iterations, or None without CPU time."""
    if cpu_nanos <= 0:
        return None
    return amount * iterations * NANOS_PER_SECOND // cpu_nanos


class BenchmarkRunner:
    """Runs parsers over a corpus and accumulates their timings."""

    def __init__(self, config: BenchmarkConfig | None = None, measurer: Measurer | None = None):
        """Initialize the benchmark runner.

        Args:
            config: Benchmark configuration.
            measurer: Clock source; defaults to process CPU time.
        """
        self.config = config or BenchmarkConfig()
        self.measurer = measurer or Measurer()

    def run(
        self,
        parser: BaseParser,
        buffers: list[MemoryBuffer],
        stats: CorpusStats,
    ) -> BenchmarkResult:
        """Run benchmark on a parser.

        Every buffer is parsed once per iteration, in corpus order. The
        first failed parse aborts the run.

        Args:
            parser: Parser to benchmark.
            buffers: Corpus to parse.
            stats: Statistics of ``buffers``, used for throughput.

        Returns:
            BenchmarkResult with accumulated timing and throughput.

        Raises:
            ParseError: If any parse call fails.
        """
        options = self.config.options
        iterations = self.config.iterations
        total = TimingSample()

        logger.debug(f"Running {parser.name}: {iterations} iteration(s) over {len(buffers)} files")
        for _ in range(iterations):
            for buffer in buffers:
                result, elapsed = self.measurer.measure(
                    lambda: parser.parse(buffer, options)
                )
                if not result.success:
                    raise ParseError(result.error or f"{parser.name} failed to parse {buffer.identifier}")
                total = total + elapsed

        return BenchmarkResult(
            parser_name=parser.name,
            iterations=iterations,
            total_wall_nanos=total.wall_nanos,
            total_cpu_nanos=total.cpu_nanos,
            byte_throughput=throughput(stats.total_bytes, iterations, total.cpu_nanos),
            line_throughput=throughput(stats.total_lines, iterations, total.cpu_nanos),
        )

    def compare(
        self,
        parsers: list[BaseParser],
        buffers: list[MemoryBuffer],
        stats: CorpusStats,
    ) -> list[BenchmarkResult]:
        """Run benchmarks on multiple parsers, in order.

        Args:
            parsers: Parsers to compare.
            buffers: Corpus to parse.
            stats: Statistics of ``buffers``.

        Returns:
            One result per parser, in the order given.

        Raises:
            ParseError: From the first parser that fails; later parsers
                are not run.
        """
        return [self.run(parser, buffers, stats) for parser in parsers]
