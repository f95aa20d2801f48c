"""Plain-text formatting of benchmark results."""

from parse_bench.models import BenchmarkResult, CorpusStats

SEPARATOR = "----"


def format_corpus_stats(stats: CorpusStats, iterations: int) -> str:
    """Format the corpus header shown before any parser section."""
    lines = [
        f"file count:  {stats.file_count:8d}",
        f"total bytes: {stats.total_bytes:8d}",
        f"total lines: {stats.total_lines:8d}",
        f"iterations:  {iterations:8d}",
    ]
    return "\n".join(lines)


def format_result(result: BenchmarkResult) -> str:
    """Format one parser section.

    Throughput lines are left out when no CPU time was recorded.
    """
    lines = [
        SEPARATOR,
        f"parser: {result.parser_name}",
        f"wall clock time (ms): {result.wall_ms:8d}",
        f"cpu time (ms):        {result.cpu_ms:8d}",
    ]
    if result.has_throughput:
        # Throughputs are based on CPU time.
        lines.append(f"throughput (byte/s):  {result.byte_throughput:8d}")
        lines.append(f"throughput (line/s):  {result.line_throughput:8d}")
    return "\n".join(lines)


def format_report(
    stats: CorpusStats,
    iterations: int,
    results: list[BenchmarkResult],
) -> str:
    """Format a complete report.

    Args:
        stats: Corpus statistics.
        iterations: Number of passes over the corpus.
        results: Parser results in the order they were run.

    Returns:
        Report text without a trailing newline.
    """
    sections = [format_corpus_stats(stats, iterations)]
    sections.extend(format_result(result) for result in results)
    return "\n".join(sections)
