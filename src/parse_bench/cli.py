"""Command line entry point.

Usage:
    parse-bench --parser ast path/to/project
    parse-bench --parser libcst --parser ast -n 10 --skip-bodies src/
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from parse_bench.benchmark import (
    CPU_CLOCKS,
    DEFAULT_EXTENSION,
    BenchmarkConfig,
    BenchmarkRunner,
    Measurer,
    collect_sources,
    format_corpus_stats,
    format_result,
)
from parse_bench.models import CorpusStats, ParseError, ParseOptions
from parse_bench.parsers import AVAILABLE_PARSERS, LibCSTParser, get_parser

logger = logging.getLogger(__name__)


def run(
    parser_ids: list[str],
    iterations: int,
    options: ParseOptions,
    paths: list[str | Path],
    *,
    extension: str = DEFAULT_EXTENSION,
    measurer: Measurer | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Benchmark the requested parsers over the sources under ``paths``.

    The corpus is collected and measured once, then every parser runs in
    the order requested. Each parser's section is printed when it
    finishes. The first failure stops the run; its message goes to ``err``
    and no further parsers are attempted.

    Args:
        parser_ids: Parser identifiers, see ``AVAILABLE_PARSERS``.
        iterations: Passes over the corpus per parser.
        options: Options for every parse call.
        paths: Files and directories to collect sources from.
        extension: Source file extension.
        measurer: Clock source; defaults to process CPU time.
        out: Report stream, defaults to stdout.
        err: Diagnostic stream, defaults to stderr.

    Returns:
        Process exit status: 0 on success, 1 on error.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    parsers = [get_parser(parser_id) for parser_id in parser_ids]
    if options.skip_bodies:
        for parser in parsers:
            if isinstance(parser, LibCSTParser):
                logger.warning("LibCST does not support --skip-bodies; parsing full bodies")

    buffers = collect_sources(paths, extension)
    stats = CorpusStats.from_buffers(buffers)
    print(format_corpus_stats(stats, iterations), file=out)

    runner = BenchmarkRunner(
        BenchmarkConfig(iterations=iterations, options=options),
        measurer,
    )
    for parser in parsers:
        try:
            result = runner.run(parser, buffers, stats)
        except ParseError as e:
            print(f"error: {e.message}", file=err)
            return 1
        print(format_result(result), file=out)

    return 0


def positive_int(value: str) -> int:
    """argparse type for a positive integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_arg_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    arg_parser = argparse.ArgumentParser(
        prog="parse-bench",
        description="Measure parser throughput over a corpus of source files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    arg_parser.add_argument(
        "--parser", "-p",
        dest="parsers",
        action="append",
        choices=AVAILABLE_PARSERS,
        default=[],
        help="Parser to benchmark; repeat to compare several, in order",
    )
    arg_parser.add_argument(
        "--iterations", "-n",
        type=positive_int,
        default=1,
        help="Number of passes over the corpus (default: 1)",
    )
    arg_parser.add_argument(
        "--skip-bodies",
        action="store_true",
        help="Skip function bodies and type members if possible",
    )
    arg_parser.add_argument(
        "--extension",
        default=DEFAULT_EXTENSION,
        help=f"Source file extension (default: {DEFAULT_EXTENSION})",
    )
    arg_parser.add_argument(
        "--cpu-clock",
        choices=CPU_CLOCKS,
        default="process",
        help="CPU time source (default: process)",
    )
    arg_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output to stderr",
    )
    arg_parser.add_argument(
        "paths",
        nargs="*",
        help="Input files and directories",
    )
    return arg_parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    return run(
        args.parsers,
        args.iterations,
        ParseOptions(skip_bodies=args.skip_bodies),
        args.paths,
        extension=args.extension,
        measurer=Measurer.from_name(args.cpu_clock),
    )


if __name__ == "__main__":
    sys.exit(main())
