#!/usr/bin/env python
"""
Parser Throughput Benchmark

Parses every Python source file under the given paths with each selected
parser and reports wall clock time, CPU time and throughput.

Usage:
    python benchmark.py --parser ast src/
    python benchmark.py --parser libcst --parser ast -n 10 src/
    python benchmark.py --parser ast --skip-bodies --verbose src/
"""

import sys

sys.path.insert(0, 'src')

from parse_bench.cli import main


if __name__ == "__main__":
    sys.exit(main())
