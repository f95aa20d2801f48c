"""Throughput benchmarks for interchangeable Python parsers."""

__version__ = "0.1.0"
