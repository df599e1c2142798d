"""Benchmark a scan()-driven tokenizer loop.

Compares ASCII sources (identity byte mapping) against non-ASCII sources
(boundary table lookups).

Run with:
    pytest benchmarks/benchmark_tokenize.py -v --benchmark-only
"""

import re

import pytest

from strscan import StringScanner

PATTERNS = [
    re.compile(r"\s+"),
    re.compile(r"\w+"),
    re.compile(r"\d+"),
    re.compile(r"[^\w\s]"),
]


def tokenize(source: str) -> int:
    scanner = StringScanner(source)
    count = 0
    while not scanner.is_eos():
        for pattern in PATTERNS:
            if scanner.scan(pattern) is not None:
                count += 1
                break
        else:
            scanner.get_char()
    return count


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_tokenize_ascii(benchmark, ascii_source):
    """Benchmark tokenizing ASCII text."""
    benchmark(tokenize, ascii_source)


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_tokenize_unicode(benchmark, unicode_source):
    """Benchmark tokenizing non-ASCII text."""
    benchmark(tokenize, unicode_source)


@pytest.mark.benchmark(group="construct")
def test_benchmark_construct_unicode(benchmark, unicode_source):
    """Benchmark building the byte index for non-ASCII text."""
    benchmark(StringScanner, unicode_source)
