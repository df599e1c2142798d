"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def ascii_source() -> str:
    """Generate a large ASCII source (~100KB)."""
    line = "let value_{i} = compute({i}, other_{i}) + 42;\n"
    return "".join(line.format(i=i) for i in range(2000))


@pytest.fixture
def unicode_source() -> str:
    """Generate a large non-ASCII source (~100KB)."""
    line = "lassen wert_{i} = größe({i}, 老虎_{i}) + 42;\n"
    return "".join(line.format(i=i) for i in range(2000))
