"""
strscan: cursor-based string scanner for Python lexers

Walks text byte-by-byte or character-by-character, attempts regular
expression matches anchored at the cursor, and keeps the captures of the
most recent attempt. A building block for hand-written tokenizers.

Quick Start:
    >>> from strscan import StringScanner
    >>> scanner = StringScanner("let x = 42")
    >>> scanner.scan(r"[a-z]+")
    'let'
    >>> scanner.skip(r"\\s+")
    1
    >>> scanner.check(r"(?P<name>\\w+)\\s*=")
    True
    >>> scanner.match_name("name")
    'x'
    >>> scanner.get_pos()  # check() never moves the cursor
    4

Positions are byte offsets into the UTF-8 encoding of the text:
    >>> scanner = StringScanner("Löwe")
    >>> scanner.get_char()
    'L'
    >>> scanner.get_char()
    'ö'
    >>> scanner.get_pos()
    3
"""

from strscan.captures import Captures, Span
from strscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from strscan.errors import PatternError, StrscanError
from strscan.offsets import ByteIndex
from strscan.patterns import PatternCache, PatternLike, clear_pattern_cache, compile_pattern
from strscan.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from strscan.scanner import StringScanner

__version__ = "0.1.0"

__all__ = [
    "ByteIndex",
    "Captures",
    "PatternCache",
    "PatternError",
    "PatternLike",
    "ScanAccumulator",
    "ScanConfig",
    "Span",
    "StringScanner",
    "StrscanError",
    "__version__",
    "clear_pattern_cache",
    "compile_pattern",
    "get_scan_accumulator",
    "get_scan_config",
    "profiled_scan",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
