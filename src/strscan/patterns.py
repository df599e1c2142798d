"""Pattern coercion and compiled-pattern cache for strscan.

Scanners accept either a compiled re.Pattern or a pattern string. Strings
are compiled with the active ScanConfig flags and memoized by
(pattern, flags) so a tokenizer loop calling scan(r"\\w+") repeatedly only
compiles once.

Thread Safety:
    PatternCache is not thread-safe for concurrent writes. The module-level
    cache only stores immutable compiled patterns, so a lost insert from a
    race costs a recompile and nothing else.

Example:
    >>> from strscan.patterns import compile_pattern
    >>> compile_pattern(r"\\d+").match("42").group()
    '42'
"""

from __future__ import annotations

import re
from typing import TypeAlias

from strscan.config import get_scan_config
from strscan.errors import PatternError
from strscan.utils.logger import get_logger

logger = get_logger(__name__)

PatternLike: TypeAlias = str | re.Pattern[str]

DEFAULT_MAXSIZE = 512


class PatternCache:
    """Bounded in-memory cache of compiled patterns.

    Keyed by (pattern, flags). When full, the whole cache is dropped, the
    same policy the re module uses for its internal cache.
    """

    __slots__ = ("_data", "_maxsize")

    def __init__(self, maxsize: int = DEFAULT_MAXSIZE) -> None:
        self._data: dict[tuple[str, int], re.Pattern[str]] = {}
        self._maxsize = maxsize

    def get(self, pattern: str, flags: int = 0) -> re.Pattern[str]:
        """Return the compiled pattern, compiling on a miss.

        Raises:
            PatternError: If the pattern does not compile.
        """
        key = (pattern, int(flags))
        compiled = self._data.get(key)
        if compiled is None:
            compiled = _compile(pattern, flags)
            if len(self._data) >= self._maxsize:
                self._data.clear()
            self._data[key] = compiled
        return compiled

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data


_cache = PatternCache()


def _compile(pattern: str, flags: int) -> re.Pattern[str]:
    logger.debug("Compiling pattern %r (flags=%d)", pattern, int(flags))
    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        raise PatternError(pattern, exc.msg, exc.pos) from exc


def compile_pattern(pattern: PatternLike, flags: int | None = None) -> re.Pattern[str]:
    """Coerce a pattern argument to a compiled str pattern.

    Args:
        pattern: Compiled pattern (returned unchanged) or pattern string
        flags: re flags for string patterns; defaults to the active
            ScanConfig.pattern_flags

    Returns:
        Compiled re.Pattern operating on str.

    Raises:
        PatternError: If a pattern string does not compile.
        TypeError: If pattern is a bytes pattern or not a pattern at all.
    """
    if isinstance(pattern, re.Pattern):
        if not isinstance(pattern.pattern, str):
            raise TypeError("bytes patterns cannot scan text; compile the pattern from a str")
        return pattern
    if isinstance(pattern, str):
        config = get_scan_config()
        if flags is None:
            flags = config.pattern_flags
        if config.cache_patterns:
            return _cache.get(pattern, flags)
        return _compile(pattern, flags)
    raise TypeError(f"expected str or compiled pattern, got {type(pattern).__name__}")


def get_pattern_cache() -> PatternCache:
    """The module-level cache used by compile_pattern()."""
    return _cache


def clear_pattern_cache() -> None:
    _cache.clear()


__all__ = [
    "PatternCache",
    "PatternLike",
    "clear_pattern_cache",
    "compile_pattern",
    "get_pattern_cache",
]
