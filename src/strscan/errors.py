"""Exception classes for strscan.

Only malformed input to the scanner raises. Ordinary scanning outcomes
(no match, out-of-range position) are reported through return values.
"""

from __future__ import annotations


class StrscanError(Exception):
    """Base exception for all strscan errors.

    Subclass this for specific error categories.
    """

    pass


class PatternError(StrscanError):
    """A pattern string could not be compiled.

    Raised by scan(), check() and skip() when given a string pattern
    that the regular expression engine rejects.
    """

    def __init__(
        self,
        pattern: str,
        message: str,
        offset: int | None = None,
    ) -> None:
        """Initialize pattern error with optional offset.

        Args:
            pattern: The pattern source that failed to compile
            message: Error description from the regex engine
            offset: Index into the pattern where compilation failed (0-indexed)
        """
        self.pattern = pattern
        self.message = message
        self.offset = offset

        location = f" at position {offset}" if offset is not None else ""
        super().__init__(f"Invalid pattern {pattern!r}{location}: {message}")
