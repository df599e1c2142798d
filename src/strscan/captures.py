"""Owned snapshot of a regular expression match.

A Captures is built from an re.Match when a scanner match attempt succeeds.
It copies out every group's substring and byte span, so it stays valid after
the scanner moves on and never holds on to the Match object.

Byte spans are absolute offsets into the scanner's source, in the same
coordinate system as StringScanner.get_pos().

Thread Safety:
Captures is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TypeAlias

Span: TypeAlias = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Captures:
    """Capture groups of one successful match.

    Group 0 is the whole match. A group that did not participate in the
    match has None for both its substring and its span.

    Attributes:
        groups: Substring per group index
        spans: Byte span (start, end) per group index
        names: (group name, group index) pairs

    Examples:
        >>> from strscan import StringScanner
        >>> scanner = StringScanner("test\\n caps")
        >>> scanner.check(r"(\\w+)\\s+")
        True
        >>> caps = scanner.captures()
        >>> caps.at(1)
        'test'
        >>> caps.pos(0)
        (0, 6)

    """

    groups: tuple[str | None, ...]
    spans: tuple[Span | None, ...]
    names: tuple[tuple[str, int], ...]

    @classmethod
    def from_match(cls, match: re.Match[str], to_byte: Callable[[int], int]) -> Captures:
        """Snapshot a match.

        Args:
            match: The match returned by the regex engine
            to_byte: Converts a character index of the matched string into an
                absolute byte offset of the scanner source

        Returns:
            New Captures with one entry per group, group 0 included.
        """
        groups: list[str | None] = []
        spans: list[Span | None] = []
        for i in range(match.re.groups + 1):
            start, end = match.span(i)
            if start == -1:
                groups.append(None)
                spans.append(None)
                continue
            groups.append(match.group(i))
            spans.append((to_byte(start), to_byte(end)))
        return cls(
            groups=tuple(groups),
            spans=tuple(spans),
            names=tuple(match.re.groupindex.items()),
        )

    def at(self, i: int) -> str | None:
        """Substring of group i, or None if absent or out of range."""
        if 0 <= i < len(self.groups):
            return self.groups[i]
        return None

    def name(self, name: str) -> str | None:
        """Substring of the named group, or None if absent or unknown."""
        i = dict(self.names).get(name)
        if i is None:
            return None
        return self.groups[i]

    def pos(self, i: int) -> Span | None:
        """Byte span of group i, or None if absent or out of range."""
        if 0 <= i < len(self.spans):
            return self.spans[i]
        return None

    def iter_pos(self) -> Iterator[Span | None]:
        return iter(self.spans)

    def groupdict(self) -> dict[str, str | None]:
        """Named groups mapped to their substrings."""
        return {name: self.groups[i] for name, i in self.names}

    @property
    def matched(self) -> str:
        """The whole match (group 0)."""
        return self.groups[0] or ""

    def __len__(self) -> int:
        """Number of groups, group 0 included."""
        return len(self.groups)

    def __iter__(self) -> Iterator[str | None]:
        return iter(self.groups)
