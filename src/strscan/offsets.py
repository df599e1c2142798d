"""Byte offset <-> character index mapping.

Scanner positions are byte offsets into the UTF-8 encoding of the source,
while Python strings are indexed by code point. ByteIndex converts between
the two so matching can run on the original string without copying it.

ASCII sources map one-to-one and never build a table.

Thread Safety:
ByteIndex is immutable after construction and safe to share.

"""

from __future__ import annotations

from bisect import bisect_left
from itertools import accumulate


def utf8_width(ch: str) -> int:
    """Number of bytes the UTF-8 encoding of a single character occupies.

    Lone surrogates count as three bytes, matching the "surrogatepass"
    error handler.
    """
    cp = ord(ch)
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    return 4


class ByteIndex:
    """Maps character indices of a string to UTF-8 byte offsets.

    Usage:
        >>> index = ByteIndex("Löwe")
        >>> index.size
        5
        >>> index.byte_offset(2)
        3
        >>> index.char_index(3)
        2
        >>> index.char_index(2) is None  # inside "ö"
        True

    """

    __slots__ = ("_starts", "_size")

    def __init__(self, source: str) -> None:
        if source.isascii():
            self._starts: list[int] | None = None
            self._size = len(source)
        else:
            # _starts[i] is the byte offset of character i; last entry is the size
            self._starts = [0, *accumulate(utf8_width(ch) for ch in source)]
            self._size = self._starts[-1]

    @property
    def size(self) -> int:
        """Total byte length of the source."""
        return self._size

    @property
    def is_ascii(self) -> bool:
        return self._starts is None

    def byte_offset(self, char_index: int) -> int:
        """Byte offset where the character at char_index starts.

        char_index may equal the character length, giving the byte size.
        """
        if self._starts is None:
            return char_index
        return self._starts[char_index]

    def char_index(self, byte_offset: int) -> int | None:
        """Character index starting at byte_offset.

        Returns:
            The index, or None when byte_offset falls inside a character
            or outside the source.
        """
        if byte_offset < 0 or byte_offset > self._size:
            return None
        if self._starts is None:
            return byte_offset
        i = bisect_left(self._starts, byte_offset)
        if self._starts[i] == byte_offset:
            return i
        return None
