"""Cursor-based string scanner with anchored regex matching.

A StringScanner walks a source string, attempts regular expression matches
anchored at its cursor, and remembers the captures of the most recent
attempt. Lexers build on it by calling scan() with different patterns
until one succeeds.

Positions are byte offsets into the UTF-8 encoding of the source. A match
attempt runs on the remaining text alone, exactly as if the unconsumed
suffix were the whole string: ``^``, ``\\A`` and ``\\b`` treat the cursor as
the start of the text, and lookbehind never sees consumed text.

Thread Safety:
A scanner is a single mutable cursor. Share one between threads only
behind your own lock.

"""

from __future__ import annotations

from strscan.captures import Captures
from strscan.offsets import ByteIndex
from strscan.patterns import PatternLike, compile_pattern
from strscan.profiling import get_scan_accumulator
from strscan.utils.logger import get_logger

logger = get_logger(__name__)

_ENCODING = "utf-8"


def _decode(data: bytes) -> str:
    # Stray bytes of a split character survive as lone surrogates
    return data.decode(_ENCODING, "surrogateescape")


def _encoded_len(text: str) -> int:
    return len(text.encode(_ENCODING, "surrogateescape"))


class StringScanner:
    """Lexical scanner over an immutable source string.

    Usage:
        >>> scanner = StringScanner("test\\n scan")
        >>> scanner.scan(r"\\w+")
        'test'
        >>> scanner.scan(r"\\w+") is None
        True
        >>> scanner.scan(r"\\s+")
        '\\n '
        >>> scanner.get_pos()
        6
        >>> scanner.scan(r"\\w+")
        'scan'
        >>> scanner.is_eos()
        True

    Thread Safety:
        Not safe for concurrent use. All state is instance-local.

    """

    __slots__ = (
        "_source",
        "_data",  # UTF-8 bytes of _source, for byte-level reads
        "_index",
        "_size",  # Cached byte length
        "_pos",
        "_last_match",
    )

    def __init__(self, source: str) -> None:
        """Bind the scanner to source with the cursor at the start.

        Args:
            source: Text to scan. Never modified.

        Raises:
            TypeError: If source is not a str.
        """
        if not isinstance(source, str):
            raise TypeError(f"StringScanner needs a str, got {type(source).__name__}")
        self._source = source
        self._data = source.encode(_ENCODING, "surrogatepass")
        self._index = ByteIndex(source)
        self._size = len(self._data)
        self._pos = 0
        self._last_match: Captures | None = None

    @property
    def source(self) -> str:
        """The text being scanned."""
        return self._source

    @property
    def size(self) -> int:
        """Byte length of the source; the end-of-string position."""
        return self._size

    @property
    def pos(self) -> int:
        return self._pos

    # =========================================================================
    # Position queries
    # =========================================================================

    def is_bol(self) -> bool:
        """True at the start of the source or right after a line feed."""
        if self._pos == 0:
            return True
        if self._pos > self._size:
            return False
        return self._data[self._pos - 1] == 0x0A

    def is_eos(self) -> bool:
        """True if the cursor sits exactly at the end of the source."""
        return self._pos == self._size

    def get_pos(self) -> int:
        return self._pos

    # =========================================================================
    # Position mutation
    # =========================================================================

    def set_pos(self, pos: int) -> bool:
        """Move the cursor to byte offset pos.

        Jumps may go forward or backward. Offsets inside a multi-byte
        character are allowed.

        Returns:
            True if the cursor moved, False if pos is outside [0, size].
        """
        if pos < 0 or pos > self._size:
            logger.debug("Rejected position %d (size %d)", pos, self._size)
            return False
        self._pos = pos
        return True

    def terminate(self) -> None:
        """Move the cursor to the end of the source."""
        self._pos = self._size

    def reset(self) -> None:
        """Move the cursor to the start and forget the last match."""
        self._pos = 0
        self._last_match = None

    # =========================================================================
    # Lookahead
    # =========================================================================

    def peek_bytes(self, n: int) -> str | None:
        """Up to n bytes from the cursor, without consuming them.

        Byte-oriented: if n ends inside a multi-byte character, the partial
        character comes back as surrogate escapes. Use peek_chars() when
        whole characters matter.

        Returns:
            The decoded bytes, or None at end of string.
        """
        if self.is_eos():
            return None
        end = min(self._pos + max(n, 0), self._size)
        return _decode(self._data[self._pos : end])

    def peek_chars(self, n: int) -> str | None:
        """Up to n whole characters from the cursor, without consuming them.

        Returns:
            The characters, or None at end of string.
        """
        if self.is_eos():
            return None
        n = max(n, 0)
        idx = self._index.char_index(self._pos)
        if idx is None:
            return self._tail()[:n]
        return self._source[idx : idx + n]

    def rest(self) -> str | None:
        """Unconsumed remainder of the source, or None at end of string."""
        if self.is_eos():
            return None
        return self._tail()

    def rest_size(self) -> int:
        """Number of unconsumed bytes."""
        return self._size - self._pos

    def _tail(self) -> str:
        idx = self._index.char_index(self._pos)
        if idx is not None:
            return self._source[idx:]
        return _decode(self._data[self._pos :])

    # =========================================================================
    # Single-unit consumption
    # =========================================================================

    def get_byte(self) -> int | None:
        """Consume one byte and return its value.

        Byte-level read, blind to character boundaries: on non-ASCII text
        this may return a byte from the middle of a character and leave the
        cursor inside it. Use get_char() for character semantics.
        """
        if self.is_eos():
            return None
        value = self._data[self._pos]
        self._pos += 1
        return value

    def get_char(self) -> str | None:
        """Consume one whole character and return it.

        If the cursor sits inside a character (after get_byte() or
        set_pos()), the stray byte is consumed alone and returned as a
        surrogate escape.
        """
        if self.is_eos():
            return None
        idx = self._index.char_index(self._pos)
        if idx is None:
            ch = _decode(self._data[self._pos : self._pos + 1])
            self._pos += 1
            return ch
        ch = self._source[idx]
        self._pos = self._index.byte_offset(idx + 1)
        return ch

    # =========================================================================
    # Anchored matching
    # =========================================================================

    def scan(self, pattern: PatternLike) -> str | None:
        """Match pattern at the cursor and consume the match.

        Args:
            pattern: Compiled pattern or pattern string

        Returns:
            The matched text, or None if the pattern does not match here.
            A miss clears the last match and leaves the cursor alone.

        Raises:
            PatternError: If a pattern string does not compile.
        """
        caps = self._match(pattern)
        if caps is None:
            self._record(False)
            return None
        start, end = caps.spans[0]
        self._pos = end
        self._record(True, end - start)
        return caps.matched

    def skip(self, pattern: PatternLike) -> int | None:
        """Like scan(), but return the number of bytes consumed."""
        start = self._pos
        if self.scan(pattern) is None:
            return None
        return self._pos - start

    def check(self, pattern: PatternLike) -> bool:
        """Match pattern at the cursor without consuming anything.

        The captures are still recorded (or cleared on a miss), so
        match_at() and friends see the outcome.
        """
        caps = self._match(pattern)
        self._record(caps is not None)
        return caps is not None

    def _match(self, pattern: PatternLike) -> Captures | None:
        compiled = compile_pattern(pattern)
        base = self._pos
        idx = self._index.char_index(base)
        tail = self._tail()
        # The remainder is matched on its own, so ^, \A and \b see the cursor as the start
        m = compiled.match(tail)
        if m is None:
            self._last_match = None
            return None

        def to_byte(i: int) -> int:
            if idx is not None:
                return self._index.byte_offset(idx + i)
            return base + _encoded_len(tail[:i])

        self._last_match = Captures.from_match(m, to_byte)
        return self._last_match

    def _record(self, matched: bool, consumed: int = 0) -> None:
        acc = get_scan_accumulator()
        if acc is not None:
            acc.record_attempt(matched, consumed)

    # =========================================================================
    # Last match accessors
    # =========================================================================

    def captures(self) -> Captures | None:
        """Captures of the last match attempt, or None if it failed."""
        return self._last_match

    def match_at(self, i: int) -> str | None:
        """Substring of group i of the last match, if any."""
        if self._last_match is None:
            return None
        return self._last_match.at(i)

    def match_name(self, name: str) -> str | None:
        """Substring of the named group of the last match, if any."""
        if self._last_match is None:
            return None
        return self._last_match.name(name)

    def __repr__(self) -> str:
        if self._last_match is None:
            matchdata = "None"
        else:
            matchdata = repr(list(self._last_match.iter_pos()))
        return f"StringScanner(pos={self._pos}, size={self._size}, matchdata={matchdata})"
