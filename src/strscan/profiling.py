"""ScanAccumulator: opt-in profiling for match attempts.

This module provides accumulated metrics while scanning:
- Match attempts (scan, skip and check)
- Hits and misses
- Bytes consumed by successful scans

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from strscan import StringScanner
    from strscan.profiling import profiled_scan

    with profiled_scan() as metrics:
        scanner = StringScanner("a b c")
        while scanner.scan(r"\\w") or scanner.scan(r"\\s+"):
            pass

    print(metrics.summary())
    # {"total_ms": 0.05, "attempts": 9, "hits": 5, "misses": 4, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics for scanner match attempts.

    Attributes:
        start_time: Profiling start timestamp.
        attempts: Number of match attempts recorded.
        hits: Attempts that matched.
        misses: Attempts that did not match.
        bytes_consumed: Bytes the cursor advanced through matches.

    """

    start_time: float = field(default_factory=perf_counter)
    attempts: int = 0
    hits: int = 0
    misses: int = 0
    bytes_consumed: int = 0

    def record_attempt(self, matched: bool, consumed: int = 0) -> None:
        """Record one match attempt.

        Args:
            matched: Whether the pattern matched.
            consumed: Bytes the cursor advanced (0 for check()).

        """
        self.attempts += 1
        if matched:
            self.hits += 1
            self.bytes_consumed += consumed
        else:
            self.misses += 1

    @property
    def hit_rate(self) -> float:
        if not self.attempts:
            return 0.0
        return self.hits / self.attempts

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, attempts, hits, misses, hit_rate, bytes_consumed.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "attempts": self.attempts,
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": round(self.hit_rate, 4),
            "bytes_consumed": self.bytes_consumed,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated by match attempts.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
