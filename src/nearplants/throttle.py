"""Time-based throttling of data refreshes."""

from __future__ import annotations

from typing import Optional


def refresh_due(
    now_ms: float, last_refresh_ms: Optional[float], interval_ms: float
) -> bool:
    """
    Decide whether a refresh may run at *now_ms*.

    A refresh is always due if none has happened yet (*last_refresh_ms*
    is None); otherwise at least *interval_ms* must have elapsed.
    """
    if last_refresh_ms is None:
        return True
    return now_ms - last_refresh_ms >= interval_ms


class RefreshThrottle:
    """Holds the time of the last refresh for a single caller."""

    def __init__(self, interval_ms: float):
        self.interval_ms = interval_ms
        self._last: Optional[float] = None

    @property
    def last_refresh_ms(self) -> Optional[float]:
        return self._last

    def due(self, now_ms: float) -> bool:
        return refresh_due(now_ms, self._last, self.interval_ms)

    def mark(self, now_ms: float) -> None:
        """Record that a refresh started at *now_ms*."""
        self._last = now_ms

    def reset(self) -> None:
        """Forget the last refresh so the next update is treated as the first."""
        self._last = None
