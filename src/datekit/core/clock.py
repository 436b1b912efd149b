"""Clock abstraction for "now"-relative predicates.

WallClock: real wall-clock time
SimClock: deterministic, manually advanced time (tests, replays)

Predicates never call datetime.now() directly; they take a clock.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Protocol


class IClock(Protocol):
    """Clock interface used by all now-relative code."""

    def now(self) -> datetime:
        """Current time as timezone-aware UTC datetime."""
        ...

    def now_ms(self) -> int:
        """Current time as milliseconds since epoch."""
        ...


class WallClock:
    """Real wall-clock time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def now_ms(self) -> int:
        return int(self.now().timestamp() * 1000)


class SimClock:
    """Simulated clock pinned to a fixed instant.

    Time moves only when set or advanced explicitly.
    """

    def __init__(self, start: datetime | None = None) -> None:
        if start is not None and start.tzinfo is None:
            raise ValueError("SimClock start must be timezone-aware")
        self._time = start or datetime(2020, 1, 1, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._time

    def now_ms(self) -> int:
        return int(self._time.timestamp() * 1000)

    def set_time(self, t: datetime) -> None:
        """Move to ``t``. Must be monotonically increasing."""
        if t < self._time:
            raise ValueError(
                f"SimClock cannot go backwards: {t} < {self._time}"
            )
        self._time = t

    def advance(self, delta: timedelta) -> None:
        """Advance time by a non-negative duration."""
        self.set_time(self._time + delta)
