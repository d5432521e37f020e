"""
Time source for the portal.

The current time is an injected dependency so views that depend on the time
of day (the "business open" hint, the header clock) render deterministically.
"""

from datetime import datetime
from typing import Optional

# Inclusive hour window in which in-person visits are recommended
FAVORABLE_START_HOUR = 9
FAVORABLE_END_HOUR = 18


class Clock:
    """Wall clock. Subclass or replace through FastAPI dependency overrides."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """Clock frozen at a given instant."""

    def __init__(self, instant: datetime):
        self._instant = instant

    def now(self) -> datetime:
        return self._instant


_clock: Optional[Clock] = None


def get_clock() -> Clock:
    """FastAPI dependency returning the process-wide clock."""
    global _clock

    if _clock is None:
        _clock = Clock()
    return _clock


def is_favorable_time(now: datetime) -> bool:
    """True between 09:00 and 18:59 local time."""
    return FAVORABLE_START_HOUR <= now.hour <= FAVORABLE_END_HOUR
