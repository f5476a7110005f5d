"""Time arithmetic: gigasecond anniversaries and a date-less clock."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

GIGASECOND = timedelta(seconds=1_000_000_000)
_MINUTES_PER_DAY = 24 * 60


def add_gigasecond(moment: datetime) -> datetime:
    """Return the moment one gigasecond after ``moment``."""
    return moment + GIGASECOND


@dataclass(frozen=True, init=False)
class Clock:
    """A time of day in hours and minutes, with no date attached."""

    minutes_of_day: int

    def __init__(self, hours: int = 0, minutes: int = 0) -> None:
        object.__setattr__(
            self, "minutes_of_day", (hours * 60 + minutes) % _MINUTES_PER_DAY
        )

    def add(self, minutes: int) -> Clock:
        """Return a clock ``minutes`` later."""
        return Clock(0, self.minutes_of_day + minutes)

    def subtract(self, minutes: int) -> Clock:
        """Return a clock ``minutes`` earlier."""
        return Clock(0, self.minutes_of_day - minutes)

    def __str__(self) -> str:
        hours, minutes = divmod(self.minutes_of_day, 60)
        return f"{hours:02d}:{minutes:02d}"