"""Clock-time windows shared by the promotion resolvers."""

import re
from collections.abc import Collection
from dataclasses import dataclass
from datetime import datetime

DAYS_PER_WEEK = 7
MINUTES_PER_DAY = 24 * 60
_CLOCK_TIME = re.compile(r"^(\d{1,2}):(\d{2})$")
_MAX_HOUR = 23
_MAX_MINUTE = 59


def parse_clock_time(value: str) -> int | None:
    """Return minutes since midnight for an HH:MM string, or None if malformed."""
    match = _CLOCK_TIME.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > _MAX_HOUR or minute > _MAX_MINUTE:
        return None
    return hour * 60 + minute


def minutes_of_day(now: datetime) -> int:
    """Return minutes since local midnight, ignoring seconds."""
    return now.hour * 60 + now.minute


def day_of_week(now: datetime) -> int:
    """Return the weekday with Sunday as 0."""
    return (now.weekday() + 1) % DAYS_PER_WEEK


@dataclass(frozen=True)
class ClockWindow:
    """Inclusive window between two clock times.

    A window whose start is later than its end spans midnight: it opens on a
    scheduled day and closes on the following calendar day.
    """

    start: int
    end: int

    @classmethod
    def parse(cls, start_time: str, end_time: str) -> "ClockWindow | None":
        """Build a window from HH:MM bounds, or return None if either is malformed."""
        start = parse_clock_time(start_time)
        end = parse_clock_time(end_time)
        if start is None or end is None:
            return None
        return cls(start=start, end=end)

    @property
    def overnight(self) -> bool:
        return self.start > self.end

    def contains(self, minute: int) -> bool:
        """Return True when a minute of the day lies inside the window."""
        if self.overnight:
            return minute >= self.start or minute <= self.end
        return self.start <= minute <= self.end

    def is_open(self, days: Collection[int], now: datetime) -> bool:
        """Return True when now falls inside the window on a scheduled day."""
        minute = minutes_of_day(now)
        today = day_of_week(now)
        if not self.overnight:
            return today in days and self.contains(minute)
        if today in days and minute >= self.start:
            return True
        yesterday = (today - 1) % DAYS_PER_WEEK
        return yesterday in days and minute <= self.end


def window_is_open(
    days: Collection[int], start_time: str, end_time: str, now: datetime
) -> bool:
    """Return True when the HH:MM window is open at now; malformed bounds never open."""
    window = ClockWindow.parse(start_time, end_time)
    if window is None:
        return False
    return window.is_open(days, now)
