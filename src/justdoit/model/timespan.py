# SPDX-License-Identifier: MIT

from typing import TYPE_CHECKING, Optional

import pendulum

from justdoit.time import datetime_to_display_str, duration_between

if TYPE_CHECKING:
    from justdoit.model.progress import Progress

# Boundary formats, chosen by the length of the window
CLOCK_FORMAT = "HH:mm"
CALENDAR_CLOCK_FORMAT = "MM-DD HH:mm"
CALENDAR_FORMAT = "YYYY-MM-DD"

DAYS_PER_YEAR = 365


class InvalidWindowError(ValueError):
    """Raised when a window's start is not strictly before its end."""

    def __init__(self, start: pendulum.DateTime, end: pendulum.DateTime) -> None:
        super().__init__(
            f"The end {datetime_to_display_str(end)} must be after "
            f"the start {datetime_to_display_str(start)}."
        )
        self.start = start
        self.end = end


class Timespan:
    """An immutable [start, end) window of naive local wall-clock time."""

    def __init__(self, start: pendulum.DateTime, end: pendulum.DateTime) -> None:
        if start >= end:
            raise InvalidWindowError(start, end)
        self._start = start
        self._end = end
        self._duration = duration_between(start, end)

    @property
    def start(self) -> pendulum.DateTime:
        return self._start

    @property
    def end(self) -> pendulum.DateTime:
        return self._end

    @property
    def duration(self) -> pendulum.Duration:
        return self._duration

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timespan):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        return (
            f"Timespan(start={datetime_to_display_str(self._start)!r}, "
            f"end={datetime_to_display_str(self._end)!r})"
        )

    def has_expired(self, instant: pendulum.DateTime) -> bool:
        return instant >= self._end

    def progress(self, instant: pendulum.DateTime) -> "Progress":
        # Imported here to avoid a circular import
        from justdoit.model.progress import Progress

        return Progress(self, instant)

    def boundary_format(self) -> str:
        """
        Pick a display format for the start and end from the window length.

        Short windows show clock times, windows of a few days add the calendar
        day, and anything three weeks or longer shows only the date.
        """
        if self._duration.in_hours() < 24:
            return CLOCK_FORMAT
        if self._duration.in_weeks() < 3:
            return CALENDAR_CLOCK_FORMAT
        return CALENDAR_FORMAT

    def format_start(self, format: Optional[str] = None) -> str:
        return self._start.format(format or self.boundary_format())

    def format_end(self, format: Optional[str] = None) -> str:
        return self._end.format(format or self.boundary_format())

    def format_total(self) -> str:
        return format_duration(self._duration)


def format_duration(duration: pendulum.Duration) -> str:
    """
    Render a duration in the largest sensible units.

    Examples:
        50 minutes -> "50 m"
        95 minutes -> "1 h 35 m"
        3 days 12 hours -> "3 d 12 h"
        800 days -> "2 y"

    Years are whole multiples of 365 days; leap years are not accounted for.
    """
    minutes = duration.in_minutes()
    hours = duration.in_hours()
    days = duration.in_days()

    if minutes < 60:
        return f"{minutes} m"
    if hours < 24:
        if minutes % 60 == 0:
            return f"{hours} h"
        return f"{hours} h {minutes % 60} m"
    if days < 7:
        if hours % 24 == 0:
            return f"{days} d"
        return f"{days} d {hours % 24} h"
    if days < DAYS_PER_YEAR:
        return f"{days} d"
    return f"{days // DAYS_PER_YEAR} y"
