# SPDX-License-Identifier: MIT

from enum import Enum

import pendulum

from justdoit.model.timespan import Timespan, format_duration
from justdoit.rounding import round_half_up, round_ratio
from justdoit.time import datetime_to_display_str, duration_between


class Phase(Enum):
    PENDING = 0
    ACTIVE = 1
    COMPLETE = 2


class Progress:
    """
    Snapshot of a timespan evaluated at one instant.

    Instants outside the window are clamped: before the start the ratio is
    pinned at 0.0, at or after the end it is pinned at 1.0. The ratio is
    rounded to the nearest hundredth when the snapshot is taken.
    """

    def __init__(self, timespan: Timespan, current_time: pendulum.DateTime) -> None:
        self._timespan = timespan
        self._current_time = current_time

        clamped = min(max(current_time, timespan.start), timespan.end)
        self._elapsed = duration_between(timespan.start, clamped)
        self._remaining = duration_between(clamped, timespan.end)
        self._ratio = round_ratio(
            self._elapsed.total_seconds() / timespan.duration.total_seconds()
        )

    @property
    def timespan(self) -> Timespan:
        return self._timespan

    @property
    def current_time(self) -> pendulum.DateTime:
        return self._current_time

    @property
    def ratio(self) -> float:
        return self._ratio

    @property
    def percent(self) -> int:
        return round_half_up(self._ratio * 100)

    @property
    def elapsed(self) -> pendulum.Duration:
        return self._elapsed

    @property
    def remaining(self) -> pendulum.Duration:
        return self._remaining

    @property
    def phase(self) -> Phase:
        if self.is_complete():
            return Phase.COMPLETE
        if self._current_time < self._timespan.start:
            return Phase.PENDING
        return Phase.ACTIVE

    def __repr__(self) -> str:
        return (
            f"Progress({self._timespan!r}, "
            f"current_time={datetime_to_display_str(self._current_time)!r}, "
            f"ratio={self._ratio})"
        )

    def is_complete(self) -> bool:
        return self._timespan.has_expired(self._current_time)

    def format_elapsed(self) -> str:
        return format_duration(self._elapsed)

    def format_remaining(self) -> str:
        return format_duration(self._remaining)
