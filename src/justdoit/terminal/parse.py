# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from justdoit.time import naive_datetime, now_local, today_local

# Full date with optional clock time and UTC offset, dashes and colons optional:
# 2024-05-01, 20240501, 2024-05-01 09:30, 2024-05-01T09:30:15+02:00, 202405010930
DATETIME_PATTERN = re.compile(
    r"^(?P<year>\d{4})-?(?P<month>\d{2})-?(?P<day>\d{2})"
    r"(?:[T ]?(?P<hour>\d{2}):?(?P<minute>\d{2})(?::?(?P<second>\d{2}))?)?"
    r"(?P<offset>Z|[+-]\d{2}:?\d{2})?$"
)
TIME_PATTERN = re.compile(r"^(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?$")
DURATION_PATTERN = re.compile(r"^(?P<amount>\d+)\s*(?P<unit>[smhd])$")

DURATION_UNITS = {
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
}

DATETIME_HELP = "valid inputs: YYYY-MM-DD HH:mm[:ss], YYYYMMDDHHmm[ss], YYYY-MM-DD, HH:mm, now"


def parse_start_time(value: Optional[str]) -> Optional[pendulum.DateTime]:
    """Parse a window start. Missing clock fields default to zero."""
    return __parse_datetime(value, is_end=False)


def parse_end_time(value: Optional[str]) -> Optional[pendulum.DateTime]:
    """
    Parse a window end.

    An end given to the minute covers that whole minute, so the seconds default
    to 59. A bare date covers the whole day and ends at 23:59:59.
    """
    return __parse_datetime(value, is_end=True)


def parse_duration(value: Optional[str]) -> Optional[pendulum.Duration]:
    if value is None:
        return None

    match = DURATION_PATTERN.match(value.strip().lower())
    if match is None:
        raise typer.BadParameter(
            f"Incorrect duration format {value!r}, expected a number followed by s, m, h or d"
        )

    unit = DURATION_UNITS[match.group("unit")]
    return pendulum.duration(**{unit: int(match.group("amount"))})


def __parse_datetime(
    value: Optional[str], is_end: bool
) -> Optional[pendulum.DateTime]:
    if value is None:
        return None

    text = value.strip()
    if text in ("now", "n"):
        return now_local()

    default_second = 59 if is_end else 0

    time_match = TIME_PATTERN.match(text)
    if time_match:
        today = today_local()
        return __build(
            today.year,
            today.month,
            today.day,
            int(time_match.group("hour")),
            int(time_match.group("minute")),
            __second(time_match.group("second"), default_second),
        )

    match = DATETIME_PATTERN.match(text)
    if match is None:
        raise typer.BadParameter(f"Incorrect datetime format {value!r}")

    year = int(match.group("year"))
    month = int(match.group("month"))
    day = int(match.group("day"))

    # The offset is accepted but dropped: windows are measured in local wall-clock time
    if match.group("hour") is None:
        if is_end:
            return __build(year, month, day, 23, 59, 59)
        return __build(year, month, day)

    return __build(
        year,
        month,
        day,
        int(match.group("hour")),
        int(match.group("minute")),
        __second(match.group("second"), default_second),
    )


def __second(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    return int(value)


def __build(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> pendulum.DateTime:
    if hour < 0 or hour > 23:
        raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
    if minute < 0 or minute > 59:
        raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")
    if second < 0 or second > 59:
        raise typer.BadParameter(f"Second must be between 0 and 59, got {second}")
    try:
        return naive_datetime(year, month, day, hour, minute, second)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid date: {e}")
