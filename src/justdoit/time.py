# SPDX-License-Identifier: MIT

import datetime

import pendulum


def naive_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> pendulum.DateTime:
    return pendulum.naive(year, month, day, hour, minute, second)


def now_local() -> pendulum.DateTime:
    """Current local wall-clock time, timezone-naive and truncated to the second."""
    now = pendulum.now("local")
    return naive_datetime(
        now.year, now.month, now.day, now.hour, now.minute, now.second
    )


def today_local() -> pendulum.DateTime:
    today = pendulum.today("local")
    return naive_datetime(today.year, today.month, today.day)


def duration_between(
    start: datetime.datetime, end: datetime.datetime
) -> pendulum.Duration:
    return pendulum.duration(seconds=(end - start).total_seconds())


def datetime_to_display_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("YYYY-MM-DD HH:mm:ss")
