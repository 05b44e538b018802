import pytest
import typer

from justdoit.terminal import parse
from justdoit.terminal.parse import parse_duration, parse_end_time, parse_start_time
from justdoit.time import naive_datetime


@pytest.fixture
def frozen_today(monkeypatch):
    monkeypatch.setattr(parse, "today_local", lambda: naive_datetime(2024, 6, 15))
    monkeypatch.setattr(parse, "now_local", lambda: naive_datetime(2024, 6, 15, 14, 7, 33))


class TestParseStartTime:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2024-05-01 09:30:15", naive_datetime(2024, 5, 1, 9, 30, 15)),
            ("2024-05-01T09:30:15", naive_datetime(2024, 5, 1, 9, 30, 15)),
            ("2024-05-01T09:30:15+02:00", naive_datetime(2024, 5, 1, 9, 30, 15)),
            ("2024-05-01T09:30:15Z", naive_datetime(2024, 5, 1, 9, 30, 15)),
            ("2024-05-01 09:30", naive_datetime(2024, 5, 1, 9, 30, 0)),
            ("20240501093015", naive_datetime(2024, 5, 1, 9, 30, 15)),
            ("202405010930", naive_datetime(2024, 5, 1, 9, 30, 0)),
            ("2024-05-01", naive_datetime(2024, 5, 1)),
            ("20240501", naive_datetime(2024, 5, 1)),
        ],
    )
    def test_formats(self, value, expected):
        assert parse_start_time(value) == expected

    def test_clock_time_is_today(self, frozen_today):
        assert parse_start_time("9:05") == naive_datetime(2024, 6, 15, 9, 5, 0)

    def test_now(self, frozen_today):
        assert parse_start_time("now") == naive_datetime(2024, 6, 15, 14, 7, 33)
        assert parse_start_time("n") == naive_datetime(2024, 6, 15, 14, 7, 33)

    def test_none(self):
        assert parse_start_time(None) is None

    @pytest.mark.parametrize(
        "value",
        ["tomorrowish", "2024-13-01", "2024-02-30", "25:00", "12:61", "2024-05-01 24:00", ""],
    )
    def test_invalid(self, value):
        with pytest.raises(typer.BadParameter):
            parse_start_time(value)


class TestParseEndTime:
    def test_minute_precision_covers_the_minute(self):
        assert parse_end_time("2024-05-01 17:30") == naive_datetime(2024, 5, 1, 17, 30, 59)
        assert parse_end_time("202405011730") == naive_datetime(2024, 5, 1, 17, 30, 59)

    def test_seconds_kept(self):
        assert parse_end_time("2024-05-01 17:30:05") == naive_datetime(2024, 5, 1, 17, 30, 5)

    def test_date_covers_the_day(self):
        assert parse_end_time("2024-05-01") == naive_datetime(2024, 5, 1, 23, 59, 59)
        assert parse_end_time("20240501") == naive_datetime(2024, 5, 1, 23, 59, 59)

    def test_clock_time(self, frozen_today):
        assert parse_end_time("17:00") == naive_datetime(2024, 6, 15, 17, 0, 59)


class TestParseDuration:
    @pytest.mark.parametrize(
        "value, seconds",
        [
            ("90s", 90),
            ("25m", 1500),
            ("2h", 7200),
            ("3d", 259200),
            (" 5 M ", 300),
            ("0m", 0),
        ],
    )
    def test_units(self, value, seconds):
        assert parse_duration(value).total_seconds() == seconds

    @pytest.mark.parametrize("value", ["10x", "m", "1.5h", "-5m", "1h30m"])
    def test_invalid(self, value):
        with pytest.raises(typer.BadParameter):
            parse_duration(value)

    def test_none(self):
        assert parse_duration(None) is None
