"""
Tests for date arithmetic and date labels

Calendar-only strings must keep their calendar date whatever the host
timezone; the host_tz fixture reruns the affected tests under several
POSIX TZ settings (UTC, six hours west, nine and twelve hours east).
"""

import time
from datetime import date, datetime, timedelta, timezone

import pytest

from flockcalc.display.dates import (
    days_between,
    days_to_weeks,
    format_date,
    format_date_long,
    format_date_short,
    get_current_week,
    get_relative_time,
    is_today,
    parse_date_input,
    resolve_now,
    to_iso_date_string,
)
from flockcalc.display.locale import DisplayLocale

# TZ value -> UTC offset in hours (POSIX sign is inverted)
HOST_TIMEZONES = {
    "UTC0": 0,
    "CST6": -6,
    "JST-9": 9,
    "NZST-12": 12,
}


@pytest.fixture(params=sorted(HOST_TIMEZONES))
def host_tz(request, monkeypatch):
    """Run the test with the process timezone set to each entry of HOST_TIMEZONES."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", request.param)
    time.tzset()
    yield HOST_TIMEZONES[request.param]
    monkeypatch.undo()
    time.tzset()


# =============================================================================
# PARSING
# =============================================================================


class TestParseDateInput:
    def test_calendar_only_string_is_local_midnight(self, host_tz) -> None:
        assert parse_date_input("2025-01-15") == datetime(2025, 1, 15)

    def test_surrounding_whitespace(self) -> None:
        assert parse_date_input(" 2025-01-15 ") == datetime(2025, 1, 15)

    def test_date_object(self) -> None:
        assert parse_date_input(date(2025, 3, 1)) == datetime(2025, 3, 1)

    def test_naive_datetime_unchanged(self) -> None:
        value = datetime(2025, 3, 1, 14, 30)
        assert parse_date_input(value) == value

    def test_naive_timestamp_string(self) -> None:
        assert parse_date_input("2025-01-15T14:03:22") == datetime(2025, 1, 15, 14, 3, 22)

    def test_aware_timestamp_converted_to_local(self, host_tz) -> None:
        parsed = parse_date_input("2025-01-15T03:00:00+00:00")
        assert parsed.tzinfo is None
        assert parsed == datetime(2025, 1, 15, 3) + timedelta(hours=host_tz)

    def test_aware_datetime_converted_to_local(self, host_tz) -> None:
        value = datetime(2025, 6, 1, 12, tzinfo=timezone.utc)
        assert parse_date_input(value) == datetime(2025, 6, 1, 12) + timedelta(hours=host_tz)

    def test_other_date_strings(self) -> None:
        assert parse_date_input("January 15, 2025") == datetime(2025, 1, 15)
        assert parse_date_input("15 Jan 2025 10:30") == datetime(2025, 1, 15, 10, 30)

    def test_partial_string_does_not_borrow_from_today(self) -> None:
        # a missing year, month or day is never filled from the clock
        assert parse_date_input("12") is None
        assert days_between("12", "2025-01-01") == 0
        assert get_relative_time("March 3", now="2025-06-15") == "N/A"

    @pytest.mark.parametrize(
        "raw",
        [None, "", "   ", "invalid", "2025-02-30", "2025-13-01", "12", "March 3", "2025 March", 12345, [], object()],
    )
    def test_unreadable_values(self, raw) -> None:
        assert parse_date_input(raw) is None


class TestResolveNow:
    def test_explicit_value(self) -> None:
        assert resolve_now("2025-01-15") == datetime(2025, 1, 15)

    def test_default_is_current_time(self) -> None:
        before = datetime.now()
        assert before <= resolve_now(None) <= datetime.now()

    def test_unreadable_value_falls_back_to_current_time(self) -> None:
        before = datetime.now()
        assert before <= resolve_now("garbage") <= datetime.now()


# =============================================================================
# FORMATTING
# =============================================================================


class TestToIsoDateString:
    def test_calendar_only_round_trip(self, host_tz) -> None:
        assert to_iso_date_string("2025-01-15") == "2025-01-15"
        assert to_iso_date_string("2024-12-31") == "2024-12-31"

    def test_date_and_datetime(self) -> None:
        assert to_iso_date_string(date(2025, 1, 15)) == "2025-01-15"
        assert to_iso_date_string(datetime(2025, 1, 15, 23, 59)) == "2025-01-15"

    def test_no_date(self) -> None:
        assert to_iso_date_string(None) == "N/A"
        assert to_iso_date_string("invalid") == "N/A"


class TestFormatDate:
    def test_short(self, host_tz) -> None:
        label = format_date_short("2025-01-15")
        assert label.startswith("15 ")
        assert "ene" in label
        assert "2025" not in label

    def test_default(self, host_tz) -> None:
        label = format_date("2025-01-15")
        assert label.startswith("15 ")
        assert "ene" in label
        assert label.endswith("2025")

    def test_long(self) -> None:
        label = format_date_long("2025-01-15")
        assert "15" in label
        assert "enero" in label
        assert "2025" in label

    def test_other_locale(self) -> None:
        display = DisplayLocale(date_locale="en_US")
        assert "Jan" in format_date("2025-01-15", display=display)

    @pytest.mark.parametrize("formatter", [format_date_short, format_date, format_date_long])
    def test_no_date(self, formatter) -> None:
        assert formatter(None) == "N/A"
        assert formatter("not a date") == "N/A"


# =============================================================================
# ARITHMETIC
# =============================================================================


class TestDaysBetween:
    def test_whole_days(self) -> None:
        assert days_between("2025-01-01", "2025-01-11") == 10

    def test_same_day(self) -> None:
        assert days_between("2025-01-01", "2025-01-01") == 0

    def test_partial_day_rounds_up(self) -> None:
        assert days_between("2025-01-01", datetime(2025, 1, 2, 1)) == 2
        assert days_between("2025-01-01", datetime(2025, 1, 1, 0, 0, 1)) == 1

    def test_end_before_start(self) -> None:
        assert days_between("2025-01-11", "2025-01-01") == -10

    def test_unparseable_bound(self) -> None:
        assert days_between("invalid", "2025-01-11") == 0
        assert days_between("2025-01-01", "invalid") == 0
        assert days_between(None, "2025-01-11") == 0

    def test_default_end_is_now(self) -> None:
        start = datetime.now() - timedelta(days=3, hours=1)
        assert days_between(start) == 4

    def test_calendar_strings_ignore_host_timezone(self, host_tz) -> None:
        assert days_between("2025-03-01", "2025-03-31") == 30


class TestDaysToWeeks:
    @pytest.mark.parametrize(
        "days, weeks", [(0, 0), (1, 1), (7, 1), (8, 2), (14, 2), (15, 3), (45, 7)]
    )
    def test_rounds_up(self, days, weeks) -> None:
        assert days_to_weeks(days) == weeks

    def test_invalid(self) -> None:
        assert days_to_weeks(None) == 0


class TestGetCurrentWeek:
    START = "2025-01-01"

    @pytest.mark.parametrize(
        "now, week",
        [
            ("2025-01-01", 1),
            ("2025-01-02", 1),
            ("2025-01-08", 1),
            ("2025-01-09", 2),
            ("2025-01-15", 2),
            ("2025-01-16", 3),
            ("2025-02-06", 6),
            ("2025-06-01", 6),
        ],
    )
    def test_week_number(self, now, week) -> None:
        assert get_current_week(self.START, now=now) == week

    def test_start_in_future(self) -> None:
        assert get_current_week("2025-02-01", now="2025-01-01") == 1

    def test_invalid_start(self) -> None:
        assert get_current_week("invalid", now="2025-01-01") == 1
        assert get_current_week(None) == 1

    def test_host_timezone_does_not_shift_week(self, host_tz) -> None:
        assert get_current_week("2025-01-01", now=datetime(2025, 1, 9, 0, 30)) == 2


class TestIsToday:
    def test_same_day(self) -> None:
        assert is_today("2025-01-15", now=datetime(2025, 1, 15, 23, 59))

    def test_other_day(self) -> None:
        assert not is_today("2025-01-14", now=datetime(2025, 1, 15, 0, 1))

    def test_unreadable(self) -> None:
        assert not is_today(None)
        assert not is_today("invalid")

    def test_default_now(self) -> None:
        assert is_today(datetime.now())


class TestGetRelativeTime:
    NOW = datetime(2025, 6, 15, 10, 0)

    @pytest.mark.parametrize(
        "value, label",
        [
            (datetime(2025, 6, 15, 8, 0), "Hoy"),
            ("2025-06-15", "Hoy"),
            ("2025-06-14", "Ayer"),
            ("2025-06-12", "Hace 3 días"),
            ("2025-06-09", "Hace 6 días"),
            ("2025-06-08", "Hace 1 semanas"),
            ("2025-06-01", "Hace 2 semanas"),
            ("2025-05-16", "Hace 1 meses"),
            ("2025-04-15", "Hace 2 meses"),
            ("2024-06-15", "Hace 1 años"),
            ("2022-06-01", "Hace 3 años"),
        ],
    )
    def test_labels(self, value, label) -> None:
        assert get_relative_time(value, now=self.NOW) == label

    def test_future_date(self) -> None:
        assert get_relative_time("2025-06-20", now=self.NOW) == "Hace -5 días"

    def test_unreadable(self) -> None:
        assert get_relative_time("invalid", now=self.NOW) == "N/A"


class TestDefaultNow:
    """Functions called without now= use the current local time"""

    def test_current_week_of_old_batch(self) -> None:
        assert get_current_week(datetime.now() - timedelta(days=100)) == 6

    def test_current_week_of_new_batch(self) -> None:
        assert get_current_week(date.today()) == 1

    def test_relative_time_three_days_ago(self) -> None:
        assert get_relative_time(datetime.now() - timedelta(days=3)) == "Hace 3 días"
