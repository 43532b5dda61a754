"""Calendar conversion tests.

The closed-form conversions are cross-checked against `datetime.date` and
against a plain year/month scan that lives only in this module.
"""

from __future__ import annotations

from datetime import date

import pytest

from crontick import CivilDateTime, CronError
from crontick._calendar import (
    civil_from_days,
    datetime_to_seconds,
    days_from_civil,
    days_in_month,
    is_leap_year,
    seconds_to_datetime,
    weekday,
)

_ORDINAL_EPOCH = date(1970, 1, 1).toordinal()


def _scan_days_from_civil(year: int, month: int, day: int) -> int:
    """Slow reference: walk whole years and months from the epoch."""
    days = 0
    if year >= 1970:
        for y in range(1970, year):
            days += 366 if is_leap_year(y) else 365
    else:
        for y in range(year, 1970):
            days -= 366 if is_leap_year(y) else 365
    for m in range(1, month):
        days += days_in_month(year, m)
    return days + day - 1


# =============================================================================
# Leap years and month lengths
# =============================================================================


class TestLeapYear:
    @pytest.mark.parametrize(
        "year,expected",
        [
            (2024, True),
            (2025, False),
            (1900, False),
            (2000, True),
            (2100, False),
            (2400, True),
            (0, True),
            (-4, True),
            (-100, False),
        ],
    )
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        assert is_leap_year(year) is expected


class TestDaysInMonth:
    def test_february(self) -> None:
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2024, 2) == 29
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2000, 2) == 29

    def test_thirty_day_months(self) -> None:
        assert [days_in_month(2025, m) for m in (4, 6, 9, 11)] == [30, 30, 30, 30]

    def test_thirty_one_day_months(self) -> None:
        assert [days_in_month(2025, m) for m in (1, 3, 5, 7, 8, 10, 12)] == [31] * 7


# =============================================================================
# Day count conversions
# =============================================================================


class TestDaysFromCivil:
    def test_epoch(self) -> None:
        assert days_from_civil(1970, 1, 1) == 0
        assert civil_from_days(0) == (1970, 1, 1)

    def test_known_dates(self) -> None:
        assert days_from_civil(2000, 3, 1) == 11017
        assert days_from_civil(2025, 1, 1) == 20089
        assert days_from_civil(1969, 12, 31) == -1
        assert civil_from_days(-1) == (1969, 12, 31)

    @pytest.mark.parametrize(
        "ymd",
        [
            (1970, 1, 1),
            (1999, 12, 31),
            (2000, 2, 29),
            (2024, 2, 29),
            (2025, 3, 1),
            (1900, 3, 1),
            (1600, 1, 1),
            (1, 1, 1),
            (9999, 12, 31),
        ],
        ids=lambda ymd: "%04d-%02d-%02d" % ymd,
    )
    def test_matches_stdlib(self, ymd: tuple[int, int, int]) -> None:
        expected = date(*ymd).toordinal() - _ORDINAL_EPOCH
        assert days_from_civil(*ymd) == expected
        assert civil_from_days(expected) == ymd

    def test_sampled_days_across_century_rules_match_scan(self) -> None:
        # 1896-03-01 .. 2105-02-28 spans the skipped leap days of 1900 and 2100
        for days in range(days_from_civil(1896, 3, 1), days_from_civil(2105, 3, 1), 97):
            y, m, d = civil_from_days(days)
            assert days_from_civil(y, m, d) == days
            assert _scan_days_from_civil(y, m, d) == days

    def test_far_past_and_future(self) -> None:
        for ymd in [(-4713, 11, 24), (-1, 12, 31), (0, 2, 29), (12345, 6, 7), (400000, 2, 29)]:
            days = days_from_civil(*ymd)
            assert civil_from_days(days) == ymd
            assert _scan_days_from_civil(*ymd) == days

    def test_consecutive_days_are_consecutive(self) -> None:
        y, m, d = civil_from_days(days_from_civil(2024, 2, 28) + 1)
        assert (y, m, d) == (2024, 2, 29)
        y, m, d = civil_from_days(days_from_civil(2023, 2, 28) + 1)
        assert (y, m, d) == (2023, 3, 1)
        y, m, d = civil_from_days(days_from_civil(2025, 12, 31) + 1)
        assert (y, m, d) == (2026, 1, 1)


class TestWeekday:
    def test_epoch_was_thursday(self) -> None:
        assert weekday(1970, 1, 1) == 4

    def test_known_weekdays(self) -> None:
        assert weekday(2025, 6, 13) == 5  # Friday
        assert weekday(2025, 9, 13) == 6  # Saturday
        assert weekday(2000, 1, 1) == 6  # Saturday
        assert weekday(1969, 12, 28) == 0  # Sunday, before the epoch

    def test_matches_stdlib(self) -> None:
        for days in range(-800, 800, 13):
            y, m, d = civil_from_days(days)
            # date.isoweekday: Monday=1 .. Sunday=7
            assert weekday(y, m, d) == date(y, m, d).isoweekday() % 7


# =============================================================================
# Seconds conversions
# =============================================================================


class TestSecondsConversion:
    def test_seconds_to_datetime(self, utc) -> None:
        assert seconds_to_datetime(utc("2025-01-01T12:07:05Z")) == CivilDateTime(
            2025, 1, 1, 12, 7
        )

    def test_before_epoch_floors(self) -> None:
        assert seconds_to_datetime(-1) == CivilDateTime(1969, 12, 31, 23, 59)
        assert seconds_to_datetime(-60) == CivilDateTime(1969, 12, 31, 23, 59)
        assert seconds_to_datetime(-61) == CivilDateTime(1969, 12, 31, 23, 58)

    def test_datetime_to_seconds(self, utc) -> None:
        assert datetime_to_seconds(2028, 2, 29, 0, 0) == utc("2028-02-29T00:00:00Z")
        assert datetime_to_seconds(1970, 1, 1, 0, 1) == 60
        assert datetime_to_seconds(1969, 12, 31, 23, 59) == -60

    def test_roundtrip_on_minute_boundaries(self) -> None:
        for seconds in range(-10 * 86400, 400 * 86400, 86400 * 7 + 3660):
            c = seconds_to_datetime(seconds)
            assert datetime_to_seconds(c.year, c.month, c.day, c.hour, c.minute) == seconds

    def test_str(self) -> None:
        assert str(CivilDateTime(2025, 5, 31, 9, 5)) == "2025-05-31T09:05"

    @pytest.mark.parametrize(
        "args",
        [
            (2025, 0, 1, 0, 0),
            (2025, 13, 1, 0, 0),
            (2025, 2, 29, 0, 0),
            (2025, 4, 31, 0, 0),
            (2025, 1, 0, 0, 0),
            (2025, 1, 1, 24, 0),
            (2025, 1, 1, 0, 60),
            (2025, 1, 1, -1, 0),
        ],
    )
    def test_invalid_date_raises(self, args: tuple[int, int, int, int, int]) -> None:
        with pytest.raises(CronError) as exc_info:
            datetime_to_seconds(*args)
        assert exc_info.value.kind == "calendar"
