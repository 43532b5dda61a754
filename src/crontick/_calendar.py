"""Exact proleptic-Gregorian arithmetic on a single UTC-like clock.

Day counts are relative to 1970-01-01. The conversions use the closed-form
shifted-epoch method: the year is taken to start on March 1 so the leap day
is the last day of the year, and 400-year eras repeat exactly.
"""

from __future__ import annotations

from dataclasses import dataclass

from ._error import CronError

SECONDS_PER_DAY = 86400

# 1970-01-01 -> 0000-03-01 in the shifted calendar
_EPOCH_SHIFT = 719468
_DAYS_PER_ERA = 146097

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True, slots=True)
class CivilDateTime:
    year: int
    month: int
    day: int
    hour: int
    minute: int

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}"
        )


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a civil date. Negative before the epoch."""
    y = year - (month <= 2)
    era = y // 400
    yoe = y - era * 400
    # March = 0 ... February = 11
    mp = (month + 9) % 12
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * _DAYS_PER_ERA + doe - _EPOCH_SHIFT


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of `days_from_civil`: (year, month, day) for a day count."""
    z = days + _EPOCH_SHIFT
    era = z // _DAYS_PER_ERA
    doe = z - era * _DAYS_PER_ERA
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = (mp + 2) % 12 + 1
    year = yoe + era * 400 + (month <= 2)
    return year, month, day


def weekday(year: int, month: int, day: int) -> int:
    """Day of week with Sunday = 0. Day 0 of the epoch was a Thursday."""
    return (days_from_civil(year, month, day) + 4) % 7


def seconds_to_datetime(seconds: int) -> CivilDateTime:
    days, rem = divmod(seconds, SECONDS_PER_DAY)
    hour, rem = divmod(rem, 3600)
    year, month, day = civil_from_days(days)
    return CivilDateTime(year, month, day, hour, rem // 60)


def datetime_to_seconds(year: int, month: int, day: int, hour: int, minute: int) -> int:
    if not 1 <= month <= 12:
        raise CronError.calendar(f"month must be 1-12, got {month}")
    dim = days_in_month(year, month)
    if not 1 <= day <= dim:
        raise CronError.calendar(f"day must be 1-{dim} for {year:04d}-{month:02d}, got {day}")
    if not 0 <= hour <= 23:
        raise CronError.calendar(f"hour must be 0-23, got {hour}")
    if not 0 <= minute <= 59:
        raise CronError.calendar(f"minute must be 0-59, got {minute}")
    return days_from_civil(year, month, day) * SECONDS_PER_DAY + hour * 3600 + minute * 60
