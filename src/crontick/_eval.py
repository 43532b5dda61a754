from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from ._calendar import (
    CivilDateTime,
    datetime_to_seconds,
    days_in_month,
    seconds_to_datetime,
    weekday,
)
from ._schedule import ScheduleData

logger = logging.getLogger(__name__)

# =============================================================================
# Search Horizon
# =============================================================================
# HORIZON_YEARS (5): a search gives up once the cursor's year passes the
# starting year plus this many years, and reports no occurrence.
#
# Every carry jumps straight to the next candidate value of the coarser field,
# so the work per search is bounded by the number of candidate months, days
# and hours in the horizon, never by the number of minutes in it. Schedules
# that can never fire (e.g. "0 0 31 2 *", or an empty mask) exhaust the horizon.
# =============================================================================

HORIZON_YEARS = 5

# =============================================================================
# Day Matching (day-of-month / day-of-week union)
# =============================================================================
#   dom "*", dow "*"   -> every day of the month
#   dom "*", dow set   -> weekday bit must be set
#   dom set, dow "*"   -> day-of-month bit must be set
#   dom set, dow set   -> either bit set (union, not intersection)
#
# The wildcard flags come from the literal expression text, so "1-31" is a
# restriction even though it allows every day.
# =============================================================================


def _bit(mask: int, pos: int) -> bool:
    return (mask >> pos) & 1 == 1


def _next_bit(mask: int, start: int, end: int) -> int | None:
    """Lowest set bit in [start, end], or None."""
    for pos in range(start, end + 1):
        if _bit(mask, pos):
            return pos
    return None


def allowed_day_mask(schedule: ScheduleData, year: int, month: int, month_days: int) -> int:
    """Bits 1..month_days set for each day of (year, month) the schedule allows."""
    all_days = ((1 << (month_days + 1)) - 1) & ~1
    if schedule.dom_is_wildcard and schedule.dow_is_wildcard:
        return all_days

    dom = schedule.dom_mask & all_days
    if schedule.dow_is_wildcard:
        return dom

    first = weekday(year, month, 1)
    dow = 0
    for day in range(1, month_days + 1):
        if _bit(schedule.dow_mask, (first + day - 1) % 7):
            dow |= 1 << day
    if schedule.dom_is_wildcard:
        return dow
    return dom | dow


# --- Alignment steps ---
#
# Each step returns None when the cursor already satisfies its field, or the
# next candidate cursor otherwise. Finer fields are reset on every move.


def _align_month(schedule: ScheduleData, c: CivilDateTime) -> CivilDateTime | None:
    if _bit(schedule.month_mask, c.month):
        return None
    month = _next_bit(schedule.month_mask, c.month, 12)
    if month is not None:
        return CivilDateTime(c.year, month, 1, 0, 0)
    # An empty month mask lands on January; the horizon ends the search.
    first = _next_bit(schedule.month_mask, 1, 12)
    return CivilDateTime(c.year + 1, first if first is not None else 1, 1, 0, 0)


def _align_day(schedule: ScheduleData, c: CivilDateTime) -> CivilDateTime | None:
    month_days = days_in_month(c.year, c.month)
    allowed = allowed_day_mask(schedule, c.year, c.month, month_days)
    if _bit(allowed, c.day):
        return None
    day = _next_bit(allowed, c.day, month_days)
    if day is not None:
        return CivilDateTime(c.year, c.month, day, 0, 0)
    if c.month == 12:
        return CivilDateTime(c.year + 1, 1, 1, 0, 0)
    return CivilDateTime(c.year, c.month + 1, 1, 0, 0)


def _align_hour(schedule: ScheduleData, c: CivilDateTime) -> CivilDateTime | None:
    if _bit(schedule.hour_mask, c.hour):
        return None
    hour = _next_bit(schedule.hour_mask, c.hour, 23)
    if hour is not None:
        return CivilDateTime(c.year, c.month, c.day, hour, 0)
    # Day may run past the month end; _align_day carries it.
    return CivilDateTime(c.year, c.month, c.day + 1, 0, 0)


def _align_minute(schedule: ScheduleData, c: CivilDateTime) -> CivilDateTime | None:
    if _bit(schedule.minute_mask, c.minute):
        return None
    minute = _next_bit(schedule.minute_mask, c.minute, 59)
    if minute is not None:
        return CivilDateTime(c.year, c.month, c.day, c.hour, minute)
    return CivilDateTime(c.year, c.month, c.day, c.hour + 1, 0)


# Coarsest first; a pass restarts here after any move.
_STEPS: tuple[Callable[[ScheduleData, CivilDateTime], CivilDateTime | None], ...] = (
    _align_month,
    _align_day,
    _align_hour,
    _align_minute,
)


# --- Public API ---


def next_occurrence(schedule: ScheduleData, after_seconds: int) -> int | None:
    """Earliest whole-minute instant strictly after `after_seconds` that the schedule allows.

    Returns None if the search passes the horizon year without a match.
    """
    start = after_seconds + 60 - after_seconds % 60
    cursor = seconds_to_datetime(start)
    horizon_year = cursor.year + HORIZON_YEARS

    while cursor.year <= horizon_year:
        for step in _STEPS:
            moved = step(schedule, cursor)
            if moved is not None:
                cursor = moved
                break
        else:
            return datetime_to_seconds(
                cursor.year, cursor.month, cursor.day, cursor.hour, cursor.minute
            )

    logger.debug(
        "no occurrence after %d within %d years (searched through %d)",
        after_seconds,
        HORIZON_YEARS,
        horizon_year,
    )
    return None


def matches(schedule: ScheduleData, seconds: int) -> bool:
    if seconds % 60 != 0:
        return False
    cursor = seconds_to_datetime(seconds)
    return all(step(schedule, cursor) is None for step in _STEPS)


def next_n_from(schedule: ScheduleData, after_seconds: int, n: int) -> list[int]:
    results: list[int] = []
    current = after_seconds
    for _ in range(n):
        nxt = next_occurrence(schedule, current)
        if nxt is None:
            break
        current = nxt
        results.append(nxt)
    return results


def occurrences(schedule: ScheduleData, from_: int) -> Iterator[int]:
    """Returns a lazy iterator of occurrences strictly after `from_`.

    Ends when a search exhausts its horizon; otherwise unbounded.
    """
    current = from_
    while True:
        nxt = next_occurrence(schedule, current)
        if nxt is None:
            return
        current = nxt
        yield nxt


def between(schedule: ScheduleData, from_: int, to: int) -> Iterator[int]:
    """Returns a bounded iterator of occurrences where `from_ < occurrence <= to`."""
    for t in occurrences(schedule, from_):
        if t > to:
            return
        yield t
