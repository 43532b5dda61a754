from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timezone
from typing import Any

from ._calendar import CivilDateTime, datetime_to_seconds, seconds_to_datetime
from ._display import display
from ._error import CronError, CronErrorKind, Span
from ._eval import HORIZON_YEARS, allowed_day_mask, next_occurrence
from ._eval import between as _between
from ._eval import matches as _matches
from ._eval import next_n_from as _next_n_from
from ._eval import occurrences as _occurrences
from ._parser import parse
from ._schedule import FIELDS, FieldDomain, ScheduleData


class Schedule:
    _data: ScheduleData

    def __init__(self, data: ScheduleData) -> None:
        self._data = data

    @classmethod
    def parse(cls, expression: str) -> Schedule:
        return cls(parse(expression))

    @classmethod
    def from_data(cls, data: ScheduleData | dict[str, Any]) -> Schedule:
        if isinstance(data, dict):
            data = ScheduleData.from_dict(data)
        return cls(data)

    @classmethod
    def validate(cls, expression: str) -> bool:
        try:
            parse(expression)
            return True
        except CronError:
            return False

    def next_from(self, after: int) -> int | None:
        return next_occurrence(self._data, after)

    def next_n_from(self, after: int, n: int) -> list[int]:
        return _next_n_from(self._data, after, n)

    def matches(self, seconds: int) -> bool:
        return _matches(self._data, seconds)

    def occurrences(self, from_: int) -> Iterator[int]:
        """Returns a lazy iterator of occurrences strictly after `from_`.

        The iterator stops only when no occurrence exists within the search
        horizon, so for most schedules it must be limited by the caller.
        """
        return _occurrences(self._data, from_)

    def between(self, from_: int, to: int) -> Iterator[int]:
        """Returns a bounded iterator of occurrences where `from_ < occurrence <= to`."""
        return _between(self._data, from_, to)

    def next_datetime(self, now: datetime) -> datetime | None:
        """`next_from` for datetimes. Naive input is read as UTC; the result is UTC."""
        if now.tzinfo is not None:
            now = now.astimezone(timezone.utc)
        after = (
            datetime_to_seconds(now.year, now.month, now.day, now.hour, now.minute) + now.second
        )
        nxt = next_occurrence(self._data, after)
        if nxt is None:
            return None
        c = seconds_to_datetime(nxt)
        return datetime(c.year, c.month, c.day, c.hour, c.minute, tzinfo=timezone.utc)

    def to_dict(self) -> dict[str, Any]:
        return self._data.to_dict()

    def __str__(self) -> str:
        return display(self._data)

    def __repr__(self) -> str:
        return f"Schedule({display(self._data)!r})"

    @property
    def data(self) -> ScheduleData:
        return self._data


__all__ = [
    "Schedule",
    "ScheduleData",
    "CivilDateTime",
    "FieldDomain",
    "FIELDS",
    "HORIZON_YEARS",
    "CronError",
    "CronErrorKind",
    "Span",
    "parse",
    "next_occurrence",
    "allowed_day_mask",
    "display",
]
