from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class FieldDomain:
    name: str
    lo: int
    hi: int

    @property
    def mask(self) -> int:
        """Every bit in [lo, hi] set."""
        return ((1 << (self.hi + 1)) - 1) & ~((1 << self.lo) - 1)


MINUTE = FieldDomain("minute", 0, 59)
HOUR = FieldDomain("hour", 0, 23)
DAY_OF_MONTH = FieldDomain("day-of-month", 1, 31)
MONTH = FieldDomain("month", 1, 12)
DAY_OF_WEEK = FieldDomain("day-of-week", 0, 6)

# Token order in a 5-field expression
FIELDS: tuple[FieldDomain, ...] = (MINUTE, HOUR, DAY_OF_MONTH, MONTH, DAY_OF_WEEK)


@dataclass(frozen=True, slots=True)
class ScheduleData:
    """A parsed cron expression.

    Bit *i* of a mask allows the literal field value *i*. The wildcard flags
    record whether the day-of-month / day-of-week tokens were literally ``*``;
    they select the day-matching rule and are not implied by the masks.
    """

    minute_mask: int
    hour_mask: int
    dom_mask: int
    month_mask: int
    dow_mask: int
    dom_is_wildcard: bool
    dow_is_wildcard: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "minute_mask": self.minute_mask,
            "hour_mask": self.hour_mask,
            "dom_mask": self.dom_mask,
            "month_mask": self.month_mask,
            "dow_mask": self.dow_mask,
            "dom_is_wildcard": self.dom_is_wildcard,
            "dow_is_wildcard": self.dow_is_wildcard,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ScheduleData:
        return cls(
            minute_mask=int(data["minute_mask"]),
            hour_mask=int(data["hour_mask"]),
            dom_mask=int(data["dom_mask"]),
            month_mask=int(data["month_mask"]),
            dow_mask=int(data["dow_mask"]),
            dom_is_wildcard=bool(data["dom_is_wildcard"]),
            dow_is_wildcard=bool(data["dow_is_wildcard"]),
        )
