from __future__ import annotations

import re

from ._error import CronError, Span
from ._field import parse_field
from ._schedule import DAY_OF_MONTH, DAY_OF_WEEK, FIELDS, HOUR, MINUTE, MONTH, ScheduleData

_TOKEN_RE = re.compile(r"\S+")


def parse(expression: str) -> ScheduleData:
    """Parse a 5-field cron expression into a ScheduleData."""
    tokens = list(_TOKEN_RE.finditer(expression))
    if len(tokens) != len(FIELDS):
        raise CronError.expression(
            f"expected {len(FIELDS)} cron fields, got {len(tokens)}",
            input_text=expression,
        )

    dom_is_wildcard = tokens[2].group() == "*"
    dow_is_wildcard = tokens[4].group() == "*"

    masks: dict[str, int] = {}
    for token, domain in zip(tokens, FIELDS):
        try:
            mask = parse_field(token.group(), domain.lo, domain.hi)
        except CronError as e:
            raise CronError.expression(
                f"invalid {domain.name} field: {e}",
                Span(token.start(), token.end()),
                expression,
            ) from None
        masks[domain.name] = mask & domain.mask

    return ScheduleData(
        minute_mask=masks[MINUTE.name],
        hour_mask=masks[HOUR.name],
        dom_mask=masks[DAY_OF_MONTH.name],
        month_mask=masks[MONTH.name],
        dow_mask=masks[DAY_OF_WEEK.name],
        dom_is_wildcard=dom_is_wildcard,
        dow_is_wildcard=dow_is_wildcard,
    )
