from __future__ import annotations

from ._schedule import DAY_OF_MONTH, DAY_OF_WEEK, HOUR, MINUTE, MONTH, FieldDomain, ScheduleData


def display(schedule: ScheduleData) -> str:
    dom = "*" if schedule.dom_is_wildcard else _display_mask(schedule.dom_mask, DAY_OF_MONTH)
    dow = "*" if schedule.dow_is_wildcard else _display_mask(schedule.dow_mask, DAY_OF_WEEK)
    return " ".join(
        (
            _display_full_or_mask(schedule.minute_mask, MINUTE),
            _display_full_or_mask(schedule.hour_mask, HOUR),
            dom,
            _display_full_or_mask(schedule.month_mask, MONTH),
            dow,
        )
    )


def _display_full_or_mask(mask: int, domain: FieldDomain) -> str:
    if mask & domain.mask == domain.mask:
        return "*"
    return _display_mask(mask, domain)


def _display_mask(mask: int, domain: FieldDomain) -> str:
    """Render set bits as a comma list, collapsing runs of 3+ into A-B."""
    values = [v for v in range(domain.lo, domain.hi + 1) if (mask >> v) & 1]
    if not values:
        # No expression parses to an empty mask; only hand-built data reaches here.
        return "<none>"

    runs: list[list[int]] = []
    for v in values:
        if runs and v == runs[-1][-1] + 1:
            runs[-1].append(v)
        else:
            runs.append([v])

    parts: list[str] = []
    for run in runs:
        if len(run) >= 3:
            parts.append(f"{run[0]}-{run[-1]}")
        else:
            parts.extend(str(v) for v in run)
    return ",".join(parts)
