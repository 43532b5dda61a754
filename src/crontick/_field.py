from __future__ import annotations

from ._error import CronError


def parse_field(text: str, lo: int, hi: int) -> int:
    """Parse one cron field into a bitmask over the inclusive domain [lo, hi].

    Accepts ``*`` for the whole field, or a comma list whose parts are
    ``N``, ``A-B``, ``*/S`` or ``A-B/S``.
    """
    if text == "*":
        return _range_mask(lo, hi, 1)

    mask = 0
    for part in text.split(","):
        mask |= _parse_part(part, lo, hi)
    return mask


def _parse_part(part: str, lo: int, hi: int) -> int:
    if not part:
        raise CronError.field("empty list element")

    if "/" in part:
        range_part, step_str = part.split("/", 1)
        step = _parse_number(step_str, "step")
        if step == 0:
            raise CronError.field("step cannot be 0")
        if range_part == "*":
            return _range_mask(lo, hi, step)
        if "-" not in range_part:
            raise CronError.field(f"step requires * or a range, got {part!r}")
        start, end = _parse_range(range_part, lo, hi)
        return _range_mask(start, end, step)

    if "-" in part:
        start, end = _parse_range(part, lo, hi)
        return _range_mask(start, end, 1)

    value = _parse_number(part, "value")
    _check_bounds(value, lo, hi)
    return 1 << value


def _parse_range(text: str, lo: int, hi: int) -> tuple[int, int]:
    start_str, end_str = text.split("-", 1)
    start = _parse_number(start_str, "range start")
    end = _parse_number(end_str, "range end")
    _check_bounds(start, lo, hi)
    _check_bounds(end, lo, hi)
    if start > end:
        raise CronError.field(f"range start must be <= end: {start}-{end}")
    return start, end


def _parse_number(text: str, what: str) -> int:
    # ASCII digits only: str.isdigit alone admits other Unicode digits
    if not text or not (text.isascii() and text.isdigit()):
        raise CronError.field(f"invalid {what}: {text!r}")
    return int(text)


def _check_bounds(value: int, lo: int, hi: int) -> None:
    if value < lo or value > hi:
        raise CronError.field(f"value must be {lo}-{hi}, got {value}")


def _range_mask(start: int, end: int, step: int) -> int:
    mask = 0
    for value in range(start, end + 1, step):
        mask |= 1 << value
    return mask
