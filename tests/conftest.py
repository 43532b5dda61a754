from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

import pytest


def parse_utc(s: str) -> int:
    """Parse '2025-01-01T12:07:05Z' into epoch seconds via the standard library."""
    dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        raise ValueError(f"expected an offset or 'Z', got: {s}")
    return int(dt.timestamp())


def format_utc(seconds: int) -> str:
    """Format epoch seconds as '2025-01-01T12:08:00Z'."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


@pytest.fixture(scope="session")
def utc() -> Callable[[str], int]:
    return parse_utc
