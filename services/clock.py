from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def today(self) -> date:
        ...


class SystemClock:
    """Current UTC calendar date."""

    def today(self) -> date:
        return datetime.now(timezone.utc).date()


class FixedClock:
    """Always returns the same date; used by tests and reproducible builds."""

    def __init__(self, value: date | str) -> None:
        if isinstance(value, str):
            value = date.fromisoformat(value)
        self._value = value

    def today(self) -> date:
        return self._value


def build_date(clock: Clock | None = None) -> str:
    """Return the build timestamp as YYYY-MM-DD."""
    return (clock or SystemClock()).today().isoformat()
