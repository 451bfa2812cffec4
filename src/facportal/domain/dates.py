"""Date normalization and the clock capability.

Every comparison in the validator and the issue detector goes through
:func:`normalize_date` and :func:`today`, so intraday time never affects
ordering and "today" is re-read from the clock on every call.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Protocol

_YEAR_RE = re.compile(r"^[+-]?\d+$")


class DateParseError(TypeError):
    """Raised when a value of an unsupported type is given as a date."""


class Clock(Protocol):
    """Source of the current calendar day."""

    def today(self) -> date: ...


class SystemClock:
    """Wall clock. Reads the local date on every call, never caches."""

    def today(self) -> date:
        return date.today()

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass(frozen=True)
class FixedClock:
    """Clock pinned to a single day (tests, ``--today`` overrides)."""

    day: date

    def today(self) -> date:
        return self.day


SYSTEM_CLOCK: Clock = SystemClock()


def today(clock: Clock | None = None) -> date:
    """Normalized "today" from *clock* (default: the system clock)."""
    return (clock or SYSTEM_CLOCK).today()


def is_blank(value: Any) -> bool:
    """Whether *value* counts as "not supplied".

    ``None``, empty or whitespace-only strings, and zero are blank.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    return False


def normalize_date(value: Any) -> date | None:
    """Truncate a date-like value to its calendar date.

    Accepts ``YYYY-MM-DD`` strings, ISO-8601 timestamps (the date portion
    is kept as written, offsets are not applied), and ``date`` /
    ``datetime`` objects. Returns None for strings that cannot be parsed.

    Raises:
        DateParseError: *value* is not a string, date or datetime.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise DateParseError(f"Unsupported date value: {type(value).__name__}")

    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def parse_year(value: Any) -> int | None:
    """Parse an integer calendar year, or None when *value* is not numeric.

    Examples:
        >>> parse_year("2021")
        2021
        >>> parse_year(" 1999 ")
        1999
        >>> parse_year("20x1") is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if _YEAR_RE.match(text):
            try:
                return int(text)
            except ValueError:
                # longer than the interpreter's int conversion limit
                return None
    return None
