"""Submission-time validators for dates, years, and date ranges.

Each validator is pure, reads "today" from the injected clock exactly
once, evaluates its rules in a fixed order, and returns a single
:class:`Verdict` describing the first failing rule. Bad input is never
raised; it is the verdict.

Rule order (first failure wins):

- ``is_realistic_date``: required, parseable, >= min_year, not future.
- ``is_realistic_year``: required, numeric, >= min_year, <= current year.
- ``is_start_before_end``: both required, both parseable, start not
  future, end not future, start strictly before end.
- ``is_start_before_end_or_ongoing``: start required, start parseable,
  start not future, empty end accepted, end parseable, end not future,
  start strictly before end.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from facportal.domain.dates import (
    Clock,
    DateParseError,
    is_blank,
    normalize_date,
    parse_year,
    today,
)
from facportal.domain.types import ErrorKind, Subject
from facportal.domain.verdicts import Verdict

DEFAULT_MIN_YEAR = 1900
DEFAULT_MIN_AGE = 18


def _normalize(value: Any, subject: Subject) -> date | Verdict:
    """Parse *value* or return the malformed-value verdict for *subject*."""
    try:
        day = normalize_date(value)
    except DateParseError:
        return Verdict.fail(ErrorKind.MALFORMED_VALUE, Subject.VALUE)
    if day is None:
        return Verdict.fail(ErrorKind.MALFORMED_VALUE, subject)
    return day


def is_future_date(value: Any, *, clock: Clock | None = None) -> bool:
    """Whether *value* is a parseable date strictly after today.

    Empty and unparsable values are never "in the future".
    """
    if is_blank(value):
        return False
    try:
        day = normalize_date(value)
    except DateParseError:
        return False
    return day is not None and day > today(clock)


def is_realistic_date(
    value: Any,
    min_year: int = DEFAULT_MIN_YEAR,
    *,
    clock: Clock | None = None,
) -> Verdict:
    """A single past-or-present date no earlier than *min_year*."""
    if is_blank(value):
        return Verdict.fail(ErrorKind.MISSING_VALUE, Subject.DATE)

    day = _normalize(value, Subject.DATE)
    if isinstance(day, Verdict):
        return day

    if day.year < min_year:
        return Verdict.fail(ErrorKind.OUT_OF_RANGE, Subject.DATE, bound="min", min_year=min_year)

    if day > today(clock):
        return Verdict.fail(ErrorKind.FUTURE_DATE, Subject.DATE)

    return Verdict.ok()


def is_realistic_year(
    value: Any,
    min_year: int = DEFAULT_MIN_YEAR,
    *,
    clock: Clock | None = None,
) -> Verdict:
    """A calendar year between *min_year* and the current year, inclusive."""
    if is_blank(value):
        return Verdict.fail(ErrorKind.MISSING_VALUE, Subject.YEAR)

    year = parse_year(value)
    if year is None:
        return Verdict.fail(ErrorKind.MALFORMED_VALUE, Subject.YEAR)

    if year < min_year:
        return Verdict.fail(ErrorKind.OUT_OF_RANGE, Subject.YEAR, bound="min", min_year=min_year)

    current_year = today(clock).year
    if year > current_year:
        return Verdict.fail(
            ErrorKind.OUT_OF_RANGE, Subject.YEAR, bound="max", current_year=current_year
        )

    return Verdict.ok()


def is_start_before_end(
    start: Any,
    end: Any,
    *,
    clock: Clock | None = None,
) -> Verdict:
    """A closed past range; equal start and end dates are rejected."""
    if is_blank(start) or is_blank(end):
        return Verdict.fail(ErrorKind.MISSING_VALUE, Subject.RANGE)

    start_day = _normalize(start, Subject.RANGE)
    if isinstance(start_day, Verdict):
        return start_day
    end_day = _normalize(end, Subject.RANGE)
    if isinstance(end_day, Verdict):
        return end_day

    now = today(clock)
    if start_day > now:
        return Verdict.fail(ErrorKind.FUTURE_DATE, Subject.START)
    if end_day > now:
        return Verdict.fail(ErrorKind.FUTURE_DATE, Subject.END)
    if start_day >= end_day:
        return Verdict.fail(ErrorKind.INVALID_ORDERING, Subject.RANGE)

    return Verdict.ok()


def is_start_before_end_or_ongoing(
    start: Any,
    end: Any = None,
    *,
    clock: Clock | None = None,
) -> Verdict:
    """A range whose end may be left empty for an ongoing record."""
    if is_blank(start):
        return Verdict.fail(ErrorKind.MISSING_VALUE, Subject.START)

    start_day = _normalize(start, Subject.START)
    if isinstance(start_day, Verdict):
        return start_day

    now = today(clock)
    if start_day > now:
        return Verdict.fail(ErrorKind.FUTURE_DATE, Subject.START)

    if is_blank(end):
        return Verdict.ok()

    end_day = _normalize(end, Subject.END)
    if isinstance(end_day, Verdict):
        return end_day

    if end_day > now:
        return Verdict.fail(ErrorKind.FUTURE_DATE, Subject.END)
    if start_day >= end_day:
        return Verdict.fail(ErrorKind.INVALID_ORDERING, Subject.RANGE)

    return Verdict.ok()


def age_on(birth: date, day: date) -> int:
    """Full years between *birth* and *day* (birthday-aware)."""
    had_birthday = (day.month, day.day) >= (birth.month, birth.day)
    return day.year - birth.year - (0 if had_birthday else 1)


def is_adult_birth_date(
    value: Any,
    min_age: int = DEFAULT_MIN_AGE,
    *,
    clock: Clock | None = None,
) -> Verdict:
    """A date of birth that is not in the future and at least *min_age* years ago."""
    if is_blank(value):
        return Verdict.fail(ErrorKind.MISSING_VALUE, Subject.BIRTH_DATE)

    birth = _normalize(value, Subject.BIRTH_DATE)
    if isinstance(birth, Verdict):
        return birth

    now = today(clock)
    if birth > now:
        return Verdict.fail(ErrorKind.FUTURE_DATE, Subject.BIRTH_DATE)
    if age_on(birth, now) < min_age:
        return Verdict.fail(
            ErrorKind.OUT_OF_RANGE, Subject.BIRTH_DATE, bound="min_age", min_age=min_age
        )

    return Verdict.ok()
