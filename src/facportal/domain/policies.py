"""Per-record-type date policy.

Every form and list view in the portal validates dates through this
table, so the "no future dates" rule is enforced identically for all
seven record types:

- year records (awards, publications) need a realistic year;
- single-date records (outreach activities) need a realistic date;
- ranged records (events, research projects, teaching experience) need a
  realistic start date and, when present, an end date after it;
- faculty registrations need an adult, non-future date of birth.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from facportal.domain.checks import DateRangeFields, IssueReport, SingleDateField, get_date_issues
from facportal.domain.dates import Clock
from facportal.domain.types import RecordType, Subject
from facportal.domain.validation import (
    DEFAULT_MIN_AGE,
    DEFAULT_MIN_YEAR,
    is_adult_birth_date,
    is_realistic_date,
    is_realistic_year,
    is_start_before_end_or_ongoing,
)
from facportal.domain.verdicts import Verdict


class DateShape(StrEnum):
    """Which of the four validation shapes a record type uses."""

    YEAR = "year"
    SINGLE_DATE = "single_date"
    ONGOING_RANGE = "ongoing_range"
    BIRTH_DATE = "birth_date"


@dataclass(frozen=True)
class RecordPolicy:
    """Date fields and display labels for one record type."""

    record_type: RecordType
    shape: DateShape
    date_fields: tuple[str, ...]
    title_field: str
    summary_label: str
    summary_problem: str

    @property
    def primary_field(self) -> str:
        return self.date_fields[0]


POLICIES: dict[RecordType, RecordPolicy] = {
    RecordType.AWARD: RecordPolicy(
        RecordType.AWARD,
        DateShape.YEAR,
        ("YearAwarded",),
        "AwardName",
        "award(s)",
        "unrealistic years",
    ),
    RecordType.PUBLICATION: RecordPolicy(
        RecordType.PUBLICATION,
        DateShape.YEAR,
        ("PublicationYear",),
        "Title",
        "publication(s)",
        "unrealistic years",
    ),
    RecordType.EVENT: RecordPolicy(
        RecordType.EVENT,
        DateShape.ONGOING_RANGE,
        ("StartDate", "EndDate"),
        "Title",
        "event(s)",
        "future or invalid dates",
    ),
    RecordType.RESEARCH_PROJECT: RecordPolicy(
        RecordType.RESEARCH_PROJECT,
        DateShape.ONGOING_RANGE,
        ("StartDate", "EndDate"),
        "Title",
        "research project(s)",
        "future or invalid dates",
    ),
    RecordType.TEACHING_EXPERIENCE: RecordPolicy(
        RecordType.TEACHING_EXPERIENCE,
        DateShape.ONGOING_RANGE,
        ("StartDate", "EndDate"),
        "Designation",
        "teaching record(s)",
        "future or invalid dates",
    ),
    RecordType.OUTREACH_ACTIVITY: RecordPolicy(
        RecordType.OUTREACH_ACTIVITY,
        DateShape.SINGLE_DATE,
        ("ActivityDate",),
        "ActivityTitle",
        "outreach activity(ies)",
        "future dates",
    ),
    RecordType.FACULTY_REGISTRATION: RecordPolicy(
        RecordType.FACULTY_REGISTRATION,
        DateShape.BIRTH_DATE,
        ("DateOfBirth",),
        "Email",
        "registration(s)",
        "future dates of birth",
    ),
}

# Portal route names accepted wherever a record type is expected.
_ALIASES: dict[str, RecordType] = {
    "awards": RecordType.AWARD,
    "publications": RecordType.PUBLICATION,
    "events": RecordType.EVENT,
    "research": RecordType.RESEARCH_PROJECT,
    "research_projects": RecordType.RESEARCH_PROJECT,
    "teaching": RecordType.TEACHING_EXPERIENCE,
    "outreach": RecordType.OUTREACH_ACTIVITY,
    "outreach_activities": RecordType.OUTREACH_ACTIVITY,
    "registration": RecordType.FACULTY_REGISTRATION,
    "signup": RecordType.FACULTY_REGISTRATION,
}


def resolve_record_type(name: str | RecordType) -> RecordType:
    """Map a record type name or portal route alias to a :class:`RecordType`.

    Raises:
        ValueError: *name* is not a known record type.
    """
    if isinstance(name, RecordType):
        return name
    key = name.strip().lower().replace("-", "_")
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return RecordType(key)
    except ValueError:
        valid = ", ".join(t.value for t in RecordType)
        msg = f"Unknown record type '{name}'. Valid types: {valid}"
        raise ValueError(msg) from None


def policy_for(record_type: str | RecordType) -> RecordPolicy:
    return POLICIES[resolve_record_type(record_type)]


class FieldVerdict(BaseModel):
    """A verdict tied to the form field it should be shown next to."""

    model_config = {"frozen": True}

    field: str | None = None
    verdict: Verdict

    @property
    def valid(self) -> bool:
        return self.verdict.valid

    @property
    def error(self) -> str | None:
        return self.verdict.error


def validate_submission(
    record_type: str | RecordType,
    payload: Mapping[str, Any],
    *,
    min_year: int = DEFAULT_MIN_YEAR,
    min_age: int = DEFAULT_MIN_AGE,
    clock: Clock | None = None,
) -> FieldVerdict:
    """Run the submission-time date checks for *record_type*.

    Returns the first failing check (tied to its field), or a passing
    verdict when every check succeeds.
    """
    policy = policy_for(record_type)
    field = policy.primary_field
    value = payload.get(field)

    if policy.shape is DateShape.YEAR:
        return FieldVerdict(field=field, verdict=is_realistic_year(value, min_year, clock=clock))

    if policy.shape is DateShape.SINGLE_DATE:
        return FieldVerdict(field=field, verdict=is_realistic_date(value, min_year, clock=clock))

    if policy.shape is DateShape.BIRTH_DATE:
        return FieldVerdict(field=field, verdict=is_adult_birth_date(value, min_age, clock=clock))

    start_field, end_field = policy.date_fields
    start_check = is_realistic_date(value, min_year, clock=clock)
    if not start_check.valid:
        return FieldVerdict(field=start_field, verdict=start_check)

    range_check = is_start_before_end_or_ongoing(value, payload.get(end_field), clock=clock)
    if range_check.subject in (Subject.END, Subject.RANGE):
        return FieldVerdict(field=end_field, verdict=range_check)
    return FieldVerdict(field=start_field, verdict=range_check)


def detect_issues(
    record_type: str | RecordType,
    record: Mapping[str, Any],
    *,
    min_year: int = DEFAULT_MIN_YEAR,
    clock: Clock | None = None,
) -> IssueReport:
    """Advisory date findings for a stored record of *record_type*."""
    policy = policy_for(record_type)

    if policy.shape is DateShape.YEAR:
        verdict = is_realistic_year(record.get(policy.primary_field), min_year, clock=clock)
        return IssueReport.from_verdict(verdict, policy.primary_field)

    if policy.shape is DateShape.ONGOING_RANGE:
        start_field, end_field = policy.date_fields
        spec = DateRangeFields(start=start_field, end=end_field)
        return get_date_issues(record, spec, clock=clock)

    return get_date_issues(record, SingleDateField(field=policy.primary_field), clock=clock)


def summarize_issues(
    records_by_type: Mapping[RecordType, Iterable[Mapping[str, Any]]],
    *,
    min_year: int = DEFAULT_MIN_YEAR,
    clock: Clock | None = None,
) -> dict[RecordType, str]:
    """Dashboard banner lines: how many records of each type are flagged.

    Types with no flagged records are omitted.
    """
    summary: dict[RecordType, str] = {}
    for record_type, records in records_by_type.items():
        policy = policy_for(record_type)
        flagged = sum(
            1
            for record in records
            if detect_issues(record_type, record, min_year=min_year, clock=clock).has_issue
        )
        if flagged:
            summary[policy.record_type] = (
                f"{flagged} {policy.summary_label} have {policy.summary_problem}"
            )
    return summary
