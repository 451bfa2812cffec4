"""Issue detection for already-stored records.

The detector never rejects or mutates a record. It only reports advisory
findings that list and detail views render as warning badges. Dates that
cannot be parsed are skipped rather than flagged, since stored legacy
data cannot be corrected from a list view.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter, computed_field

from facportal.domain.dates import Clock, DateParseError, normalize_date, today
from facportal.domain.types import IssueKind
from facportal.domain.validation import is_future_date
from facportal.domain.verdicts import Verdict

MSG_START_FUTURE = "Start date is in the future"
MSG_END_FUTURE = "End date is in the future"
MSG_END_BEFORE_START = "End date is before start date"


# --- Field specs ---


class SingleDateField(BaseModel):
    """A record carrying one date (e.g. ``ActivityDate``)."""

    model_config = {"frozen": True}

    kind: Literal["single"] = "single"
    field: str


class DateRangeFields(BaseModel):
    """A record carrying a start date and an optional end date."""

    model_config = {"frozen": True}

    kind: Literal["range"] = "range"
    start: str
    end: str


DateFieldSpec = Annotated[SingleDateField | DateRangeFields, Field(discriminator="kind")]

_SPEC_ADAPTER: TypeAdapter[SingleDateField | DateRangeFields] = TypeAdapter(DateFieldSpec)


def field_spec_from_mapping(mapping: Mapping[str, str]) -> SingleDateField | DateRangeFields:
    """Build a field spec from a ``{single: ...}`` or ``{start: ..., end: ...}`` mapping.

    Raises:
        ValueError: The mapping names neither shape, or mixes both.
    """
    if "kind" in mapping:
        return _SPEC_ADAPTER.validate_python(dict(mapping))
    single = mapping.get("single")
    start = mapping.get("start")
    end = mapping.get("end")
    if single and not (start or end):
        return SingleDateField(field=single)
    if start and end and not single:
        return DateRangeFields(start=start, end=end)
    msg = f"Field spec must name either 'single' or both 'start' and 'end': {dict(mapping)}"
    raise ValueError(msg)


# --- Reports ---


class DateIssue(BaseModel):
    """One advisory finding on a record."""

    model_config = {"frozen": True}

    kind: IssueKind
    field: str
    message: str


class IssueReport(BaseModel):
    """Ordered advisory findings for a single record."""

    model_config = {"frozen": True}

    findings: tuple[DateIssue, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def issues(self) -> list[str]:
        return [f.message for f in self.findings]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_issue(self) -> bool:
        return len(self.findings) > 0

    @classmethod
    def from_verdict(cls, verdict: Verdict, field: str) -> IssueReport:
        """Lift a failed validator verdict into a one-finding report."""
        if verdict.valid:
            return cls()
        issue = DateIssue(
            kind=IssueKind.UNREALISTIC_VALUE,
            field=field,
            message=verdict.error or "",
        )
        return cls(findings=(issue,))

    def to_dict(self) -> dict[str, Any]:
        """Plain ``{has_issue, issues}`` shape shown by list views."""
        return {"has_issue": self.has_issue, "issues": self.issues}


# --- Helpers ---


def _present_date(record: Mapping[str, Any], field: str) -> date | None:
    """The normalized date in *field* when it is set and parseable, else None."""
    raw = record.get(field)
    if not raw:
        return None
    try:
        return normalize_date(raw)
    except DateParseError:
        return None


def is_date_in_future(value: Any, *, clock: Clock | None = None) -> bool:
    """Whether *value* parses to a date after today. Never raises."""
    return is_future_date(value, clock=clock)


def has_invalid_date_range(start: Any, end: Any) -> bool:
    """Whether both dates parse and *end* falls before *start*. Never raises."""
    if not start or not end:
        return False
    try:
        start_day = normalize_date(start)
        end_day = normalize_date(end)
    except DateParseError:
        return False
    if start_day is None or end_day is None:
        return False
    return end_day < start_day


# --- Detector ---


def get_date_issues(
    record: Mapping[str, Any],
    field_spec: SingleDateField | DateRangeFields,
    *,
    clock: Clock | None = None,
) -> IssueReport:
    """Scan *record* for future dates and reversed ranges.

    Checks run in a fixed order and accumulate: single date in the
    future, start in the future, end in the future, end before start.
    """
    now = today(clock)
    findings: list[DateIssue] = []

    if isinstance(field_spec, SingleDateField):
        day = _present_date(record, field_spec.field)
        if day is not None and day > now:
            findings.append(
                DateIssue(
                    kind=IssueKind.FUTURE_DATE,
                    field=field_spec.field,
                    message=f"{field_spec.field} is in the future",
                )
            )
        return IssueReport(findings=tuple(findings))

    start_day = _present_date(record, field_spec.start)
    end_day = _present_date(record, field_spec.end)

    if start_day is not None and start_day > now:
        findings.append(
            DateIssue(kind=IssueKind.FUTURE_DATE, field=field_spec.start, message=MSG_START_FUTURE)
        )
    if end_day is not None and end_day > now:
        findings.append(
            DateIssue(kind=IssueKind.FUTURE_DATE, field=field_spec.end, message=MSG_END_FUTURE)
        )
    if start_day is not None and end_day is not None and end_day < start_day:
        findings.append(
            DateIssue(
                kind=IssueKind.INVALID_RANGE,
                field=field_spec.end,
                message=MSG_END_BEFORE_START,
            )
        )

    return IssueReport(findings=tuple(findings))
