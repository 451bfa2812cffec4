"""Verdict — the validator's pass/fail result.

A verdict carries a tagged :class:`ErrorKind` plus structured parameters
(``min_year``, ``current_year`` ...). The human-readable message is
derived from them by :func:`describe`, so callers can assert on the kind
while forms still show the familiar prose.

INVARIANT: ``error`` is present if and only if ``valid`` is False.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, computed_field, model_validator

from facportal.domain.types import ErrorKind, Subject

# (kind, subject, bound) -> message template
_MESSAGES: dict[tuple[ErrorKind, Subject, str | None], str] = {
    (ErrorKind.MISSING_VALUE, Subject.DATE, None): "Date is required.",
    (ErrorKind.MISSING_VALUE, Subject.YEAR, None): "Year is required.",
    (ErrorKind.MISSING_VALUE, Subject.RANGE, None): "Both start and end dates are required.",
    (ErrorKind.MISSING_VALUE, Subject.START, None): "Start date is required.",
    (ErrorKind.MISSING_VALUE, Subject.BIRTH_DATE, None): "Date of Birth is required.",
    (ErrorKind.MALFORMED_VALUE, Subject.DATE, None): "Invalid date format.",
    (ErrorKind.MALFORMED_VALUE, Subject.RANGE, None): "Invalid date format.",
    (ErrorKind.MALFORMED_VALUE, Subject.BIRTH_DATE, None): "Invalid date format.",
    (ErrorKind.MALFORMED_VALUE, Subject.YEAR, None): "Invalid year.",
    (ErrorKind.MALFORMED_VALUE, Subject.START, None): "Invalid start date format.",
    (ErrorKind.MALFORMED_VALUE, Subject.END, None): "Invalid end date format.",
    (ErrorKind.MALFORMED_VALUE, Subject.VALUE, None): "Invalid date.",
    (ErrorKind.OUT_OF_RANGE, Subject.DATE, "min"): "Date cannot be before {min_year}.",
    (ErrorKind.OUT_OF_RANGE, Subject.YEAR, "min"): "Year cannot be before {min_year}.",
    (ErrorKind.OUT_OF_RANGE, Subject.YEAR, "max"): "Year cannot be after {current_year}.",
    (ErrorKind.OUT_OF_RANGE, Subject.BIRTH_DATE, "min_age"): (
        "You must be at least {min_age} years old to register."
    ),
    (ErrorKind.FUTURE_DATE, Subject.DATE, None): "Date cannot be in the future.",
    (ErrorKind.FUTURE_DATE, Subject.START, None): "Start date cannot be in the future.",
    (ErrorKind.FUTURE_DATE, Subject.END, None): "End date cannot be in the future.",
    (ErrorKind.FUTURE_DATE, Subject.BIRTH_DATE, None): "Date of Birth cannot be in the future.",
    (ErrorKind.INVALID_ORDERING, Subject.RANGE, None): "Start date must be before end date.",
}


def describe(kind: ErrorKind, subject: Subject, params: dict[str, Any] | None = None) -> str:
    """Format the user-facing message for a failed verdict."""
    params = params or {}
    template = _MESSAGES.get((kind, subject, params.get("bound")))
    if template is None:
        return f"Invalid {subject.value.replace('_', ' ')}."
    return template.format(**params)


class Verdict(BaseModel):
    """Result of a single validator call.

    Attributes:
        valid: Whether the value passed every rule.
        kind: Error taxonomy entry of the first failing rule.
        subject: Which input the failure is about.
        params: Structured values interpolated into the message.
    """

    model_config = {"frozen": True}

    valid: bool
    kind: ErrorKind | None = None
    subject: Subject | None = None
    params: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _kind_iff_invalid(self) -> Verdict:
        if self.valid and self.kind is not None:
            raise ValueError("a valid verdict cannot carry an error kind")
        if not self.valid and (self.kind is None or self.subject is None):
            raise ValueError("an invalid verdict needs an error kind and subject")
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def error(self) -> str | None:
        if self.valid or self.kind is None or self.subject is None:
            return None
        return describe(self.kind, self.subject, self.params)

    @classmethod
    def ok(cls) -> Verdict:
        return cls(valid=True)

    @classmethod
    def fail(cls, kind: ErrorKind, subject: Subject, **params: Any) -> Verdict:
        return cls(valid=False, kind=kind, subject=subject, params=params)

    def to_dict(self) -> dict[str, Any]:
        """Plain ``{valid, error}`` shape shown by forms."""
        return {"valid": self.valid, "error": self.error}
