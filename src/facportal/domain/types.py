"""Record types and classification enums.

These enums name the seven kinds of faculty record the portal stores,
the validation error taxonomy, and the advisory issue kinds.
"""

from __future__ import annotations

from enum import StrEnum


class RecordType(StrEnum):
    """Career artifacts a faculty member can record."""

    AWARD = "award"
    PUBLICATION = "publication"
    EVENT = "event"
    RESEARCH_PROJECT = "research_project"
    TEACHING_EXPERIENCE = "teaching_experience"
    OUTREACH_ACTIVITY = "outreach_activity"
    FACULTY_REGISTRATION = "faculty_registration"


class ErrorKind(StrEnum):
    """Why a validator rejected a value."""

    MISSING_VALUE = "missing_value"
    MALFORMED_VALUE = "malformed_value"
    OUT_OF_RANGE = "out_of_range"
    FUTURE_DATE = "future_date"
    INVALID_ORDERING = "invalid_ordering"


class Subject(StrEnum):
    """Which input a verdict is about."""

    DATE = "date"
    YEAR = "year"
    RANGE = "range"
    START = "start"
    END = "end"
    BIRTH_DATE = "birth_date"
    VALUE = "value"


class IssueKind(StrEnum):
    """Advisory problems found on an already-stored record."""

    FUTURE_DATE = "future_date"
    INVALID_RANGE = "invalid_range"
    UNREALISTIC_VALUE = "unrealistic_value"
