"""Tests for Verdict and message formatting."""

import pytest
from pydantic import ValidationError

from facportal.domain.types import ErrorKind, Subject
from facportal.domain.verdicts import Verdict, describe


class TestVerdict:
    def test_ok(self) -> None:
        verdict = Verdict.ok()
        assert verdict.valid is True
        assert verdict.error is None
        assert verdict.to_dict() == {"valid": True, "error": None}

    def test_fail_carries_kind_and_message(self) -> None:
        verdict = Verdict.fail(ErrorKind.OUT_OF_RANGE, Subject.YEAR, bound="min", min_year=1900)
        assert verdict.valid is False
        assert verdict.kind is ErrorKind.OUT_OF_RANGE
        assert verdict.params == {"bound": "min", "min_year": 1900}
        assert verdict.to_dict() == {"valid": False, "error": "Year cannot be before 1900."}

    def test_valid_verdict_rejects_kind(self) -> None:
        with pytest.raises(ValidationError):
            Verdict(valid=True, kind=ErrorKind.FUTURE_DATE, subject=Subject.DATE)

    def test_invalid_verdict_needs_kind(self) -> None:
        with pytest.raises(ValidationError):
            Verdict(valid=False)

    def test_frozen(self) -> None:
        verdict = Verdict.ok()
        with pytest.raises(ValidationError):
            verdict.valid = False  # type: ignore[misc]

    def test_model_dump_includes_error(self) -> None:
        dumped = Verdict.fail(ErrorKind.FUTURE_DATE, Subject.END).model_dump(mode="json")
        assert dumped["kind"] == "future_date"
        assert dumped["subject"] == "end"
        assert dumped["error"] == "End date cannot be in the future."

    def test_equal_inputs_equal_verdicts(self) -> None:
        a = Verdict.fail(ErrorKind.MISSING_VALUE, Subject.DATE)
        b = Verdict.fail(ErrorKind.MISSING_VALUE, Subject.DATE)
        assert a == b


class TestDescribe:
    @pytest.mark.parametrize(
        ("kind", "subject", "params", "expected"),
        [
            (ErrorKind.MISSING_VALUE, Subject.DATE, {}, "Date is required."),
            (ErrorKind.MISSING_VALUE, Subject.YEAR, {}, "Year is required."),
            (
                ErrorKind.MISSING_VALUE,
                Subject.RANGE,
                {},
                "Both start and end dates are required.",
            ),
            (ErrorKind.MISSING_VALUE, Subject.START, {}, "Start date is required."),
            (ErrorKind.MALFORMED_VALUE, Subject.DATE, {}, "Invalid date format."),
            (ErrorKind.MALFORMED_VALUE, Subject.YEAR, {}, "Invalid year."),
            (ErrorKind.MALFORMED_VALUE, Subject.START, {}, "Invalid start date format."),
            (ErrorKind.MALFORMED_VALUE, Subject.END, {}, "Invalid end date format."),
            (ErrorKind.MALFORMED_VALUE, Subject.VALUE, {}, "Invalid date."),
            (
                ErrorKind.OUT_OF_RANGE,
                Subject.DATE,
                {"bound": "min", "min_year": 1950},
                "Date cannot be before 1950.",
            ),
            (
                ErrorKind.OUT_OF_RANGE,
                Subject.YEAR,
                {"bound": "max", "current_year": 2024},
                "Year cannot be after 2024.",
            ),
            (
                ErrorKind.OUT_OF_RANGE,
                Subject.BIRTH_DATE,
                {"bound": "min_age", "min_age": 18},
                "You must be at least 18 years old to register.",
            ),
            (ErrorKind.FUTURE_DATE, Subject.START, {}, "Start date cannot be in the future."),
            (
                ErrorKind.INVALID_ORDERING,
                Subject.RANGE,
                {},
                "Start date must be before end date.",
            ),
        ],
    )
    def test_messages(
        self, kind: ErrorKind, subject: Subject, params: dict[str, object], expected: str
    ) -> None:
        assert describe(kind, subject, params) == expected

    def test_unknown_combination_falls_back(self) -> None:
        assert describe(ErrorKind.INVALID_ORDERING, Subject.BIRTH_DATE) == "Invalid birth date."
