"""Tests for the submission-time validators."""

from datetime import date, timedelta

import pytest

from facportal.domain.dates import Clock, FixedClock
from facportal.domain.types import ErrorKind, Subject
from facportal.domain.validation import (
    age_on,
    is_adult_birth_date,
    is_future_date,
    is_realistic_date,
    is_realistic_year,
    is_start_before_end,
    is_start_before_end_or_ongoing,
)

TODAY = date(2024, 6, 15)
CLOCK = FixedClock(TODAY)


class CountingClock:
    """Clock that records how often it is read."""

    def __init__(self, day: date) -> None:
        self.day = day
        self.reads = 0

    def today(self) -> date:
        self.reads += 1
        return self.day


class TestIsRealisticDate:
    def test_tomorrow_is_future(self) -> None:
        verdict = is_realistic_date("2024-06-16", clock=CLOCK)
        assert verdict.to_dict() == {"valid": False, "error": "Date cannot be in the future."}
        assert verdict.kind is ErrorKind.FUTURE_DATE

    def test_today_is_valid(self) -> None:
        assert is_realistic_date("2024-06-15", clock=CLOCK).to_dict() == {
            "valid": True,
            "error": None,
        }

    def test_late_timestamp_today_is_valid(self) -> None:
        assert is_realistic_date("2024-06-15T23:59:59", clock=CLOCK).valid

    @pytest.mark.parametrize("value", [None, "", "   ", 0])
    def test_missing(self, value: object) -> None:
        verdict = is_realistic_date(value, clock=CLOCK)
        assert verdict.error == "Date is required."
        assert verdict.kind is ErrorKind.MISSING_VALUE

    def test_malformed(self) -> None:
        verdict = is_realistic_date("31/12/2020", clock=CLOCK)
        assert verdict.error == "Invalid date format."
        assert verdict.kind is ErrorKind.MALFORMED_VALUE

    def test_unsupported_type_is_generic_invalid(self) -> None:
        verdict = is_realistic_date(["2020-01-01"], clock=CLOCK)
        assert verdict.error == "Invalid date."
        assert verdict.subject is Subject.VALUE

    def test_before_min_year(self) -> None:
        assert is_realistic_date("1899-12-31", clock=CLOCK).error == "Date cannot be before 1900."

    def test_custom_min_year(self) -> None:
        verdict = is_realistic_date("1949-01-01", 1950, clock=CLOCK)
        assert verdict.error == "Date cannot be before 1950."
        assert verdict.params["min_year"] == 1950

    def test_min_year_checked_before_future(self) -> None:
        verdict = is_realistic_date("2030-01-01", 2031, clock=CLOCK)
        assert verdict.kind is ErrorKind.OUT_OF_RANGE

    def test_date_objects(self) -> None:
        assert is_realistic_date(date(2000, 1, 1), clock=CLOCK).valid
        assert not is_realistic_date(TODAY + timedelta(days=1), clock=CLOCK).valid

    @pytest.mark.parametrize("days_ahead", [1, 2, 30, 365, 3650])
    def test_every_future_date_rejected(self, days_ahead: int) -> None:
        future = (TODAY + timedelta(days=days_ahead)).isoformat()
        assert is_realistic_date(future, clock=CLOCK).error == "Date cannot be in the future."

    @pytest.mark.parametrize("days_back", [0, 1, 365, 20000])
    def test_every_past_date_accepted(self, days_back: int) -> None:
        past = (TODAY - timedelta(days=days_back)).isoformat()
        assert is_realistic_date(past, clock=CLOCK).valid

    def test_reads_clock_once(self) -> None:
        counting = CountingClock(TODAY)
        is_realistic_date("2020-01-01", clock=counting)
        assert counting.reads == 1

    def test_idempotent(self) -> None:
        assert is_realistic_date("2024-07-01", clock=CLOCK) == is_realistic_date(
            "2024-07-01", clock=CLOCK
        )


class TestIsRealisticYear:
    def test_before_min_year(self) -> None:
        assert is_realistic_year(1899, clock=CLOCK).to_dict() == {
            "valid": False,
            "error": "Year cannot be before 1900.",
        }

    def test_next_year(self) -> None:
        verdict = is_realistic_year(2025, clock=CLOCK)
        assert verdict.error == "Year cannot be after 2024."
        assert verdict.params["current_year"] == 2024

    @pytest.mark.parametrize("year", [1900, 1950, 2000, 2024])
    def test_in_range(self, year: int) -> None:
        assert is_realistic_year(year, clock=CLOCK).valid

    def test_string_year(self) -> None:
        assert is_realistic_year("2021", clock=CLOCK).valid

    @pytest.mark.parametrize("value", [None, "", 0])
    def test_missing(self, value: object) -> None:
        assert is_realistic_year(value, clock=CLOCK).error == "Year is required."

    @pytest.mark.parametrize("value", ["abc", "2020abc", 2020.5])
    def test_not_a_year(self, value: object) -> None:
        assert is_realistic_year(value, clock=CLOCK).error == "Invalid year."

    def test_oversized_digit_string_is_invalid(self) -> None:
        verdict = is_realistic_year("9" * 5000, clock=CLOCK)
        assert verdict.to_dict() == {"valid": False, "error": "Invalid year."}

    def test_current_year_follows_clock(self) -> None:
        clock: Clock = FixedClock(date(2030, 1, 1))
        assert is_realistic_year(2030, clock=clock).valid


class TestIsStartBeforeEnd:
    def test_equal_dates_rejected(self) -> None:
        assert is_start_before_end("2023-05-01", "2023-05-01", clock=CLOCK).to_dict() == {
            "valid": False,
            "error": "Start date must be before end date.",
        }

    def test_valid_range(self) -> None:
        assert is_start_before_end("2020-01-01", "2021-01-01", clock=CLOCK).valid

    def test_reversed(self) -> None:
        verdict = is_start_before_end("2021-01-01", "2020-01-01", clock=CLOCK)
        assert verdict.kind is ErrorKind.INVALID_ORDERING

    @pytest.mark.parametrize(("start", "end"), [("", "2020-01-01"), ("2020-01-01", None)])
    def test_both_required(self, start: object, end: object) -> None:
        verdict = is_start_before_end(start, end, clock=CLOCK)
        assert verdict.error == "Both start and end dates are required."

    def test_malformed(self) -> None:
        assert is_start_before_end("bad", "2020-01-01", clock=CLOCK).error == (
            "Invalid date format."
        )

    def test_future_start_reported_before_future_end(self) -> None:
        verdict = is_start_before_end("2024-07-01", "2024-08-01", clock=CLOCK)
        assert verdict.error == "Start date cannot be in the future."

    def test_future_end(self) -> None:
        verdict = is_start_before_end("2024-01-01", "2024-08-01", clock=CLOCK)
        assert verdict.error == "End date cannot be in the future."

    def test_future_checked_before_ordering(self) -> None:
        verdict = is_start_before_end("2024-07-01", "2024-06-01", clock=CLOCK)
        assert verdict.kind is ErrorKind.FUTURE_DATE


class TestIsStartBeforeEndOrOngoing:
    def test_empty_end_is_ongoing(self) -> None:
        assert is_start_before_end_or_ongoing("2020-01-01", "", clock=CLOCK).to_dict() == {
            "valid": True,
            "error": None,
        }

    @pytest.mark.parametrize("end", [None, "", "  "])
    def test_any_blank_end_accepted(self, end: object) -> None:
        assert is_start_before_end_or_ongoing("2024-06-15", end, clock=CLOCK).valid

    def test_missing_start(self) -> None:
        verdict = is_start_before_end_or_ongoing("", "2020-01-01", clock=CLOCK)
        assert verdict.error == "Start date is required."

    def test_malformed_start(self) -> None:
        verdict = is_start_before_end_or_ongoing("soon", clock=CLOCK)
        assert verdict.error == "Invalid start date format."

    def test_future_start_with_empty_end(self) -> None:
        verdict = is_start_before_end_or_ongoing("2024-06-16", "", clock=CLOCK)
        assert verdict.error == "Start date cannot be in the future."

    def test_malformed_end(self) -> None:
        verdict = is_start_before_end_or_ongoing("2020-01-01", "later", clock=CLOCK)
        assert verdict.error == "Invalid end date format."

    def test_future_end(self) -> None:
        verdict = is_start_before_end_or_ongoing("2020-01-01", "2025-01-01", clock=CLOCK)
        assert verdict.error == "End date cannot be in the future."

    def test_equal_dates_rejected(self) -> None:
        verdict = is_start_before_end_or_ongoing("2020-01-01", "2020-01-01", clock=CLOCK)
        assert verdict.error == "Start date must be before end date."

    def test_closed_range(self) -> None:
        assert is_start_before_end_or_ongoing("2020-01-01", "2020-01-02", clock=CLOCK).valid


class TestBirthDate:
    def test_adult(self) -> None:
        assert is_adult_birth_date("1990-04-12", clock=CLOCK).valid

    def test_eighteenth_birthday_today(self) -> None:
        assert is_adult_birth_date("2006-06-15", clock=CLOCK).valid

    def test_one_day_short(self) -> None:
        verdict = is_adult_birth_date("2006-06-16", clock=CLOCK)
        assert verdict.error == "You must be at least 18 years old to register."

    def test_future(self) -> None:
        verdict = is_adult_birth_date("2030-01-01", clock=CLOCK)
        assert verdict.error == "Date of Birth cannot be in the future."

    def test_missing(self) -> None:
        assert is_adult_birth_date("", clock=CLOCK).error == "Date of Birth is required."

    def test_custom_min_age(self) -> None:
        assert is_adult_birth_date("2010-01-01", 14, clock=CLOCK).valid

    def test_age_on_leap_day(self) -> None:
        assert age_on(date(2000, 2, 29), date(2018, 2, 28)) == 17
        assert age_on(date(2000, 2, 29), date(2018, 3, 1)) == 18


class TestIsFutureDate:
    def test_future(self) -> None:
        assert is_future_date("2024-06-16", clock=CLOCK) is True

    @pytest.mark.parametrize("value", ["2024-06-15", "", None, "garbage", 42])
    def test_not_future(self, value: object) -> None:
        assert is_future_date(value, clock=CLOCK) is False
