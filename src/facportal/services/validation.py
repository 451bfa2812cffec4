"""ValidationService — the four validation shapes behind one result contract.

Used by ``facportal validate`` to check a value the way a portal form
would before submitting it.
"""

from __future__ import annotations

from typing import Any

import structlog

from facportal.domain.validation import (
    is_adult_birth_date,
    is_realistic_date,
    is_realistic_year,
    is_start_before_end,
    is_start_before_end_or_ongoing,
)
from facportal.domain.verdicts import Verdict
from facportal.services.base import BaseService, rejected
from facportal.services.result import ServiceResult

log = structlog.get_logger(__name__)


class ValidationService(BaseService):
    """Runs a single validator and wraps its verdict."""

    def check_date(self, value: Any) -> ServiceResult:
        verdict = is_realistic_date(value, self._validation.min_year, clock=self._clock)
        return self._wrap("validate_date", verdict, value=value)

    def check_year(self, value: Any) -> ServiceResult:
        verdict = is_realistic_year(value, self._validation.min_year, clock=self._clock)
        return self._wrap("validate_year", verdict, value=value)

    def check_range(self, start: Any, end: Any) -> ServiceResult:
        verdict = is_start_before_end(start, end, clock=self._clock)
        return self._wrap("validate_range", verdict, start=start, end=end)

    def check_ongoing(self, start: Any, end: Any = None) -> ServiceResult:
        verdict = is_start_before_end_or_ongoing(start, end, clock=self._clock)
        return self._wrap("validate_ongoing", verdict, start=start, end=end or None)

    def check_birth_date(self, value: Any) -> ServiceResult:
        verdict = is_adult_birth_date(value, self._validation.min_age, clock=self._clock)
        return self._wrap("validate_birth_date", verdict, value=value)

    def _wrap(self, op: str, verdict: Verdict, **inputs: Any) -> ServiceResult:
        if not verdict.valid:
            log.debug("validation.rejected", op=op, kind=verdict.kind, **inputs)
            return rejected(op, verdict)
        return ServiceResult(
            ok=True,
            op=op,
            data={"valid": True, **inputs},
            meta=self._meta(),
        )
