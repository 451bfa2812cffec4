"""RecordService — form submission and list views over the record store.

Submissions are validated with the record type's date policy before
anything is written; a rejected submission never reaches the store.
Listings attach an advisory :class:`IssueReport` to each record instead
of hiding flagged ones.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from facportal.domain.policies import (
    FieldVerdict,
    detect_issues,
    policy_for,
    resolve_record_type,
    validate_submission,
)
from facportal.domain.types import RecordType
from facportal.infrastructure.store import StoredRecord
from facportal.services.base import BaseService, rejected
from facportal.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)


def _unknown_type(op: str, exc: ValueError) -> ServiceResult:
    return ServiceResult.failure(op, ServiceError.unknown_record_type(exc))


def _not_found(op: str, record_id: int) -> ServiceResult:
    return ServiceResult.failure(op, ServiceError.not_found(record_id))


class RecordService(BaseService):
    """Create, edit, list, show and delete faculty records."""

    def submit(self, record_type: str | RecordType, payload: Mapping[str, Any]) -> ServiceResult:
        """Validate *payload* against its date policy, then persist it."""
        try:
            rtype = resolve_record_type(record_type)
        except ValueError as exc:
            return _unknown_type("submit", exc)

        check = self._validate(rtype, payload)
        if not check.valid:
            log.info("submit.rejected", record_type=rtype.value, field=check.field)
            return rejected("submit", check.verdict, field=check.field)

        stored = self.store.add(rtype.value, payload)
        return ServiceResult(
            ok=True,
            op="submit",
            data=self._item(stored),
            meta=self._meta(),
        )

    def edit(self, record_id: int, changes: Mapping[str, Any]) -> ServiceResult:
        """Merge *changes* into a stored record and revalidate the result."""
        existing = self.store.get(record_id)
        if existing is None:
            return _not_found("edit", record_id)

        merged = {**existing.payload, **changes}
        rtype = resolve_record_type(existing.record_type)
        check = self._validate(rtype, merged)
        if not check.valid:
            log.info("edit.rejected", record_id=record_id, field=check.field)
            return rejected("edit", check.verdict, field=check.field)

        stored = self.store.update(record_id, merged)
        if stored is None:
            return _not_found("edit", record_id)
        return ServiceResult(ok=True, op="edit", data=self._item(stored), meta=self._meta())

    def get(self, record_id: int) -> ServiceResult:
        stored = self.store.get(record_id)
        if stored is None:
            return _not_found("get", record_id)
        item = self._item(stored)
        return ServiceResult(
            ok=True,
            op="get",
            data=item,
            warnings=list(item["issues"]),
            meta=self._meta(),
        )

    def list_records(self, record_type: str | RecordType | None = None) -> ServiceResult:
        """All stored records (optionally one type), each with its date issues."""
        type_filter: str | None = None
        if record_type is not None:
            try:
                type_filter = resolve_record_type(record_type).value
            except ValueError as exc:
                return _unknown_type("list_records", exc)

        items = [self._item(stored) for stored in self.store.list_records(type_filter)]
        flagged = sum(1 for item in items if item["has_issue"])
        return ServiceResult(
            ok=True,
            op="list_records",
            data={"items": items, "count": len(items), "flagged": flagged},
            meta=self._meta(),
        )

    def delete(self, record_id: int) -> ServiceResult:
        if not self.store.delete(record_id):
            return _not_found("delete", record_id)
        return ServiceResult(ok=True, op="delete", data={"id": record_id})

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _validate(self, rtype: RecordType, payload: Mapping[str, Any]) -> FieldVerdict:
        return validate_submission(
            rtype,
            payload,
            min_year=self._validation.min_year,
            min_age=self._validation.min_age,
            clock=self._clock,
        )

    def _item(self, stored: StoredRecord) -> dict[str, Any]:
        """Flatten a stored record for output, with its advisory report."""
        policy = policy_for(stored.record_type)
        report = detect_issues(
            stored.record_type,
            stored.payload,
            min_year=self._validation.min_year,
            clock=self._clock,
        )
        return {
            "id": stored.id,
            "type": stored.record_type,
            "title": str(stored.payload.get(policy.title_field, "")),
            "payload": dict(stored.payload),
            "created_at": stored.created_at,
            "modified_at": stored.modified_at,
            **report.to_dict(),
        }
