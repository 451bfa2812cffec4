"""CheckService — scan stored records for date issues.

Follows the linter pattern: read-only, one issue row per finding, every
finding a warning (stored records are flagged, never blocked). Also
produces the dashboard banner lines counting flagged records per type.
"""

from __future__ import annotations

from typing import Any

import structlog

from facportal.domain.policies import (
    detect_issues,
    policy_for,
    resolve_record_type,
    summarize_issues,
)
from facportal.domain.types import RecordType
from facportal.services.base import BaseService
from facportal.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)

SEVERITY_WARNING = "warning"


class CheckService(BaseService):
    """Reports date issues across the record store."""

    def check(self, record_type: str | RecordType | None = None) -> ServiceResult:
        """Report every finding without modifying anything."""
        type_filter: RecordType | None = None
        if record_type is not None:
            try:
                type_filter = resolve_record_type(record_type)
            except ValueError as exc:
                return ServiceResult.failure("check", ServiceError.unknown_record_type(exc))

        stored = self.store.list_records(type_filter.value if type_filter else None)
        min_year = self._validation.min_year

        issues: list[dict[str, Any]] = []
        by_type: dict[RecordType, list[dict[str, Any]]] = {}
        for record in stored:
            rtype = resolve_record_type(record.record_type)
            by_type.setdefault(rtype, []).append(record.payload)
            policy = policy_for(rtype)
            report = detect_issues(rtype, record.payload, min_year=min_year, clock=self._clock)
            for finding in report.findings:
                issues.append(
                    {
                        "record_id": record.id,
                        "record_type": rtype.value,
                        "title": str(record.payload.get(policy.title_field, "")),
                        "severity": SEVERITY_WARNING,
                        "kind": finding.kind.value,
                        "field": finding.field,
                        "message": finding.message,
                    }
                )

        summary = summarize_issues(by_type, min_year=min_year, clock=self._clock)
        flagged = len({i["record_id"] for i in issues})
        log.debug("check.complete", scanned=len(stored), issues=len(issues), flagged=flagged)

        return ServiceResult(
            ok=True,
            op="check",
            data={
                "issues": issues,
                "count": len(issues),
                "scanned": len(stored),
                "flagged": flagged,
                "healthy": not issues,
                "summary": {rtype.value: line for rtype, line in summary.items()},
            },
            meta=self._meta(),
        )
