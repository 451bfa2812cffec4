"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: All service-layer methods return ServiceResult. Expected bad
input (a rejected date, an unknown record id) is a failed result, never
an exception.

Error codes:
  INVALID_<KIND>       a validator verdict blocked the operation; the
                       verdict travels in ``detail`` (``kind``, ``subject``,
                       ``params``, ``error``) with the offending ``field``
  NOT_FOUND            no stored record with ``detail["id"]``
  UNKNOWN_RECORD_TYPE  the record type name did not resolve
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from facportal.domain.verdicts import Verdict

CODE_NOT_FOUND = "NOT_FOUND"
CODE_UNKNOWN_RECORD_TYPE = "UNKNOWN_RECORD_TYPE"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_verdict(cls, verdict: Verdict, *, field: str | None = None) -> ServiceError:
        """Error for a failed verdict, coded by its error kind."""
        kind = verdict.kind.value.upper() if verdict.kind else "VALUE"
        detail = verdict.model_dump(mode="json")
        if field is not None:
            detail["field"] = field
        return cls(
            code=f"INVALID_{kind}",
            message=verdict.error or "Invalid value.",
            detail=detail,
        )

    @classmethod
    def not_found(cls, record_id: int) -> ServiceError:
        return cls(
            code=CODE_NOT_FOUND,
            message=f"No record with id {record_id}",
            detail={"id": record_id},
        )

    @classmethod
    def unknown_record_type(cls, exc: ValueError) -> ServiceError:
        return cls(code=CODE_UNKNOWN_RECORD_TYPE, message=str(exc))


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"submit"``).
        data: Operation-specific payload on success. Record payloads carry
            their advisory ``has_issue`` / ``issues`` alongside the fields.
        warnings: Date issues on the returned record; never block the
            operation.
        error: Structured error if ``ok`` is False.
        meta: The ``today`` the checks ran against.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, error: ServiceError) -> ServiceResult:
        return cls(ok=False, op=op, error=error)
