"""BaseService — shared construction for facportal services.

Every service receives the validation settings and the clock at
construction time, so all date checks in one command agree on "today"
and on the configured bounds. Services that touch stored records also
receive a :class:`RecordStore`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from facportal.config.models import ValidationConfig
from facportal.domain.dates import SYSTEM_CLOCK, today
from facportal.domain.verdicts import Verdict
from facportal.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from facportal.domain.dates import Clock
    from facportal.infrastructure.store import RecordStore


class BaseService:
    """Base for all service-layer classes."""

    def __init__(
        self,
        store: RecordStore | None = None,
        *,
        validation: ValidationConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._store = store
        self._validation = validation or ValidationConfig()
        self._clock = clock or SYSTEM_CLOCK

    @property
    def store(self) -> RecordStore:
        if self._store is None:
            raise RuntimeError(f"{type(self).__name__} was constructed without a record store")
        return self._store

    def _meta(self) -> dict[str, str]:
        return {"today": today(self._clock).isoformat()}


def rejected(op: str, verdict: Verdict, *, field: str | None = None) -> ServiceResult:
    """Failed result for a verdict that blocks the operation."""
    return ServiceResult.failure(op, ServiceError.from_verdict(verdict, field=field))
