"""RecordStore — local persistence for submitted faculty records.

Stands in for the portal's remote API: payloads are stored verbatim and
returned verbatim. The store never validates; callers decide what may
be written.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select, update

from facportal.infrastructure.database.engine import init_database
from facportal.infrastructure.database.schema import records

if TYPE_CHECKING:
    from sqlalchemy import Connection, Row
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


def now_iso() -> str:
    """Current UTC time as ISO 8601."""
    return datetime.now(UTC).isoformat()


@dataclass(frozen=True)
class StoredRecord:
    """A persisted record and its bookkeeping columns."""

    id: int
    record_type: str
    payload: dict[str, Any] = field(default_factory=dict)
    created_at: str = ""
    modified_at: str = ""

    @classmethod
    def from_row(cls, row: Row[Any]) -> StoredRecord:
        return cls(
            id=row.id,
            record_type=row.record_type,
            payload=json.loads(row.payload),
            created_at=row.created_at,
            modified_at=row.modified_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "record_type": self.record_type,
            "payload": dict(self.payload),
            "created_at": self.created_at,
            "modified_at": self.modified_at,
        }


class RecordStore:
    """SQLite-backed record repository.

    Constructed lazily by the CLI context and handed to services through
    their constructor.
    """

    def __init__(self, db_path: Path) -> None:
        self._path = db_path
        self._engine: Engine = init_database(db_path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Commit on success, roll back on any exception."""
        with self._engine.begin() as conn:
            yield conn

    def add(self, record_type: str, payload: Mapping[str, Any]) -> StoredRecord:
        stamp = now_iso()
        with self.transaction() as conn:
            result = conn.execute(
                insert(records).values(
                    record_type=record_type,
                    payload=json.dumps(dict(payload), default=str),
                    created_at=stamp,
                    modified_at=stamp,
                )
            )
            record_id = int(result.inserted_primary_key[0])
        logger.debug("Stored %s record %d", record_type, record_id)
        return StoredRecord(record_id, record_type, dict(payload), stamp, stamp)

    def update(self, record_id: int, payload: Mapping[str, Any]) -> StoredRecord | None:
        """Replace the payload of *record_id*. Returns None if it does not exist."""
        stamp = now_iso()
        with self.transaction() as conn:
            result = conn.execute(
                update(records)
                .where(records.c.id == record_id)
                .values(payload=json.dumps(dict(payload), default=str), modified_at=stamp)
            )
            if result.rowcount == 0:
                return None
        return self.get(record_id)

    def get(self, record_id: int) -> StoredRecord | None:
        with self._engine.connect() as conn:
            row = conn.execute(select(records).where(records.c.id == record_id)).first()
        return StoredRecord.from_row(row) if row is not None else None

    def list_records(self, record_type: str | None = None) -> list[StoredRecord]:
        """All records (optionally of one type), oldest first."""
        stmt = select(records).order_by(records.c.id)
        if record_type is not None:
            stmt = stmt.where(records.c.record_type == record_type)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).fetchall()
        return [StoredRecord.from_row(row) for row in rows]

    def delete(self, record_id: int) -> bool:
        with self.transaction() as conn:
            result = conn.execute(delete(records).where(records.c.id == record_id))
        return result.rowcount > 0

    def close(self) -> None:
        self._engine.dispose()
