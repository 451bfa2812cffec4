"""Tests for RecordStore — SQLite persistence of record payloads."""

from pathlib import Path

from sqlalchemy import text

from facportal.infrastructure.store import RecordStore


class TestRecordStore:
    def test_creates_database_file(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "portal.db"
        s = RecordStore(path)
        try:
            assert path.exists()
            assert s.path == path
        finally:
            s.close()

    def test_wal_mode(self, store: RecordStore) -> None:
        with store.engine.connect() as conn:
            assert conn.execute(text("PRAGMA journal_mode")).scalar() == "wal"

    def test_add_and_get(self, store: RecordStore) -> None:
        added = store.add("award", {"AwardName": "Best Paper", "YearAwarded": 2021})
        assert added.id == 1
        fetched = store.get(added.id)
        assert fetched is not None
        assert fetched.payload == {"AwardName": "Best Paper", "YearAwarded": 2021}
        assert fetched.created_at == fetched.modified_at

    def test_payload_returned_verbatim(self, store: RecordStore) -> None:
        payload = {"StartDate": "2099-01-01", "EndDate": "not a date", "Extra": None}
        added = store.add("event", payload)
        assert store.get(added.id).payload == payload  # type: ignore[union-attr]

    def test_get_missing(self, store: RecordStore) -> None:
        assert store.get(99) is None

    def test_update(self, store: RecordStore) -> None:
        added = store.add("event", {"StartDate": "2020-01-01"})
        updated = store.update(added.id, {"StartDate": "2020-01-01", "EndDate": "2021-01-01"})
        assert updated is not None
        assert updated.payload["EndDate"] == "2021-01-01"
        assert updated.created_at == added.created_at

    def test_update_missing(self, store: RecordStore) -> None:
        assert store.update(42, {"x": 1}) is None

    def test_list_filters_and_orders(self, store: RecordStore) -> None:
        store.add("award", {"n": 1})
        store.add("event", {"n": 2})
        store.add("award", {"n": 3})
        assert [r.payload["n"] for r in store.list_records()] == [1, 2, 3]
        assert [r.payload["n"] for r in store.list_records("award")] == [1, 3]
        assert store.list_records("publication") == []

    def test_delete(self, store: RecordStore) -> None:
        added = store.add("award", {})
        assert store.delete(added.id) is True
        assert store.delete(added.id) is False
        assert store.get(added.id) is None

    def test_to_dict(self, store: RecordStore) -> None:
        data = store.add("award", {"YearAwarded": 2000}).to_dict()
        assert data["record_type"] == "award"
        assert data["payload"] == {"YearAwarded": 2000}
