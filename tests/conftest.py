"""Shared pytest fixtures for facportal tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from facportal.domain.dates import FixedClock
from facportal.infrastructure.store import RecordStore

# Every test runs on the same calendar day unless it says otherwise.
TODAY = date(2024, 6, 15)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep FACPORTAL_* variables from the outer shell out of the tests."""
    for name in ("FACPORTAL_CONFIG", "FACPORTAL_TODAY", "FACPORTAL_VERBOSE", "FACPORTAL_ROOT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def store(tmp_path: Path) -> Iterator[RecordStore]:
    """Record store on a fresh SQLite file."""
    s = RecordStore(tmp_path / ".facportal" / "facportal.db")
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests from a temp directory so each gets its own store.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
