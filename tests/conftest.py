"""
Shared fixtures.

Unit tests run against ``FakeDatabase``, which records every statement and
replays queued result sets. Tests that take the ``live_db`` fixture need a
real PostgreSQL at ``TEST_DATABASE_URL`` and are skipped without one.
"""

import os
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path

import pytest

SCHEMA_SQL = Path(__file__).with_name("schema.sql")
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")


class FakeCursor:
    def __init__(self, results: list):
        self._results = results
        self._current: list = []
        self.executed: list[tuple[str, dict]] = []

    def execute(self, sql, params=None):
        self.executed.append((sql, params))
        self._current = self._results.pop(0) if self._results else []

    def fetchone(self):
        return self._current[0] if self._current else None

    def fetchall(self):
        return list(self._current)


class FakeDatabase:
    """Stands in for db.connection.Database."""

    def __init__(self):
        self.results: list[list] = []
        self.executed: list[tuple[str, dict]] = []

    def queue(self, *rows) -> None:
        """Queue the rows the next executed statement returns."""
        self.results.append(list(rows))

    @contextmanager
    def cursor(self):
        cur = FakeCursor(self.results)
        try:
            yield cur
        finally:
            self.executed.extend(cur.executed)

    @property
    def last_sql(self) -> str:
        return self.executed[-1][0]

    @property
    def last_params(self) -> dict:
        return self.executed[-1][1]


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def clock():
    return FixedClock(datetime(2024, 3, 1, 12, 0, 0))


@pytest.fixture(scope="session")
def live_db():
    if not TEST_DATABASE_URL:
        pytest.skip("TEST_DATABASE_URL not set")
    from db.connection import Database

    db = Database(TEST_DATABASE_URL, min_conn=1, max_conn=4)
    with db.cursor() as cur:
        cur.execute(SCHEMA_SQL.read_text(encoding="utf-8"))
    yield db
    db.close()


@pytest.fixture
def clean_db(live_db):
    from models import SCHEMAS

    tables = ", ".join(s.table for s in SCHEMAS.values())
    with live_db.cursor() as cur:
        cur.execute(f"TRUNCATE {tables} RESTART IDENTITY")
    return live_db
