"""Tests for core.db.Database without a live server."""

import asyncio

import pytest

from core.db import Database, mask_database_url, sanitize_database_url
from core.errors import QueryError


class FailingPool:
    def __init__(self, exc: BaseException) -> None:
        self.exc = exc

    async def fetchrow(self, *args, **kwargs):
        raise self.exc

    async def fetch(self, *args, **kwargs):
        raise self.exc

    async def fetchval(self, *args, **kwargs):
        raise self.exc

    async def execute(self, *args, **kwargs):
        raise self.exc


class RecordingPool:
    def __init__(self) -> None:
        self.calls = []
        self.closed = False

    async def fetchrow(self, sql, *args, timeout=None):
        self.calls.append(("fetchrow", args, timeout))
        return {"id": 1}

    async def fetch(self, sql, *args, timeout=None):
        self.calls.append(("fetch", args, timeout))
        return [{"id": 1}, {"id": 2}]

    async def fetchval(self, sql, *args, timeout=None):
        self.calls.append(("fetchval", args, timeout))
        return 7

    async def execute(self, sql, *args, timeout=None):
        self.calls.append(("execute", args, timeout))
        return "DELETE 0"

    async def close(self):
        self.closed = True


def test_sanitize_strips_sslmode():
    url = "postgresql://u:p@db:5432/portier?sslmode=disable&application_name=portier"
    assert sanitize_database_url(url) == "postgresql://u:p@db:5432/portier?application_name=portier"
    assert sanitize_database_url("postgresql://db/portier") == "postgresql://db/portier"


def test_mask_hides_password():
    assert mask_database_url("postgresql://u:p4ss@db/portier") == "postgresql://u:***@db/portier"
    assert mask_database_url("postgresql://db/portier") == "postgresql://db/portier"


def test_pool_requires_connect():
    db = Database("postgresql://db/portier")
    assert not db.is_connected
    with pytest.raises(RuntimeError):
        db.pool()


async def test_results_are_plain_dicts_and_timeout_is_forwarded():
    db = Database("postgresql://db/portier")
    pool = RecordingPool()
    db._pool = pool

    assert await db.fetch_one("SELECT 1", 5) == {"id": 1}
    assert await db.fetch_all("SELECT 1", timeout=5.0) == [{"id": 1}, {"id": 2}]
    assert await db.fetch_val("SELECT 1") == 7
    assert await db.execute("DELETE FROM keys WHERE id = $1", 9) == "DELETE 0"
    assert pool.calls[1] == ("fetch", (), 5.0)

    await db.close()
    assert pool.closed
    assert not db.is_connected


@pytest.mark.parametrize("exc", [OSError("connection refused"), asyncio.TimeoutError()])
async def test_driver_failures_become_query_errors(exc):
    db = Database("postgresql://db/portier")
    db._pool = FailingPool(exc)

    with pytest.raises(QueryError):
        await db.fetch_one("SELECT 1")
    with pytest.raises(QueryError):
        await db.fetch_all("SELECT 1")
    with pytest.raises(QueryError):
        await db.fetch_val("SELECT 1")
    with pytest.raises(QueryError):
        await db.execute("SELECT 1")


async def test_connect_failure_is_raised(monkeypatch):
    import asyncpg

    async def refuse(**kwargs):
        raise OSError("connection refused")

    monkeypatch.setattr(asyncpg, "create_pool", refuse)
    db = Database("postgresql://db/portier")

    with pytest.raises(OSError):
        await db.connect()
    assert not db.is_connected
