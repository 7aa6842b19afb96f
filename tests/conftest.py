"""Pytest configuration and fixtures for portier.

No live Postgres is needed: `FakeDatabase` stands in for `core.db.Database`
and answers each query with the next scripted result, recording every call so
tests can assert on the SQL and its arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from core.dependencies import get_db
from main import app


@dataclass
class Call:
    method: str
    sql: str
    args: tuple[Any, ...]
    timeout: float | None


class FakeDatabase:
    def __init__(self) -> None:
        self.calls: list[Call] = []
        self._results: list[Any] = []

    def queue(self, *results: Any) -> None:
        self._results.extend(results)

    @property
    def pending(self) -> int:
        return len(self._results)

    async def _next(self, method: str, sql: str, args: tuple[Any, ...], timeout: float | None) -> Any:
        self.calls.append(Call(method, " ".join(sql.split()), args, timeout))
        if not self._results:
            raise AssertionError(f"Unexpected {method}: {' '.join(sql.split())}")
        result = self._results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result

    async def fetch_one(self, sql: str, *args: Any, timeout: float | None = None) -> dict | None:
        return await self._next("fetch_one", sql, args, timeout)

    async def fetch_all(self, sql: str, *args: Any, timeout: float | None = None) -> list[dict]:
        return await self._next("fetch_all", sql, args, timeout)

    async def fetch_val(self, sql: str, *args: Any, timeout: float | None = None) -> Any:
        return await self._next("fetch_val", sql, args, timeout)

    async def execute(self, sql: str, *args: Any, timeout: float | None = None) -> str:
        return await self._next("execute", sql, args, timeout)


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
async def client(fake_db: FakeDatabase) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), backed by `fake_db`."""
    app.dependency_overrides[get_db] = lambda: fake_db
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.pop(get_db, None)
