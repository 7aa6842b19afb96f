"""Startup/shutdown wiring in main.lifespan."""

import pytest

import main
from core.db import Database
from core.storage import PostgresStorage


@pytest.fixture(autouse=True)
def clean_app_state():
    def clear():
        for name in ("settings", "db", "storage"):
            if hasattr(main.app.state, name):
                delattr(main.app.state, name)

    clear()
    yield
    clear()


async def test_lifespan_connects_and_closes(monkeypatch):
    events = []

    async def connect(self):
        events.append(("connect", self.dsn))

    async def close(self):
        events.append(("close", self.dsn))

    async def init(self):
        events.append(("storage", self.table))

    monkeypatch.setenv("DATABASE_URL", "postgresql://app@db/portier?sslmode=disable")
    monkeypatch.setenv("CACHE_TABLE", "sessions")
    monkeypatch.setattr(Database, "connect", connect)
    monkeypatch.setattr(Database, "close", close)
    monkeypatch.setattr(PostgresStorage, "init", init)

    async with main.lifespan(main.app):
        assert isinstance(main.app.state.db, Database)
        assert main.app.state.storage.table == "sessions"

    assert events == [
        ("connect", "postgresql://app@db/portier"),
        ("storage", "sessions"),
        ("close", "postgresql://app@db/portier"),
    ]


async def test_lifespan_fails_fast_without_database(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError):
        async with main.lifespan(main.app):
            pass
