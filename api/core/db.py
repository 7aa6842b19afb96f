"""
Async database access (raw SQL) using asyncpg.

`Database` owns one connection pool. The process entry point constructs it,
connects it on startup and closes it on shutdown (see `api/main.py`); routers
receive it through `core.dependencies.get_db`.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from .errors import QueryError

logger = logging.getLogger(__name__)

_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)


def sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def mask_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.password:
        return url
    netloc = parts.netloc.replace(f":{parts.password}@", ":***@", 1)
    return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))


class Database:
    def __init__(
        self,
        dsn: str,
        *,
        min_size: int = 1,
        max_size: int = 10,
        command_timeout: float = 30,
    ) -> None:
        self.dsn = sanitize_database_url(dsn)
        self.min_size = min_size
        self.max_size = max_size
        self.command_timeout = command_timeout
        self._pool: asyncpg.Pool | None = None

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    async def connect(self) -> None:
        if self._pool is not None:
            return None
        logger.info("db_connect dsn=%s", mask_database_url(self.dsn))
        try:
            self._pool = await asyncpg.create_pool(
                dsn=self.dsn,
                min_size=self.min_size,
                max_size=self.max_size,
                command_timeout=self.command_timeout,
            )
        except Exception:
            logger.exception("db_connect_failed dsn=%s", mask_database_url(self.dsn))
            raise
        logger.info("db_connected")

    async def close(self) -> None:
        if self._pool is None:
            return None
        await self._pool.close()
        self._pool = None
        logger.info("db_closed")

    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("DB pool is not initialized. Call connect() on startup.")
        return self._pool

    async def fetch_one(self, sql: str, *args: Any, timeout: float | None = None) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        try:
            row = await self.pool().fetchrow(sql, *args, timeout=timeout)
        except _DRIVER_ERRORS as exc:
            raise QueryError(str(exc) or exc.__class__.__name__) from exc
        return dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any, timeout: float | None = None) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        try:
            rows = await self.pool().fetch(sql, *args, timeout=timeout)
        except _DRIVER_ERRORS as exc:
            raise QueryError(str(exc) or exc.__class__.__name__) from exc
        return [dict(r) for r in rows]

    async def fetch_val(self, sql: str, *args: Any, timeout: float | None = None) -> Any:
        try:
            return await self.pool().fetchval(sql, *args, timeout=timeout)
        except _DRIVER_ERRORS as exc:
            raise QueryError(str(exc) or exc.__class__.__name__) from exc

    async def execute(self, sql: str, *args: Any, timeout: float | None = None) -> str:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL). Returns the status tag, e.g. "DELETE 0".
        """
        try:
            return await self.pool().execute(sql, *args, timeout=timeout)
        except _DRIVER_ERRORS as exc:
            raise QueryError(str(exc) or exc.__class__.__name__) from exc
