"""
Postgres-backed key-value storage attached to every request.

Pass-through only: values are stored and returned as bytes, with an optional
expiry. Table layout:
- k: text primary key
- v: bytea value
- e: unix expiry in seconds (0 = never expires)
"""

from __future__ import annotations

import logging
import re
import time

from .db import Database

logger = logging.getLogger(__name__)

_TABLE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class PostgresStorage:
    def __init__(self, db: Database, *, table: str = "cache") -> None:
        if not _TABLE_NAME.match(table or ""):
            raise ValueError(f"Invalid storage table name: {table!r}")
        self.db = db
        self.table = table

    async def init(self) -> None:
        await self.db.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {self.table} (
              k TEXT PRIMARY KEY,
              v BYTEA NOT NULL,
              e BIGINT NOT NULL DEFAULT 0
            )
            """
        )
        logger.info("storage_ready table=%s", self.table)

    async def get(self, key: str) -> bytes | None:
        if not key:
            return None
        row = await self.db.fetch_one(
            f"""
            SELECT v, e
            FROM {self.table}
            WHERE k = $1
            """,
            key,
        )
        if row is None:
            return None
        expires_at = int(row["e"] or 0)
        if expires_at != 0 and expires_at <= int(time.time()):
            return None
        return bytes(row["v"])

    async def set(self, key: str, value: bytes, expires_in: float | None = None) -> None:
        if not key or value is None:
            return None
        expires_at = 0
        if expires_in is not None and expires_in > 0:
            expires_at = int(time.time() + expires_in)
        await self.db.execute(
            f"""
            INSERT INTO {self.table} (k, v, e)
            VALUES ($1, $2, $3)
            ON CONFLICT (k) DO UPDATE
            SET v = EXCLUDED.v,
                e = EXCLUDED.e
            """,
            key,
            value,
            expires_at,
        )

    async def delete(self, key: str) -> None:
        if not key:
            return None
        await self.db.execute(f"DELETE FROM {self.table} WHERE k = $1", key)

    async def reset(self) -> None:
        await self.db.execute(f"DELETE FROM {self.table}")

    async def delete_expired(self) -> None:
        await self.db.execute(
            f"DELETE FROM {self.table} WHERE e <> 0 AND e <= $1",
            int(time.time()),
        )
