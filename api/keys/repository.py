"""
Key persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database
from core.errors import QueryError
from core.pagination import LIST_TIMEOUT_SECONDS

_COLUMNS = "id, name, created_at, created_by, is_active"


async def list_keys(db: Database, *, limit: int, offset: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM keys
        ORDER BY id
        LIMIT $1
        OFFSET $2
        """,
        limit,
        offset,
        timeout=LIST_TIMEOUT_SECONDS,
    )


async def count_keys(db: Database) -> int:
    total = await db.fetch_val(
        """
        SELECT count(*)
        FROM keys
        """,
        timeout=LIST_TIMEOUT_SECONDS,
    )
    return int(total or 0)


async def get_key(db: Database, key_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM keys
        WHERE id = $1
        """,
        key_id,
    )


async def insert_key(db: Database, *, name: str, created_by: int, is_active: bool = True) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO keys (name, created_at, created_by, is_active)
        VALUES ($1, now(), $2, $3)
        RETURNING {_COLUMNS}
        """,
        name,
        created_by,
        is_active,
    )
    if row is None:
        raise QueryError("Failed to create key.")
    return row


async def update_key(db: Database, key_id: int, *, name: str, is_active: bool) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        UPDATE keys
        SET name = $1,
            is_active = $2
        WHERE id = $3
        RETURNING {_COLUMNS}
        """,
        name,
        is_active,
        key_id,
    )


async def delete_key(db: Database, key_id: int) -> None:
    await db.execute(
        """
        DELETE FROM keys
        WHERE id = $1
        """,
        key_id,
    )
