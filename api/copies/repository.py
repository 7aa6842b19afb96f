"""
Copy persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database
from core.errors import QueryError
from core.pagination import LIST_TIMEOUT_SECONDS

_COLUMNS = "id, name, key_id, created_at, created_by, is_active"


async def list_copies(db: Database, *, limit: int, offset: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM copies
        ORDER BY id
        LIMIT $1
        OFFSET $2
        """,
        limit,
        offset,
        timeout=LIST_TIMEOUT_SECONDS,
    )


async def count_copies(db: Database) -> int:
    total = await db.fetch_val(
        """
        SELECT count(*)
        FROM copies
        """,
        timeout=LIST_TIMEOUT_SECONDS,
    )
    return int(total or 0)


async def get_copy(db: Database, copy_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM copies
        WHERE id = $1
        """,
        copy_id,
    )


async def insert_copy(
    db: Database,
    *,
    name: str,
    key_id: int,
    created_by: int,
    is_active: bool = True,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO copies (name, key_id, created_at, created_by, is_active)
        VALUES ($1, $2, now(), $3, $4)
        RETURNING {_COLUMNS}
        """,
        name,
        key_id,
        created_by,
        is_active,
    )
    if row is None:
        raise QueryError("Failed to create copy.")
    return row


async def update_copy(db: Database, copy_id: int, *, name: str, is_active: bool) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        UPDATE copies
        SET name = $1,
            is_active = $2
        WHERE id = $3
        RETURNING {_COLUMNS}
        """,
        name,
        is_active,
        copy_id,
    )


async def delete_copy(db: Database, copy_id: int) -> None:
    await db.execute(
        """
        DELETE FROM copies
        WHERE id = $1
        """,
        copy_id,
    )
