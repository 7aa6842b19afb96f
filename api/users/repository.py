"""
User persistence (raw SQL).

The password column is written here but never selected back out.
"""

from __future__ import annotations

from typing import Any

from core.db import Database
from core.errors import QueryError
from core.pagination import LIST_TIMEOUT_SECONDS

_COLUMNS = "id, username, email, name, gender, id_number, user_image, tenant_id, created_at, is_active"


async def list_users(
    db: Database,
    *,
    name_pattern: str,
    id_number_pattern: str,
    limit: int,
    offset: int,
) -> list[dict[str, Any]]:
    """
    Patterns are ILIKE patterns; pass "%" to match everything.
    """
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM users
        WHERE COALESCE(name, '') ILIKE $1
          AND COALESCE(id_number, '') ILIKE $2
        ORDER BY id
        LIMIT $3
        OFFSET $4
        """,
        name_pattern,
        id_number_pattern,
        limit,
        offset,
        timeout=LIST_TIMEOUT_SECONDS,
    )


async def count_users(db: Database, *, name_pattern: str, id_number_pattern: str) -> int:
    total = await db.fetch_val(
        """
        SELECT count(*)
        FROM users
        WHERE COALESCE(name, '') ILIKE $1
          AND COALESCE(id_number, '') ILIKE $2
        """,
        name_pattern,
        id_number_pattern,
        timeout=LIST_TIMEOUT_SECONDS,
    )
    return int(total or 0)


async def get_user(db: Database, user_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM users
        WHERE id = $1
        """,
        user_id,
    )


async def insert_user(
    db: Database,
    *,
    username: str,
    email: str,
    password_hash: str,
    name: str,
    gender: bool,
    id_number: str,
    user_image: str,
    tenant_id: int,
    is_active: bool = True,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO users (
          username, email, password, name, gender,
          id_number, user_image, tenant_id, created_at, is_active
        )
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, now(), $9)
        RETURNING {_COLUMNS}
        """,
        username,
        email,
        password_hash,
        name,
        gender,
        id_number,
        user_image,
        tenant_id,
        is_active,
    )
    if row is None:
        raise QueryError("Failed to create user.")
    return row


async def update_user(
    db: Database,
    user_id: int,
    *,
    username: str,
    email: str,
    password_hash: str | None,
    name: str,
    gender: bool,
    id_number: str,
    user_image: str,
    tenant_id: int | None,
    is_active: bool,
) -> dict[str, Any] | None:
    """
    Overwrite a user's mutable fields. Returns None when no row matched.

    `password_hash=None` leaves the stored hash untouched; `tenant_id=None`
    keeps the current tenant.
    """
    return await db.fetch_one(
        f"""
        UPDATE users
        SET username = $1,
            email = $2,
            password = COALESCE($3, password),
            name = $4,
            gender = $5,
            id_number = $6,
            user_image = $7,
            tenant_id = COALESCE($8, tenant_id),
            is_active = $9
        WHERE id = $10
        RETURNING {_COLUMNS}
        """,
        username,
        email,
        password_hash,
        name,
        gender,
        id_number,
        user_image,
        tenant_id,
        is_active,
        user_id,
    )


async def delete_user(db: Database, user_id: int) -> None:
    await db.execute(
        """
        DELETE FROM users
        WHERE id = $1
        """,
        user_id,
    )
