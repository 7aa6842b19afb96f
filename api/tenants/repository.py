"""
Tenant persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database
from core.errors import QueryError
from core.pagination import LIST_TIMEOUT_SECONDS

_COLUMNS = "id, name, address, status, created_at, is_active"


async def list_tenants(db: Database, *, limit: int, offset: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM tenants
        ORDER BY id
        LIMIT $1
        OFFSET $2
        """,
        limit,
        offset,
        timeout=LIST_TIMEOUT_SECONDS,
    )


async def count_tenants(db: Database) -> int:
    total = await db.fetch_val(
        """
        SELECT count(*)
        FROM tenants
        """,
        timeout=LIST_TIMEOUT_SECONDS,
    )
    return int(total or 0)


async def get_tenant(db: Database, tenant_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM tenants
        WHERE id = $1
        """,
        tenant_id,
    )


async def insert_tenant(
    db: Database,
    *,
    name: str,
    address: str,
    status: str,
    is_active: bool = True,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO tenants (name, address, status, created_at, is_active)
        VALUES ($1, $2, $3, now(), $4)
        RETURNING {_COLUMNS}
        """,
        name,
        address,
        status,
        is_active,
    )
    if row is None:
        raise QueryError("Failed to create tenant.")
    return row


async def update_tenant(
    db: Database,
    tenant_id: int,
    *,
    name: str,
    address: str,
    status: str,
    is_active: bool,
) -> dict[str, Any] | None:
    """
    Overwrite a tenant's mutable fields. Returns None when no row matched.
    """
    return await db.fetch_one(
        f"""
        UPDATE tenants
        SET name = $1,
            address = $2,
            status = $3,
            is_active = $4
        WHERE id = $5
        RETURNING {_COLUMNS}
        """,
        name,
        address,
        status,
        is_active,
        tenant_id,
    )


async def delete_tenant(db: Database, tenant_id: int) -> None:
    await db.execute(
        """
        DELETE FROM tenants
        WHERE id = $1
        """,
        tenant_id,
    )
