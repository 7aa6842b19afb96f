"""
Tenant business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from core.db import Database
from core.errors import NotFoundError
from core.pagination import paginate

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_tenant_response(row: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": int(row["id"]),
        "name": str(row["name"] or ""),
        "address": str(row["address"] or ""),
        "status": str(row["status"] or ""),
        "created_at": row.get("created_at"),
        "is_active": bool(row["is_active"]),
    }


async def list_tenants(db: Database, *, limit: int, offset: int) -> dict[str, Any]:
    # Page and count are separate reads; totalPages may lag concurrent writes.
    rows = await repository.list_tenants(db, limit=limit, offset=offset)
    total = await repository.count_tenants(db)
    return paginate([_to_tenant_response(r) for r in rows], total, limit)


async def get_tenant(db: Database, tenant_id: int) -> dict[str, Any]:
    row = await repository.get_tenant(db, tenant_id)
    if row is None:
        raise NotFoundError("Tenant", tenant_id)
    return _to_tenant_response(row)


async def create_tenant(db: Database, payload: schemas.TenantCreateRequest) -> dict[str, Any]:
    row = await repository.insert_tenant(
        db,
        name=payload.name,
        address=payload.address,
        status=payload.status,
        is_active=True,
    )
    logger.info("tenant_created tenant_id=%s", row["id"])
    return _to_tenant_response(row)


async def update_tenant(
    db: Database,
    tenant_id: int,
    payload: schemas.TenantUpdateRequest,
) -> dict[str, Any]:
    row = await repository.update_tenant(
        db,
        tenant_id,
        name=payload.name,
        address=payload.address,
        status=payload.status,
        is_active=payload.is_active,
    )
    if row is None:
        # No matching id: nothing was written, echo the submitted values.
        return {
            "id": tenant_id,
            "name": payload.name,
            "address": payload.address,
            "status": payload.status,
            "created_at": None,
            "is_active": payload.is_active,
        }
    return _to_tenant_response(row)


async def delete_tenant(db: Database, tenant_id: int) -> None:
    # Users referencing the tenant are not checked here.
    await repository.delete_tenant(db, tenant_id)
