"""
Tenant API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.db import Database
from core.dependencies import get_db, pagination_params, require_positive_id

from . import schemas, service

router = APIRouter(prefix="/tenants")


@router.get("")
async def list_tenants(
    window: tuple[int, int] = Depends(pagination_params),
    db: Database = Depends(get_db),
) -> dict:
    limit, offset = window
    return await service.list_tenants(db, limit=limit, offset=offset)


@router.get("/{tenant_id}")
async def get_tenant(tenant_id: int, db: Database = Depends(get_db)) -> dict:
    return await service.get_tenant(db, require_positive_id(tenant_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_tenant(
    request: schemas.TenantCreateRequest,
    db: Database = Depends(get_db),
) -> dict:
    return await service.create_tenant(db, request)


@router.put("/{tenant_id}")
async def update_tenant(
    tenant_id: int,
    request: schemas.TenantUpdateRequest,
    db: Database = Depends(get_db),
) -> dict:
    return await service.update_tenant(db, require_positive_id(tenant_id), request)


@router.delete("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tenant(tenant_id: int, db: Database = Depends(get_db)) -> Response:
    await service.delete_tenant(db, require_positive_id(tenant_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
