"""
Key API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.db import Database
from core.dependencies import get_db, pagination_params, require_positive_id

from . import schemas, service

router = APIRouter(prefix="/keys")


@router.get("")
async def list_keys(
    window: tuple[int, int] = Depends(pagination_params),
    db: Database = Depends(get_db),
) -> dict:
    limit, offset = window
    return await service.list_keys(db, limit=limit, offset=offset)


@router.get("/{key_id}")
async def get_key(key_id: int, db: Database = Depends(get_db)) -> dict:
    return await service.get_key(db, require_positive_id(key_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_key(
    request: schemas.KeyCreateRequest,
    db: Database = Depends(get_db),
) -> dict:
    return await service.create_key(db, request)


@router.put("/{key_id}")
async def update_key(
    key_id: int,
    request: schemas.KeyUpdateRequest,
    db: Database = Depends(get_db),
) -> dict:
    return await service.update_key(db, require_positive_id(key_id), request)


@router.delete("/{key_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_key(key_id: int, db: Database = Depends(get_db)) -> Response:
    await service.delete_key(db, require_positive_id(key_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
