"""
Copy API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.db import Database
from core.dependencies import get_db, pagination_params, require_positive_id

from . import schemas, service

router = APIRouter(prefix="/copies")


@router.get("")
async def list_copies(
    window: tuple[int, int] = Depends(pagination_params),
    db: Database = Depends(get_db),
) -> dict:
    limit, offset = window
    return await service.list_copies(db, limit=limit, offset=offset)


@router.get("/{copy_id}")
async def get_copy(copy_id: int, db: Database = Depends(get_db)) -> dict:
    return await service.get_copy(db, require_positive_id(copy_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_copy(
    request: schemas.CopyCreateRequest,
    db: Database = Depends(get_db),
) -> dict:
    return await service.create_copy(db, request)


@router.put("/{copy_id}")
async def update_copy(
    copy_id: int,
    request: schemas.CopyUpdateRequest,
    db: Database = Depends(get_db),
) -> dict:
    return await service.update_copy(db, require_positive_id(copy_id), request)


@router.delete("/{copy_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_copy(copy_id: int, db: Database = Depends(get_db)) -> Response:
    await service.delete_copy(db, require_positive_id(copy_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
