"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from core.db import Database
from core.dependencies import get_db, pagination_params, require_positive_id

from . import schemas, service

router = APIRouter(prefix="/users")


@router.get("")
async def list_users(
    window: tuple[int, int] = Depends(pagination_params),
    name: str = Query(default="", max_length=255),
    id_number: str = Query(default="", max_length=64),
    db: Database = Depends(get_db),
) -> dict:
    """
    Page through users, optionally filtered by case-insensitive substring of
    `name` and/or `id_number`.
    """
    limit, offset = window
    return await service.list_users(
        db,
        limit=limit,
        offset=offset,
        name=name,
        id_number=id_number,
    )


@router.get("/{user_id}")
async def get_user(user_id: int, db: Database = Depends(get_db)) -> dict:
    return await service.get_user(db, require_positive_id(user_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    request: schemas.UserCreateRequest,
    db: Database = Depends(get_db),
) -> dict:
    return await service.create_user(db, request)


@router.put("/{user_id}")
async def update_user(
    user_id: int,
    request: schemas.UserUpdateRequest,
    db: Database = Depends(get_db),
) -> dict:
    """
    Omit `password` (or send "") to keep the current one.
    """
    return await service.update_user(db, require_positive_id(user_id), request)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, db: Database = Depends(get_db)) -> Response:
    await service.delete_user(db, require_positive_id(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
