"""
Key business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from core.db import Database
from core.errors import NotFoundError
from core.pagination import paginate

from . import repository, schemas

logger = logging.getLogger(__name__)

# Stand-in creator id until requests carry a caller identity.
PLACEHOLDER_CREATED_BY = 1


def _to_key_response(row: dict[str, Any]) -> dict[str, Any]:
    created_by = row.get("created_by")
    return {
        "id": int(row["id"]),
        "name": str(row["name"] or ""),
        "created_at": row.get("created_at"),
        "created_by": int(created_by) if created_by is not None else None,
        "is_active": bool(row["is_active"]),
    }


async def list_keys(db: Database, *, limit: int, offset: int) -> dict[str, Any]:
    rows = await repository.list_keys(db, limit=limit, offset=offset)
    total = await repository.count_keys(db)
    return paginate([_to_key_response(r) for r in rows], total, limit)


async def get_key(db: Database, key_id: int) -> dict[str, Any]:
    row = await repository.get_key(db, key_id)
    if row is None:
        raise NotFoundError("Key", key_id)
    return _to_key_response(row)


async def create_key(db: Database, payload: schemas.KeyCreateRequest) -> dict[str, Any]:
    row = await repository.insert_key(
        db,
        name=payload.name,
        created_by=PLACEHOLDER_CREATED_BY,
        is_active=True,
    )
    logger.info("key_created key_id=%s", row["id"])
    return _to_key_response(row)


async def update_key(db: Database, key_id: int, payload: schemas.KeyUpdateRequest) -> dict[str, Any]:
    row = await repository.update_key(db, key_id, name=payload.name, is_active=True)
    if row is None:
        return {
            "id": key_id,
            "name": payload.name,
            "created_at": None,
            "created_by": None,
            "is_active": True,
        }
    return _to_key_response(row)


async def delete_key(db: Database, key_id: int) -> None:
    # Copies referencing the key are not checked here.
    await repository.delete_key(db, key_id)
