"""
Copy business logic.

A copy always belongs to a key. When the request does not name one, the first
key (lowest id) is used; this lookup and the insert are two independent
statements, so the key can disappear in between.
"""

from __future__ import annotations

import logging
from typing import Any

from core.db import Database
from core.errors import DependencyMissingError, NotFoundError
from core.pagination import paginate
from keys import repository as key_repository
from keys.service import PLACEHOLDER_CREATED_BY

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_copy_response(row: dict[str, Any]) -> dict[str, Any]:
    created_by = row.get("created_by")
    return {
        "id": int(row["id"]),
        "name": str(row["name"] or ""),
        "key_id": int(row["key_id"]) if row["key_id"] is not None else None,
        "created_at": row.get("created_at"),
        "created_by": int(created_by) if created_by is not None else None,
        "is_active": bool(row["is_active"]),
    }


async def _default_key_id(db: Database) -> int:
    rows = await key_repository.list_keys(db, limit=1, offset=0)
    if not rows:
        raise DependencyMissingError("No key exists to attach the copy to.")
    return int(rows[0]["id"])


async def list_copies(db: Database, *, limit: int, offset: int) -> dict[str, Any]:
    rows = await repository.list_copies(db, limit=limit, offset=offset)
    total = await repository.count_copies(db)
    return paginate([_to_copy_response(r) for r in rows], total, limit)


async def get_copy(db: Database, copy_id: int) -> dict[str, Any]:
    row = await repository.get_copy(db, copy_id)
    if row is None:
        raise NotFoundError("Copy", copy_id)
    return _to_copy_response(row)


async def create_copy(db: Database, payload: schemas.CopyCreateRequest) -> dict[str, Any]:
    key_id = payload.key_id
    if key_id is None or key_id <= 0:
        key_id = await _default_key_id(db)

    row = await repository.insert_copy(
        db,
        name=payload.name,
        key_id=key_id,
        created_by=PLACEHOLDER_CREATED_BY,
        is_active=True,
    )
    logger.info("copy_created copy_id=%s key_id=%s", row["id"], key_id)
    return _to_copy_response(row)


async def update_copy(db: Database, copy_id: int, payload: schemas.CopyUpdateRequest) -> dict[str, Any]:
    row = await repository.update_copy(db, copy_id, name=payload.name, is_active=True)
    if row is None:
        return {
            "id": copy_id,
            "name": payload.name,
            "key_id": None,
            "created_at": None,
            "created_by": None,
            "is_active": True,
        }
    return _to_copy_response(row)


async def delete_copy(db: Database, copy_id: int) -> None:
    await repository.delete_copy(db, copy_id)
