"""
User business logic.

Rules:
- gender is converted "0"/"1" -> bool on the way in and back on the way out
- passwords are bcrypt-hashed before they reach SQL and are never returned
- a user created without a tenant is attached to the first tenant (lowest id)
"""

from __future__ import annotations

import logging
from typing import Any

from core.db import Database
from core.errors import DependencyMissingError, NotFoundError
from core.pagination import like_pattern, paginate
from tenants import repository as tenant_repository

from . import repository, schemas, security
from .gender import gender_to_bool, gender_to_str

logger = logging.getLogger(__name__)


def _to_user_response(row: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": int(row["id"]),
        "username": str(row["username"] or ""),
        "email": str(row["email"] or ""),
        "name": str(row["name"] or ""),
        "gender": gender_to_str(bool(row["gender"])),
        "id_number": str(row["id_number"] or ""),
        "user_image": str(row["user_image"] or ""),
        "tenant_id": int(row["tenant_id"]) if row["tenant_id"] is not None else None,
        "created_at": row.get("created_at"),
        "is_active": bool(row["is_active"]),
    }


async def _default_tenant_id(db: Database) -> int:
    # Separate read before the insert; the tenant may be deleted in between.
    rows = await tenant_repository.list_tenants(db, limit=1, offset=0)
    if not rows:
        raise DependencyMissingError("No tenant exists to attach the user to.")
    return int(rows[0]["id"])


async def list_users(
    db: Database,
    *,
    limit: int,
    offset: int,
    name: str = "",
    id_number: str = "",
) -> dict[str, Any]:
    name_pattern = like_pattern(name)
    id_number_pattern = like_pattern(id_number)
    rows = await repository.list_users(
        db,
        name_pattern=name_pattern,
        id_number_pattern=id_number_pattern,
        limit=limit,
        offset=offset,
    )
    total = await repository.count_users(
        db,
        name_pattern=name_pattern,
        id_number_pattern=id_number_pattern,
    )
    return paginate([_to_user_response(r) for r in rows], total, limit)


async def get_user(db: Database, user_id: int) -> dict[str, Any]:
    row = await repository.get_user(db, user_id)
    if row is None:
        raise NotFoundError("User", user_id)
    return _to_user_response(row)


async def create_user(db: Database, payload: schemas.UserCreateRequest) -> dict[str, Any]:
    gender = gender_to_bool(payload.gender)

    tenant_id = payload.tenant_id
    if tenant_id is None or tenant_id <= 0:
        tenant_id = await _default_tenant_id(db)

    password_hash = security.hash_password(payload.password)
    row = await repository.insert_user(
        db,
        username=payload.username,
        email=payload.email,
        password_hash=password_hash,
        name=payload.name,
        gender=gender,
        id_number=payload.id_number,
        user_image=payload.user_image,
        tenant_id=tenant_id,
        is_active=True,
    )
    logger.info("user_created user_id=%s tenant_id=%s", row["id"], tenant_id)
    return _to_user_response(row)


async def update_user(
    db: Database,
    user_id: int,
    payload: schemas.UserUpdateRequest,
) -> dict[str, Any]:
    gender = gender_to_bool(payload.gender)
    tenant_id = payload.tenant_id if payload.tenant_id and payload.tenant_id > 0 else None

    password_hash = None
    if payload.password:
        password_hash = security.hash_password(payload.password)

    row = await repository.update_user(
        db,
        user_id,
        username=payload.username,
        email=payload.email,
        password_hash=password_hash,
        name=payload.name,
        gender=gender,
        id_number=payload.id_number,
        user_image=payload.user_image,
        tenant_id=tenant_id,
        is_active=payload.is_active,
    )
    if row is None:
        # No matching id: nothing was written, echo the submitted values.
        return {
            "id": user_id,
            "username": payload.username,
            "email": payload.email,
            "name": payload.name,
            "gender": gender_to_str(gender),
            "id_number": payload.id_number,
            "user_image": payload.user_image,
            "tenant_id": tenant_id,
            "created_at": None,
            "is_active": payload.is_active,
        }
    return _to_user_response(row)


async def delete_user(db: Database, user_id: int) -> None:
    await repository.delete_user(db, user_id)
