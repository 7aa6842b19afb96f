"""Row builders shaped like the dicts core.db.Database returns."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

CREATED_AT = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def tenant_row(tenant_id: int, name: str = "Acme") -> dict[str, Any]:
    return {
        "id": tenant_id,
        "name": name,
        "address": "1 Main St",
        "status": "active",
        "created_at": CREATED_AT,
        "is_active": True,
    }


def user_row(user_id: int, *, name: str = "Ann", gender: bool = True, tenant_id: int = 1) -> dict[str, Any]:
    return {
        "id": user_id,
        "username": f"user{user_id}",
        "email": f"user{user_id}@example.com",
        "name": name,
        "gender": gender,
        "id_number": f"ID-{user_id:04d}",
        "user_image": "",
        "tenant_id": tenant_id,
        "created_at": CREATED_AT,
        "is_active": True,
    }


def key_row(key_id: int, name: str = "Front door") -> dict[str, Any]:
    return {
        "id": key_id,
        "name": name,
        "created_at": CREATED_AT,
        "created_by": 1,
        "is_active": True,
    }


def copy_row(copy_id: int, *, key_id: int = 1, name: str = "Copy A") -> dict[str, Any]:
    return {
        "id": copy_id,
        "name": name,
        "key_id": key_id,
        "created_at": CREATED_AT,
        "created_by": 1,
        "is_active": True,
    }
