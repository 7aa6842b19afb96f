"""
FastAPI dependencies shared by all resource routers.
"""

from __future__ import annotations

from fastapi import Query, Request

from .db import Database
from .errors import ValidationError
from .pagination import DEFAULT_LIMIT, DEFAULT_OFFSET, validate_window

# Ids live in INTEGER columns; LIMIT/OFFSET are bigint.
MAX_ID = 2**31 - 1
MAX_WINDOW = 2**63 - 1


def get_db(request: Request) -> Database:
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("Database is not initialized.")
    return db


def pagination_params(
    limit: int = Query(DEFAULT_LIMIT),
    offset: int = Query(DEFAULT_OFFSET),
) -> tuple[int, int]:
    validate_window(limit, offset)
    if limit > MAX_WINDOW or offset > MAX_WINDOW:
        raise ValidationError(f"limit and offset must not exceed {MAX_WINDOW}.")
    return limit, offset


def require_positive_id(value: int, *, name: str = "id") -> int:
    if value <= 0 or value > MAX_ID:
        raise ValidationError(f"{name} must be an integer between 1 and {MAX_ID}.")
    return value
