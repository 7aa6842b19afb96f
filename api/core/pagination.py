"""
Pagination helpers shared by every list endpoint.

List responses use the envelope `{"items": [...], "totalPages": n}`.
"""

from __future__ import annotations

from typing import Any

from .errors import ValidationError

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0

# Deadline for each of the two list queries (page + count).
LIST_TIMEOUT_SECONDS = 5.0


def validate_window(limit: int, offset: int) -> None:
    if limit <= 0:
        raise ValidationError("limit must be greater than 0.")
    if offset < 0:
        raise ValidationError("offset must be 0 or greater.")


def total_pages(total_count: int, limit: int) -> int:
    if limit <= 0:
        raise ValidationError("limit must be greater than 0.")
    if total_count <= 0:
        return 0
    return -(-total_count // limit)


def paginate(items: list[Any], total_count: int, limit: int) -> dict[str, Any]:
    return {"items": items, "totalPages": total_pages(total_count, limit)}


def like_pattern(value: str | None) -> str:
    """
    Case-insensitive substring pattern for ILIKE. Empty input matches everything.
    """
    raw = value or ""
    if not raw.strip():
        return "%"
    return f"%{raw}%"
