"""
Copy API schemas (request models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CopyCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    # Omitted or <= 0: the first key (lowest id) is used.
    key_id: int | None = Field(default=None, le=2**31 - 1)


class CopyUpdateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    # Accepted for compatibility; copies are always stored active.
    is_active: bool = True
