"""
Key API schemas (request models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class KeyCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class KeyUpdateRequest(KeyCreateRequest):
    # Accepted for compatibility; keys are always stored active.
    is_active: bool = True
