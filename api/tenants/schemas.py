"""
Tenant API schemas (request models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class TenantCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(default="", max_length=500)
    status: str = Field(default="", max_length=50)


class TenantUpdateRequest(TenantCreateRequest):
    is_active: bool = True
