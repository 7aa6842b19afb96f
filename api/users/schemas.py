"""
User API schemas (request models).

`gender` travels as the string "0" or "1"; see `users.gender`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class UserCreateRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=150)
    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=1, max_length=128)
    name: str = Field(default="", max_length=255)
    gender: str
    id_number: str = Field(default="", max_length=64)
    user_image: str = Field(default="", max_length=1000)
    # Omitted or <= 0: the first tenant (lowest id) is used.
    tenant_id: int | None = Field(default=None, le=2**31 - 1)


class UserUpdateRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=150)
    email: str = Field(..., min_length=3, max_length=320)
    # Empty keeps the stored hash.
    password: str = Field(default="", max_length=128)
    name: str = Field(default="", max_length=255)
    gender: str
    id_number: str = Field(default="", max_length=64)
    user_image: str = Field(default="", max_length=1000)
    tenant_id: int | None = Field(default=None, le=2**31 - 1)
    is_active: bool = True
