"""Schemas for user account endpoints."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """Public profile; never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    bio: str | None = None
    created_at: datetime


class UserCreatedResponse(BaseModel):
    id: int


__all__ = ["UserResponse", "UserCreatedResponse"]
