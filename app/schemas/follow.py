"""Schemas supporting follower APIs."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class FollowStatsResponse(BaseModel):
    user_id: int
    followers_count: int
    following_count: int
    is_following: bool


class FollowActionResponse(FollowStatsResponse):
    status: Literal["followed", "unfollowed", "noop"]
    following_ids: list[int] = Field(default_factory=list)


__all__ = ["FollowStatsResponse", "FollowActionResponse"]
