"""Convenience exports for schema layer."""
from .auth import AuthResponse, LoginRequest, RegisterRequest
from .follow import FollowActionResponse, FollowStatsResponse
from .posts import (
    AuthorResponse,
    CommentCreate,
    CommentResponse,
    PostCreate,
    PostDetailResponse,
    PostFeedResponse,
    PostResponse,
)
from .users import UserCreatedResponse, UserResponse

__all__ = [
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    "FollowActionResponse",
    "FollowStatsResponse",
    "AuthorResponse",
    "CommentCreate",
    "CommentResponse",
    "PostCreate",
    "PostDetailResponse",
    "PostFeedResponse",
    "PostResponse",
    "UserCreatedResponse",
    "UserResponse",
]
