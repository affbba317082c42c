"""Pydantic schemas for posts, comments and the home feed."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from ..services import CommentEntry, PostDetail, PostEntry


class PostCreate(BaseModel):
    """Payload used by API clients when constructing a post."""

    content: str = Field(..., min_length=1, max_length=5000)


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=1000)


class AuthorResponse(BaseModel):
    id: int
    username: str


class CommentResponse(BaseModel):
    id: int
    post_id: int
    content: str
    created_at: datetime
    author: AuthorResponse

    @classmethod
    def from_entry(cls, entry: CommentEntry) -> "CommentResponse":
        comment = entry.comment
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            content=comment.content,
            created_at=comment.created_at,
            author=AuthorResponse(id=entry.author.id, username=entry.author.username),
        )


class PostResponse(BaseModel):
    """Serialized representation of a persisted post."""

    id: int
    content: str
    created_at: datetime
    author: AuthorResponse

    @classmethod
    def from_entry(cls, entry: PostEntry) -> "PostResponse":
        post = entry.post
        return cls(
            id=post.id,
            content=post.content,
            created_at=post.created_at,
            author=AuthorResponse(id=entry.author.id, username=entry.author.username),
        )


class PostDetailResponse(PostResponse):
    comments: list[CommentResponse] = Field(default_factory=list)

    @classmethod
    def from_detail(cls, detail: PostDetail) -> "PostDetailResponse":
        post = detail.post
        return cls(
            id=post.id,
            content=post.content,
            created_at=post.created_at,
            author=AuthorResponse(id=detail.author.id, username=detail.author.username),
            comments=[CommentResponse.from_entry(entry) for entry in detail.comments],
        )


class PostFeedResponse(BaseModel):
    """Envelope used when returning a collection of posts."""

    items: list[PostResponse]

    @classmethod
    def from_entries(cls, entries: list[PostEntry]) -> "PostFeedResponse":
        return cls(items=[PostResponse.from_entry(entry) for entry in entries])


__all__ = [
    "PostCreate",
    "CommentCreate",
    "AuthorResponse",
    "CommentResponse",
    "PostResponse",
    "PostDetailResponse",
    "PostFeedResponse",
]
