"""Business logic for posts and comments."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from sqlalchemy.orm import Session

from ..errors import InvalidPayload, NotFound
from ..models import Comment, Post, User
from ..repositories import CommentRepository, PostRepository, UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AuthorIdentity:
    """Public identity attached to posts and comments."""

    id: int
    username: str

    @classmethod
    def of(cls, user: User) -> "AuthorIdentity":
        return cls(id=user.id, username=user.username)


@dataclass(slots=True)
class PostEntry:
    post: Post
    author: AuthorIdentity


@dataclass(slots=True)
class CommentEntry:
    comment: Comment
    author: AuthorIdentity


@dataclass(slots=True)
class PostDetail:
    post: Post
    author: AuthorIdentity
    comments: list[CommentEntry] = field(default_factory=list)


def _clean_content(content: str | None, *, label: str) -> str:
    text = (content or "").strip()
    if not text:
        raise InvalidPayload(f"{label} cannot be empty")
    return text


def to_entries(rows: list[tuple[Post, User]]) -> list[PostEntry]:
    return [PostEntry(post=post, author=AuthorIdentity.of(author)) for post, author in rows]


def create_post(
    db: Session,
    *,
    author_id: int,
    content: str,
    created_at: datetime | None = None,
) -> Post:
    """Create and persist a new post for the given user."""

    text = _clean_content(content, label="Post")
    if not UserRepository(db).exists(author_id):
        raise NotFound("User not found")

    post = PostRepository(db).create(user_id=author_id, content=text, created_at=created_at)
    logger.info("User %s created post %s", author_id, post.id)
    return post


def list_posts(db: Session) -> list[PostEntry]:
    """Every post, newest first, with its author."""

    return to_entries(PostRepository(db).list_all())


def get_post(db: Session, post_id: int) -> PostDetail:
    """Fetch a post, its author and its comments in creation order."""

    post = PostRepository(db).find_by_id(post_id)
    if post is None:
        raise NotFound("Post not found")

    author = UserRepository(db).find_by_id(post.user_id)
    if author is None:  # pragma: no cover - guarded by the foreign key
        raise NotFound("Post author not found")

    comments = [
        CommentEntry(comment=comment, author=AuthorIdentity.of(commenter))
        for comment, commenter in CommentRepository(db).list_for_post(post.id)
    ]
    return PostDetail(post=post, author=AuthorIdentity.of(author), comments=comments)


def create_comment(
    db: Session,
    *,
    post_id: int,
    author_id: int,
    content: str,
    created_at: datetime | None = None,
) -> CommentEntry:
    text = _clean_content(content, label="Comment")

    if PostRepository(db).find_by_id(post_id) is None:
        raise NotFound("Post not found")
    author = UserRepository(db).find_by_id(author_id)
    if author is None:
        raise NotFound("User not found")

    comment = CommentRepository(db).create(
        post_id=post_id,
        user_id=author_id,
        content=text,
        created_at=created_at,
    )
    logger.info("User %s commented on post %s", author_id, post_id)
    return CommentEntry(comment=comment, author=AuthorIdentity.of(author))


__all__ = [
    "AuthorIdentity",
    "PostEntry",
    "CommentEntry",
    "PostDetail",
    "create_post",
    "list_posts",
    "get_post",
    "create_comment",
    "to_entries",
]
