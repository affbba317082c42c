"""Persistence access for posts and comments."""
from __future__ import annotations

from datetime import datetime
from typing import Iterable

from sqlalchemy import select

from ..models import Comment, Post, User
from .base import Repository, translate_errors


class PostRepository(Repository):
    def find_by_id(self, post_id: int) -> Post | None:
        with translate_errors(self.db):
            return self.db.get(Post, post_id)

    def create(self, *, user_id: int, content: str, created_at: datetime | None = None) -> Post:
        post = Post(user_id=user_id, content=content)
        if created_at is not None:
            post.created_at = created_at
        return self._save(post)

    def query(self, *, author_ids: Iterable[int] | None = None) -> list[tuple[Post, User]]:
        """Return ``(post, author)`` rows, newest first.

        Rows sharing a timestamp keep insertion order. ``author_ids`` narrows
        the result with a single ``IN`` filter on the indexed ``posts.user_id``.
        """

        statement = select(Post, User).join(User, Post.user_id == User.id)
        if author_ids is not None:
            statement = statement.where(Post.user_id.in_(list(author_ids)))
        statement = statement.order_by(Post.created_at.desc(), Post.id.asc())

        with translate_errors(self.db):
            rows = self.db.execute(statement).all()
        return [(post, author) for post, author in rows]

    def list_all(self) -> list[tuple[Post, User]]:
        return self.query()


class CommentRepository(Repository):
    def create(
        self,
        *,
        post_id: int,
        user_id: int,
        content: str,
        created_at: datetime | None = None,
    ) -> Comment:
        comment = Comment(post_id=post_id, user_id=user_id, content=content)
        if created_at is not None:
            comment.created_at = created_at
        return self._save(comment)

    def list_for_post(self, post_id: int) -> list[tuple[Comment, User]]:
        statement = (
            select(Comment, User)
            .join(User, Comment.user_id == User.id)
            .where(Comment.post_id == post_id)
            .order_by(Comment.created_at.asc(), Comment.id.asc())
        )
        with translate_errors(self.db):
            rows = self.db.execute(statement).all()
        return [(comment, author) for comment, author in rows]


__all__ = ["PostRepository", "CommentRepository"]
