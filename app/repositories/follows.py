"""Persistence access for the directed follow graph."""
from __future__ import annotations

from sqlalchemy import func, select

from ..models import Follow
from .base import Repository, translate_errors


class FollowRepository(Repository):
    def find(self, follower_id: int, followed_id: int) -> Follow | None:
        with translate_errors(self.db):
            return self.db.get(Follow, (follower_id, followed_id))

    def create(self, follower_id: int, followed_id: int) -> Follow:
        edge = Follow(follower_id=follower_id, followed_id=followed_id)
        return self._save(edge, conflict_detail="Already following this user")

    def delete(self, edge: Follow) -> None:
        self._remove(edge)

    def followed_ids(self, user_id: int) -> set[int]:
        with translate_errors(self.db):
            rows = self.db.scalars(select(Follow.followed_id).where(Follow.follower_id == user_id))
            return set(rows)

    def count_followers(self, user_id: int) -> int:
        with translate_errors(self.db):
            count = self.db.scalar(
                select(func.count()).select_from(Follow).where(Follow.followed_id == user_id)
            )
        return int(count or 0)

    def count_following(self, user_id: int) -> int:
        with translate_errors(self.db):
            count = self.db.scalar(
                select(func.count()).select_from(Follow).where(Follow.follower_id == user_id)
            )
        return int(count or 0)


__all__ = ["FollowRepository"]
