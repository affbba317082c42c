"""Persistence access for user accounts."""
from __future__ import annotations

from sqlalchemy import select

from ..models import User
from .base import Repository, translate_errors


class UserRepository(Repository):
    def find_by_id(self, user_id: int) -> User | None:
        with translate_errors(self.db):
            return self.db.get(User, user_id)

    def find_by_username(self, username: str) -> User | None:
        with translate_errors(self.db):
            return self.db.scalar(select(User).where(User.username == username))

    def exists(self, user_id: int) -> bool:
        with translate_errors(self.db):
            return self.db.scalar(select(User.id).where(User.id == user_id)) is not None

    def create(self, *, username: str, hashed_password: str, bio: str | None = None) -> User:
        user = User(username=username, hashed_password=hashed_password, bio=bio)
        return self._save(user, conflict_detail="Username already in use")

    def delete(self, user: User) -> None:
        self._remove(user)


__all__ = ["UserRepository"]
