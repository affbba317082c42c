"""Business logic for user accounts."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from ..errors import Conflict, InvalidPayload, NotFound
from ..models import User
from ..repositories import UserRepository
from .auth_service import hash_password

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> User:
    user = UserRepository(db).find_by_id(user_id)
    if user is None:
        raise NotFound("User not found")
    return user


def register_user(db: Session, *, username: str, password: str, bio: str | None = None) -> User:
    """Persist a new user with a bcrypt-hashed password.

    Raises :class:`Conflict` when the username is taken; the unique index on
    ``users.username`` settles concurrent registrations the same way.
    """

    name = (username or "").strip()
    if not name or not password:
        raise InvalidPayload("Username and password are required")

    users = UserRepository(db)
    if users.find_by_username(name) is not None:
        raise Conflict("Username already in use")

    cleaned_bio = bio.strip() if bio and bio.strip() else None
    user = users.create(username=name, hashed_password=hash_password(password), bio=cleaned_bio)
    logger.info("Registered user %s (%s)", user.id, user.username)
    return user


def delete_user(db: Session, user_id: int) -> None:
    """Delete a user along with their posts, comments and follow edges."""

    users = UserRepository(db)
    user = users.find_by_id(user_id)
    if user is None:
        raise NotFound("User not found")
    users.delete(user)
    logger.info("Deleted user %s", user_id)


__all__ = ["get_user", "register_user", "delete_user"]
