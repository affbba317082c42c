"""Business logic for follower relationships."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from ..errors import Conflict, NotFound
from ..models import Follow
from ..repositories import FollowRepository, UserRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FollowStats:
    user_id: int
    followers_count: int
    following_count: int
    is_following: bool


def _require_user(db: Session, user_id: int) -> None:
    if not UserRepository(db).exists(user_id):
        raise NotFound(f"User {user_id} not found")


def follow_user(db: Session, *, follower_id: int, target_id: int) -> Follow:
    """Create the edge ``follower_id -> target_id``.

    Both users must exist (:class:`NotFound`). Following the same user twice
    raises :class:`Conflict`. Following yourself is allowed.
    """

    _require_user(db, follower_id)
    _require_user(db, target_id)

    follows = FollowRepository(db)
    if follows.find(follower_id, target_id) is not None:
        raise Conflict("Already following this user")

    try:
        edge = follows.create(follower_id, target_id)
    except Conflict:
        # A user deleted since the checks above fails the foreign key, not the primary key.
        _require_user(db, follower_id)
        _require_user(db, target_id)
        raise
    logger.info("User %s followed user %s", follower_id, target_id)
    return edge


def unfollow_user(db: Session, *, follower_id: int, target_id: int) -> bool:
    """Remove the edge if present; returns ``False`` when there was nothing to remove."""

    follows = FollowRepository(db)
    edge = follows.find(follower_id, target_id)
    if edge is None:
        return False
    follows.delete(edge)
    logger.info("User %s unfollowed user %s", follower_id, target_id)
    return True


def list_followed_ids(db: Session, user_id: int) -> set[int]:
    return FollowRepository(db).followed_ids(user_id)


def get_follow_stats(
    db: Session,
    *,
    user_id: int,
    viewer_id: int | None = None,
    strict: bool = True,
) -> FollowStats:
    """Follower and following counts for ``user_id``.

    With ``strict`` an unknown user raises :class:`NotFound`; otherwise the
    counts for an unknown id are simply zero.
    """

    if strict:
        _require_user(db, user_id)

    follows = FollowRepository(db)
    is_following = False
    if viewer_id is not None:
        is_following = follows.find(viewer_id, user_id) is not None

    return FollowStats(
        user_id=user_id,
        followers_count=follows.count_followers(user_id),
        following_count=follows.count_following(user_id),
        is_following=is_following,
    )


__all__ = ["FollowStats", "follow_user", "unfollow_user", "list_followed_ids", "get_follow_stats"]
