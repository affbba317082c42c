"""Home feed composition: posts written by the authors a user follows."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from ..repositories import PostRepository
from .follow_service import list_followed_ids
from .post_service import PostEntry, to_entries

logger = logging.getLogger(__name__)


def compose_feed(db: Session, user_id: int) -> list[PostEntry]:
    """Return posts by followed authors, most recent first.

    A user who follows nobody gets an empty feed. Comments are not attached;
    use :func:`app.services.post_service.get_post` for the full thread.
    """

    followed_ids = list_followed_ids(db, user_id)
    if not followed_ids:
        return []

    rows = PostRepository(db).query(author_ids=sorted(followed_ids))
    logger.debug("Feed for user %s: %d posts from %d authors", user_id, len(rows), len(followed_ids))
    return to_entries(rows)


__all__ = ["compose_feed"]
