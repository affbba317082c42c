"""SQLAlchemy ORM model for follower relationships."""
from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.orm import relationship

from app.database import Base
from .base import CreatedAtMixin


class Follow(CreatedAtMixin, Base):
    """Directed edge: ``follower_id`` follows ``followed_id``.

    The composite primary key is the uniqueness constraint on the ordered pair.
    """

    __tablename__ = "follows"

    follower_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True, index=True)
    followed_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True, index=True)

    follower = relationship("User", foreign_keys=[follower_id], back_populates="following_relations")
    followed = relationship("User", foreign_keys=[followed_id], back_populates="follower_relations")


__all__ = ["Follow"]
