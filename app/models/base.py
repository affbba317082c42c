"""Utility mixins shared across ORM models."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime
from sqlalchemy.sql import func


def utcnow() -> datetime:
    """Timezone-aware "now" used as the client-side column default."""

    return datetime.now(timezone.utc)


class CreatedAtMixin:
    """Creation timestamp; the client-side default has microsecond precision."""

    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)


__all__ = ["CreatedAtMixin", "utcnow"]
