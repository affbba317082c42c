"""Shared helpers for repositories: session error translation."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import Conflict, StorageError

logger = logging.getLogger(__name__)


@contextmanager
def translate_errors(db: Session, *, conflict_detail: str | None = None) -> Iterator[None]:
    """Roll back and re-raise SQLAlchemy failures as typed service errors.

    ``IntegrityError`` becomes :class:`Conflict` when the caller names the
    uniqueness rule it guards; anything else is a :class:`StorageError`.
    """

    try:
        yield
    except IntegrityError as exc:
        db.rollback()
        if conflict_detail is not None:
            raise Conflict(conflict_detail) from exc
        logger.exception("Integrity violation outside a uniqueness check")
        raise StorageError() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Database operation failed")
        raise StorageError() from exc


class Repository:
    """Base class binding a repository to one request-scoped session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _save(self, instance, *, conflict_detail: str | None = None):
        with translate_errors(self.db, conflict_detail=conflict_detail):
            self.db.add(instance)
            self.db.commit()
            self.db.refresh(instance)
        return instance

    def _remove(self, instance) -> None:
        with translate_errors(self.db):
            self.db.delete(instance)
            self.db.commit()


__all__ = ["Repository", "translate_errors"]
