"""Typed errors raised by repositories and services.

Each error carries the HTTP status that the handler in :mod:`app.main`
renders it with.
"""
from __future__ import annotations

from typing import Any

from fastapi import status


class SocialError(Exception):
    """Base class for every error the service layer surfaces to callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Request failed"

    def __init__(self, detail: Any = None) -> None:
        self.detail = detail if detail is not None else self.default_detail
        super().__init__(self.detail)


class NotFound(SocialError):
    """A referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class Conflict(SocialError):
    """A uniqueness constraint would be violated."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Already exists"


class Unauthorized(SocialError):
    """Missing, invalid or expired identity."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Not authenticated"


class InvalidPayload(SocialError):
    """Empty or malformed request payload."""

    status_code = 422
    default_detail = "Invalid payload"


class StorageError(SocialError):
    """Persistence failure that is not otherwise classified."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Storage failure"


__all__ = [
    "SocialError",
    "NotFound",
    "Conflict",
    "Unauthorized",
    "InvalidPayload",
    "StorageError",
]
