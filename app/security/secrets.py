"""Loading of signing keys and other secrets from the environment."""
from __future__ import annotations

import os
from typing import Final

__all__ = ["MissingSecretError", "require_secret", "is_placeholder"]


class MissingSecretError(RuntimeError):
    """Raised when a required secret is unset, a placeholder, or too short."""


# Values copied from sample configs that must never sign a real token.
_PLACEHOLDER_VALUES: Final[frozenset[str]] = frozenset(
    {
        "changeme",
        "change-me",
        "placeholder",
        "secret",
        "some secret",
        "your-key-here",
    }
)


def is_placeholder(value: str | None) -> bool:
    if value is None:
        return True
    normalized = value.strip().lower()
    return normalized == "" or normalized in _PLACEHOLDER_VALUES


def require_secret(name: str, *, min_length: int = 1) -> str:
    """Return the trimmed value of environment variable ``name``.

    The secret's value never appears in the raised message.
    """

    value = os.getenv(name)
    if is_placeholder(value):
        raise MissingSecretError(f"{name} must be set to a non-placeholder value")
    secret = value.strip()
    if len(secret) < min_length:
        raise MissingSecretError(f"{name} must be at least {min_length} characters long")
    return secret
