"""Authentication: password hashing, bearer-token sessions and identity dependencies."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from ..config import Settings, get_settings
from ..database import get_session
from ..errors import Unauthorized
from ..models import User
from ..repositories import UserRepository
from ..security.secrets import MissingSecretError, require_secret

logger = logging.getLogger(__name__)

_security = HTTPBearer(auto_error=False)
_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a plain-text password using bcrypt."""

    return _pwd_context.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    """Verify that ``password`` matches ``hashed_password``."""

    try:
        return _pwd_context.verify(password, hashed_password)
    except ValueError:
        logger.warning("Stored password hash could not be parsed")
        return False


class AuthProvider:
    """Authenticates credentials and maps bearer tokens back to users.

    One instance is built per application and handed to request handlers
    through :func:`get_auth_provider`; it holds no per-user state, so every
    client session lives entirely in its own token.
    """

    def __init__(self, secret_key: str, *, algorithm: str = "HS256", expires_minutes: int = 1440) -> None:
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expires_minutes = expires_minutes

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "AuthProvider":
        settings = settings or get_settings()
        try:
            secret = require_secret("JWT_SECRET_KEY", min_length=8)
        except MissingSecretError as exc:
            raise RuntimeError(str(exc)) from exc
        return cls(secret, algorithm=settings.jwt_algorithm, expires_minutes=settings.jwt_expires_minutes)

    def authenticate(self, db: Session, username: str, password: str) -> User:
        """Return the user owning ``username``/``password`` or raise :class:`Unauthorized`."""

        user = UserRepository(db).find_by_username(username)
        if user is None or not verify_password(password, user.hashed_password):
            raise Unauthorized("Invalid credentials")
        return user

    def issue_token(self, user_id: int, *, expires_minutes: int | None = None) -> str:
        """Create a signed JWT whose subject is ``user_id``."""

        now = datetime.now(timezone.utc)
        expire_delta = timedelta(minutes=expires_minutes or self.expires_minutes)
        payload = {"sub": str(user_id), "iat": now, "exp": now + expire_delta}
        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> int:
        """Validate ``token`` and return the embedded user id."""

        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            raise Unauthorized("Invalid token") from exc

        subject = payload.get("sub")
        if not subject:
            raise Unauthorized("Invalid token payload")
        try:
            return int(subject)
        except ValueError as exc:
            raise Unauthorized("Invalid token payload") from exc

    def resolve(self, db: Session, token: str) -> User:
        """Map a previously issued token to its user."""

        user = UserRepository(db).find_by_id(self.decode_token(token))
        if user is None:
            raise Unauthorized("Invalid token")
        return user


def get_auth_provider(request: Request) -> AuthProvider:
    """FastAPI dependency returning the provider installed on ``app.state``."""

    return request.app.state.auth


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
    db: Session = Depends(get_session),
    auth: AuthProvider = Depends(get_auth_provider),
) -> User:
    """Resolve the authenticated user from the provided bearer token."""

    if not credentials or credentials.scheme.lower() != "bearer":
        raise Unauthorized("Missing bearer token")
    return auth.resolve(db, credentials.credentials)


async def get_optional_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
    db: Session = Depends(get_session),
    auth: AuthProvider = Depends(get_auth_provider),
) -> User | None:
    """Return the authenticated user when a valid bearer token is provided."""

    if not credentials or credentials.scheme.lower() != "bearer":
        return None
    try:
        return auth.resolve(db, credentials.credentials)
    except Unauthorized:
        return None


__all__ = [
    "AuthProvider",
    "hash_password",
    "verify_password",
    "get_auth_provider",
    "get_current_user",
    "get_optional_user",
]
