"""Authentication related API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import User
from ..schemas import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from ..services import AuthProvider, get_auth_provider, get_current_user, register_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register_endpoint(
    payload: RegisterRequest,
    db: Session = Depends(get_session),
    auth: AuthProvider = Depends(get_auth_provider),
) -> AuthResponse:
    user = register_user(db, username=payload.username, password=payload.password, bio=payload.bio)
    return AuthResponse(access_token=auth.issue_token(user.id), user_id=user.id)


@router.post("/login", response_model=AuthResponse)
async def login_endpoint(
    payload: LoginRequest,
    db: Session = Depends(get_session),
    auth: AuthProvider = Depends(get_auth_provider),
) -> AuthResponse:
    user = auth.authenticate(db, payload.username, payload.password)
    return AuthResponse(access_token=auth.issue_token(user.id), user_id=user.id)


@router.get("/me", response_model=UserResponse)
async def me_endpoint(current_user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(current_user)
