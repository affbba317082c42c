"""User account API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import User
from ..schemas import RegisterRequest, UserCreatedResponse, UserResponse
from ..services import delete_user, get_current_user, get_user, register_user

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_user_endpoint(
    payload: RegisterRequest,
    db: Session = Depends(get_session),
) -> UserCreatedResponse:
    user = register_user(db, username=payload.username, password=payload.password, bio=payload.bio)
    return UserCreatedResponse(id=user.id)


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
async def delete_me_endpoint(
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> Response:
    delete_user(db, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user_endpoint(
    user_id: int,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    return UserResponse.model_validate(get_user(db, user_id))
