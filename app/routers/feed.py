"""Home feed API route."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import User
from ..schemas import PostFeedResponse
from ..services import compose_feed, get_current_user

router = APIRouter(prefix="/feed", tags=["feed"])


@router.get("", response_model=PostFeedResponse)
async def home_feed_endpoint(
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> PostFeedResponse:
    return PostFeedResponse.from_entries(compose_feed(db, current_user.id))
