"""Follow management API routes."""
from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import User
from ..schemas import FollowActionResponse, FollowStatsResponse
from ..services import (
    follow_user,
    get_current_user,
    get_follow_stats,
    get_optional_user,
    list_followed_ids,
    unfollow_user,
)

router = APIRouter(prefix="/follows", tags=["follows"])


def _action_response(db: Session, *, viewer_id: int, target_id: int, status_label: str) -> FollowActionResponse:
    stats = get_follow_stats(db, user_id=target_id, viewer_id=viewer_id, strict=False)
    payload = asdict(stats)
    payload["status"] = status_label
    payload["following_ids"] = sorted(list_followed_ids(db, viewer_id))
    return FollowActionResponse(**payload)


@router.post("/{target_id}", response_model=FollowActionResponse, status_code=status.HTTP_201_CREATED)
async def follow_user_endpoint(
    target_id: int,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> FollowActionResponse:
    follow_user(db, follower_id=current_user.id, target_id=target_id)
    return _action_response(db, viewer_id=current_user.id, target_id=target_id, status_label="followed")


@router.delete("/{target_id}", response_model=FollowActionResponse)
async def unfollow_user_endpoint(
    target_id: int,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> FollowActionResponse:
    changed = unfollow_user(db, follower_id=current_user.id, target_id=target_id)
    status_label = "unfollowed" if changed else "noop"
    return _action_response(db, viewer_id=current_user.id, target_id=target_id, status_label=status_label)


@router.get("/stats/{user_id}", response_model=FollowStatsResponse)
async def follow_stats_endpoint(
    user_id: int,
    db: Session = Depends(get_session),
    viewer: User | None = Depends(get_optional_user),
) -> FollowStatsResponse:
    viewer_id = viewer.id if viewer else None
    stats = get_follow_stats(db, user_id=user_id, viewer_id=viewer_id)
    return FollowStatsResponse(**asdict(stats))
