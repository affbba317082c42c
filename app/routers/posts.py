"""Post and comment API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import User
from ..schemas import (
    CommentCreate,
    CommentResponse,
    PostCreate,
    PostDetailResponse,
    PostFeedResponse,
    PostResponse,
)
from ..services import (
    AuthorIdentity,
    PostEntry,
    create_comment,
    create_post,
    get_current_user,
    get_post,
    list_posts,
)

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=PostFeedResponse)
async def list_posts_endpoint(
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> PostFeedResponse:
    return PostFeedResponse.from_entries(list_posts(db))


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post_endpoint(
    payload: PostCreate,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> PostResponse:
    post = create_post(db, author_id=current_user.id, content=payload.content)
    return PostResponse.from_entry(PostEntry(post=post, author=AuthorIdentity.of(current_user)))


@router.get("/{post_id}", response_model=PostDetailResponse)
async def get_post_endpoint(
    post_id: int,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> PostDetailResponse:
    return PostDetailResponse.from_detail(get_post(db, post_id))


@router.post("/{post_id}/comments", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def create_comment_endpoint(
    post_id: int,
    payload: CommentCreate,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> CommentResponse:
    entry = create_comment(db, post_id=post_id, author_id=current_user.id, content=payload.content)
    return CommentResponse.from_entry(entry)
