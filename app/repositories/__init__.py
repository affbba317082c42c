"""Repository exports: one persistence gateway per entity."""
from .base import translate_errors
from .follows import FollowRepository
from .posts import CommentRepository, PostRepository
from .users import UserRepository

__all__ = [
    "translate_errors",
    "CommentRepository",
    "FollowRepository",
    "PostRepository",
    "UserRepository",
]
