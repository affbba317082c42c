"""Convenience exports for service layer."""
from .auth_service import (
    AuthProvider,
    get_auth_provider,
    get_current_user,
    get_optional_user,
    hash_password,
    verify_password,
)
from .feed_service import compose_feed
from .follow_service import FollowStats, follow_user, get_follow_stats, list_followed_ids, unfollow_user
from .post_service import (
    AuthorIdentity,
    CommentEntry,
    PostDetail,
    PostEntry,
    create_comment,
    create_post,
    get_post,
    list_posts,
)
from .user_service import delete_user, get_user, register_user

__all__ = [
    "AuthProvider",
    "get_auth_provider",
    "get_current_user",
    "get_optional_user",
    "hash_password",
    "verify_password",
    "compose_feed",
    "FollowStats",
    "follow_user",
    "unfollow_user",
    "list_followed_ids",
    "get_follow_stats",
    "AuthorIdentity",
    "CommentEntry",
    "PostDetail",
    "PostEntry",
    "create_comment",
    "create_post",
    "get_post",
    "list_posts",
    "delete_user",
    "get_user",
    "register_user",
]
