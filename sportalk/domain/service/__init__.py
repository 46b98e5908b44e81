"""Domain services."""

from .authorization import check_ownership, is_owner
from .base import Service
from .comment_service import CommentService
from .follow_service import FollowService
from .media_service import MediaService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "CommentService",
    "FollowService",
    "MediaService",
    "PostService",
    "Service",
    "UserService",
    "check_ownership",
    "is_owner",
]
