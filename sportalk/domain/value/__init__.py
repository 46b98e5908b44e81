"""Domain value objects for Sportalk."""

from sportalk.domain.value.identifiers import (
    CommentId,
    FollowId,
    MediaId,
    PostId,
    PostVersionId,
    UserId,
)
from sportalk.domain.value.types import (
    MediaStatus,
    MediaType,
    Nickname,
    PostSort,
    PostType,
    UserRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "PostVersionId",
    "CommentId",
    "MediaId",
    "FollowId",
    # Types
    "UserRole",
    "PostType",
    "PostSort",
    "MediaType",
    "MediaStatus",
    "Nickname",
]
