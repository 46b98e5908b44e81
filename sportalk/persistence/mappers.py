"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from sportalk.domain.model import Comment, Follow, Media, Post, PostVersion, User
from sportalk.domain.value import (
    CommentId,
    FollowId,
    MediaId,
    MediaStatus,
    MediaType,
    Nickname,
    PostId,
    PostType,
    PostVersionId,
    UserId,
    UserRole,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        nickname=Nickname(row["nickname"]),
        email=row["email"],
        password_hash=row["password_hash"],
        role=UserRole(row["role"]),
        profile_image_url=row.get("profile_image_url"),
        bio=row.get("bio"),
        favorite_sports=list(row.get("favorite_sports") or []),
        favorite_teams=list(row.get("favorite_teams") or []),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    ``password_hash`` is excluded from ``model_dump`` and added back here.
    """
    data = user.model_dump()
    data["nickname"] = user.nickname.root
    data["password_hash"] = user.password_hash
    data["role"] = user.role.value
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(row["id"]),
        content=row["content"],
        type=PostType(row["type"]),
        author_id=UserId(row["author_id"]),
        view_count=row["view_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    data = post.model_dump()
    data["type"] = post.type.value
    return data


def row_to_post_version(row: Dict[str, Any]) -> PostVersion:
    """Convert database row to PostVersion domain model."""
    return PostVersion(
        id=PostVersionId(row["id"]),
        post_id=PostId(row["post_id"]),
        author_id=UserId(row["author_id"]),
        version=row["version"],
        content=row["content"],
        edit_reason=row.get("edit_reason"),
        character_diff=row["character_diff"],
        is_major_change=row["is_major_change"],
        created_at=row["created_at"],
    )


def post_version_to_dict(version: PostVersion) -> Dict[str, Any]:
    """Convert PostVersion domain model to database dict."""
    return version.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = row.get("parent_comment_id")
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        author_id=UserId(row["author_id"]),
        content=row["content"],
        parent_comment_id=CommentId(parent_id) if parent_id else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_media(row: Dict[str, Any]) -> Media:
    """Convert database row to Media domain model."""
    return Media(
        id=MediaId(row["id"]),
        post_id=PostId(row["post_id"]),
        type=MediaType(row["type"]),
        url=row["url"],
        status=MediaStatus(row["status"]),
        created_at=row["created_at"],
        deleted_at=row.get("deleted_at"),
    )


def media_to_dict(media: Media) -> Dict[str, Any]:
    """Convert Media domain model to database dict."""
    data = media.model_dump()
    data["type"] = media.type.value
    data["status"] = media.status.value
    return data


def row_to_follow(row: Dict[str, Any]) -> Follow:
    """Convert database row to Follow domain model."""
    return Follow(
        id=FollowId(row["id"]),
        follower_id=UserId(row["follower_id"]),
        following_id=UserId(row["following_id"]),
        created_at=row["created_at"],
    )


def follow_to_dict(follow: Follow) -> Dict[str, Any]:
    """Convert Follow domain model to database dict."""
    return follow.model_dump()
