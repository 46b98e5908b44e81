"""Response items shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from sportalk.domain.model import (
    Comment,
    Media,
    Post,
    PostDetail,
    PostVersion,
    User,
)
from sportalk.domain.value import MediaStatus, MediaType, PostType, UserRole


class UserItem(BaseModel):
    """Public view of a user (no email, no password hash)."""

    user_id: str
    nickname: str
    role: UserRole
    profile_image_url: str | None
    bio: str | None

    @classmethod
    def from_user(cls, user: User) -> "UserItem":
        return cls(
            user_id=str(user.id),
            nickname=user.nickname.root,
            role=user.role,
            profile_image_url=user.profile_image_url,
            bio=user.bio,
        )


class PostItem(BaseModel):
    """Post fields as returned to clients."""

    post_id: str
    content: str
    type: PostType
    author_id: str
    view_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostItem":
        return cls(
            post_id=str(post.id),
            content=post.content,
            type=post.type,
            author_id=str(post.author_id),
            view_count=post.view_count,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class PostVersionItem(BaseModel):
    """One entry of a post's edit history."""

    version_id: str
    post_id: str
    author_id: str
    version: int
    content: str
    edit_reason: str | None
    character_diff: int
    is_major_change: bool
    created_at: datetime

    @classmethod
    def from_version(cls, version: PostVersion) -> "PostVersionItem":
        return cls(
            version_id=str(version.id),
            post_id=str(version.post_id),
            author_id=str(version.author_id),
            version=version.version,
            content=version.content,
            edit_reason=version.edit_reason,
            character_diff=version.character_diff,
            is_major_change=version.is_major_change,
            created_at=version.created_at,
        )


class CommentItem(BaseModel):
    """Comment item in responses."""

    comment_id: str
    post_id: str
    author_id: str
    author: UserItem | None = None
    content: str
    parent_comment_id: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment, author: User | None = None) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            author=UserItem.from_user(author) if author else None,
            content=comment.content,
            parent_comment_id=(
                str(comment.parent_comment_id) if comment.parent_comment_id else None
            ),
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class MediaItem(BaseModel):
    """Media item in responses."""

    media_id: str
    post_id: str
    type: MediaType
    url: str
    status: MediaStatus
    created_at: datetime

    @classmethod
    def from_media(cls, media: Media) -> "MediaItem":
        return cls(
            media_id=str(media.id),
            post_id=str(media.post_id),
            type=media.type,
            url=media.url,
            status=media.status,
            created_at=media.created_at,
        )


class PostDetailItem(PostItem):
    """Post with its author, comments, media and (single reads) versions."""

    author: UserItem | None
    comments: list[CommentItem]
    media: list[MediaItem]
    versions: list[PostVersionItem]

    @classmethod
    def from_detail(cls, detail: PostDetail) -> "PostDetailItem":
        return cls(
            **PostItem.from_post(detail.post).model_dump(),
            author=UserItem.from_user(detail.author) if detail.author else None,
            comments=[CommentItem.from_comment(c) for c in detail.comments],
            media=[MediaItem.from_media(m) for m in detail.media],
            versions=[PostVersionItem.from_version(v) for v in detail.versions],
        )
