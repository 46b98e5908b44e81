"""Comment entity.

Comments are threaded through a nullable parent id. A reply must live on the
same post as its parent; the tree itself is resolved lazily per query.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from sportalk.domain.model.common import DomainModel
from sportalk.domain.model.user import User
from sportalk.domain.value import CommentId, PostId, UserId

COMMENT_CONTENT_MAX_LENGTH = 2000


class Comment(DomainModel):
    """Comment on a post, or a reply to another comment."""

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=COMMENT_CONTENT_MAX_LENGTH)
    parent_comment_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None


class CommentWithAuthor(DomainModel):
    """Comment with its author loaded."""

    comment: Comment
    author: Optional[User] = None
