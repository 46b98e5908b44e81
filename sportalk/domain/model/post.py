"""Post aggregate root.

Posts are the primary content type in Sportalk. Every content mutation is
recorded as an append-only PostVersion.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from sportalk.domain.model.comment import Comment
from sportalk.domain.model.common import DomainModel
from sportalk.domain.model.media import Media
from sportalk.domain.model.post_version import PostVersion
from sportalk.domain.model.user import User
from sportalk.domain.value import PostId, PostType, UserId

POST_CONTENT_MAX_LENGTH = 10000


class Post(DomainModel):
    """Post aggregate root.

    ``author_id`` never changes after creation and ``view_count`` only grows.
    """

    id: PostId
    content: str = Field(min_length=1, max_length=POST_CONTENT_MAX_LENGTH)
    type: PostType
    author_id: UserId
    view_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None


class PostDetail(DomainModel):
    """A post together with its eagerly loaded relations.

    ``author`` is None only if the author row has been removed.
    ``versions`` is populated for single-post reads, left empty for feeds.
    """

    post: Post
    author: Optional[User] = None
    comments: list[Comment] = Field(default_factory=list)
    media: list[Media] = Field(default_factory=list)
    versions: list[PostVersion] = Field(default_factory=list)
