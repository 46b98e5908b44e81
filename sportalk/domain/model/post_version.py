"""Post version entity.

A version is an immutable snapshot of a post's content. Version 1 holds the
content at creation, every later version holds the content that an edit
replaced. For a given post the version numbers are exactly 1..N.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from sportalk.domain.model.common import DomainModel
from sportalk.domain.value import PostId, PostVersionId, UserId

INITIAL_EDIT_REASON = "Initial creation"
DEFAULT_EDIT_REASON = "Content updated"


class PostVersion(DomainModel):
    """Append-only edit history row of a post."""

    id: PostVersionId
    post_id: PostId
    author_id: UserId
    version: int = Field(ge=1)
    content: str
    edit_reason: Optional[str] = Field(default=None, max_length=500)
    character_diff: int = 0
    is_major_change: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_original(self) -> bool:
        """Whether this is the creation snapshot."""
        return self.version == 1
