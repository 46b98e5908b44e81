"""Media entity.

A media record is created before the upload starts (UPLOADING, empty url)
and later moves to COMPLETED or FAILED. Media has no author of its own,
mutation rights follow the parent post's author.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from sportalk.domain.model.common import DomainModel
from sportalk.domain.value import MediaId, MediaStatus, MediaType, PostId


class Media(DomainModel):
    """Media attached to a post."""

    id: MediaId
    post_id: PostId
    type: MediaType
    url: str = ""
    status: MediaStatus = MediaStatus.UPLOADING
    created_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None
