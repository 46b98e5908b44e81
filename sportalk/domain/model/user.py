"""User aggregate root.

Users are created at registration by the identity layer; the posting
workflow only reads them (authors, followers, ownership checks).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from sportalk.domain.model.common import DomainModel
from sportalk.domain.value import Nickname, UserId, UserRole


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    nickname: Nickname
    email: str = Field(min_length=3, max_length=255)
    password_hash: str = Field(exclude=True, repr=False)  # Never serialized
    role: UserRole = UserRole.USER
    profile_image_url: Optional[str] = None
    bio: Optional[str] = None
    favorite_sports: list[str] = Field(default_factory=list)
    favorite_teams: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None
