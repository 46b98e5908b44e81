"""Follow relation between two users."""

from datetime import datetime

from pydantic import Field, model_validator

from sportalk.domain.model.common import DomainModel
from sportalk.domain.value import FollowId, UserId


class Follow(DomainModel):
    """``follower_id`` follows ``following_id``."""

    id: FollowId
    follower_id: UserId
    following_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_not_self(self) -> "Follow":
        """A user cannot follow themselves."""
        if self.follower_id == self.following_id:
            raise ValueError("A user cannot follow themselves")
        return self


class FollowCounts(DomainModel):
    """Follower and following totals for one user."""

    followers: int = Field(ge=0)
    following: int = Field(ge=0)
