"""Domain value objects for Sportalk.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from sportalk.domain.value.common import RootValueObject


class UserRole(str, Enum):
    """Role of a user account."""

    USER = "USER"
    INFLUENCER = "INFLUENCER"
    ADMIN = "ADMIN"


class PostType(str, Enum):
    """Category of a post."""

    ANALYSIS = "ANALYSIS"
    CHEERING = "CHEERING"
    HIGHLIGHT = "HIGHLIGHT"


class PostSort(str, Enum):
    """Feed ordering."""

    NEWEST = "newest"  # created_at desc
    POPULAR = "popular"  # view_count desc, then newest


class MediaType(str, Enum):
    """Kind of media attached to a post."""

    IMAGE = "image"
    VIDEO = "video"


class MediaStatus(str, Enum):
    """Upload status of a media record.

    UPLOADING is the initial status, COMPLETED and FAILED are terminal.
    """

    UPLOADING = "UPLOADING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        """Whether no further transition is allowed."""
        return not _MEDIA_STATUS_TRANSITIONS[self]

    def can_transition_to(self, target: "MediaStatus") -> bool:
        """Check a transition against the one-way upload lifecycle."""
        return target in _MEDIA_STATUS_TRANSITIONS[self]


_MEDIA_STATUS_TRANSITIONS: dict[MediaStatus, frozenset[MediaStatus]] = {
    MediaStatus.UPLOADING: frozenset(
        {MediaStatus.UPLOADING, MediaStatus.COMPLETED, MediaStatus.FAILED}
    ),
    MediaStatus.COMPLETED: frozenset(),
    MediaStatus.FAILED: frozenset(),
}


class Nickname(RootValueObject[str]):
    """Public, unique display name of a user (1-30 characters)."""

    @field_validator("root")
    @classmethod
    def validate_nickname(cls, v: str) -> str:
        """Validate nickname length."""
        if len(v) < 1 or len(v) > 30:
            raise ValueError("Nickname must be 1-30 characters")
        return v
