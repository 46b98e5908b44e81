"""Strongly typed identifiers for Sportalk domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
PostVersionId = NewType("PostVersionId", UUID)
CommentId = NewType("CommentId", UUID)
MediaId = NewType("MediaId", UUID)
FollowId = NewType("FollowId", UUID)
