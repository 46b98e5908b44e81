"""Repository interfaces for the Sportalk domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from sportalk.domain.repository.comment import CommentRepository
from sportalk.domain.repository.follow import FollowRepository
from sportalk.domain.repository.media import MediaRepository
from sportalk.domain.repository.post import PostRepository
from sportalk.domain.repository.post_version import PostVersionRepository
from sportalk.domain.repository.transaction import TransactionManager
from sportalk.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "PostVersionRepository",
    "CommentRepository",
    "MediaRepository",
    "FollowRepository",
    "TransactionManager",
]
