"""PostgreSQL repository implementations."""

from sportalk.persistence.repository.comment import PostgresCommentRepository
from sportalk.persistence.repository.follow import PostgresFollowRepository
from sportalk.persistence.repository.media import PostgresMediaRepository
from sportalk.persistence.repository.post import PostgresPostRepository
from sportalk.persistence.repository.post_version import (
    PostgresPostVersionRepository,
)
from sportalk.persistence.repository.transaction import PostgresTransactionManager
from sportalk.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresPostVersionRepository",
    "PostgresCommentRepository",
    "PostgresMediaRepository",
    "PostgresFollowRepository",
    "PostgresTransactionManager",
]
