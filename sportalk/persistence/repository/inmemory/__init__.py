"""In-memory repository implementations for testing."""

from .base import InMemoryRepository
from .comment import InMemoryCommentRepository
from .follow import InMemoryFollowRepository
from .media import InMemoryMediaRepository
from .post import InMemoryPostRepository
from .post_version import InMemoryPostVersionRepository
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryFollowRepository",
    "InMemoryMediaRepository",
    "InMemoryPostRepository",
    "InMemoryPostVersionRepository",
    "InMemoryRepository",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
]
