"""In-memory post version repository for testing."""

from sqlalchemy.exc import IntegrityError

from sportalk.domain.model.post_version import PostVersion
from sportalk.domain.repository.post_version import PostVersionRepository
from sportalk.domain.value import PostId

from .base import InMemoryRepository


class InMemoryPostVersionRepository(InMemoryRepository, PostVersionRepository):
    """In-memory implementation of PostVersionRepository for testing."""

    def __init__(self) -> None:
        self._versions: list[PostVersion] = []

    async def max_version(self, post_id: PostId) -> int:
        """Highest version number of a post, 0 if none."""
        return max(
            (v.version for v in self._versions if v.post_id == post_id), default=0
        )

    async def find_by_post(self, post_id: PostId) -> list[PostVersion]:
        """All versions of a post ordered by version."""
        return sorted(
            (v for v in self._versions if v.post_id == post_id),
            key=lambda v: v.version,
        )

    async def save(self, version: PostVersion) -> PostVersion:
        """Insert a version.

        Raises:
            IntegrityError: If the (post_id, version) pair already exists
        """
        if any(
            v.post_id == version.post_id and v.version == version.version
            for v in self._versions
        ):
            raise IntegrityError("Duplicate post version", None, Exception())

        self._versions.append(version)
        return version
