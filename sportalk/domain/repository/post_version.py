"""Post version repository interface."""

from abc import ABC, abstractmethod
from typing import List

from sportalk.domain.model.post_version import PostVersion
from sportalk.domain.value import PostId


class PostVersionRepository(ABC):
    """Repository for the append-only post edit history.

    There is deliberately no update or delete: version rows only go away
    when their post is hard-deleted.
    """

    @abstractmethod
    async def max_version(self, post_id: PostId) -> int:
        """Highest version number recorded for a post.

        Args:
            post_id: The post ID

        Returns:
            The maximum version, 0 when the post has no versions yet
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[PostVersion]:
        """All versions of a post ordered by version ascending.

        Args:
            post_id: The post ID

        Returns:
            The post's versions
        """
        pass

    @abstractmethod
    async def save(self, version: PostVersion) -> PostVersion:
        """Insert a version row.

        Args:
            version: The version to insert

        Returns:
            The inserted version

        Raises:
            IntegrityError: If the (post_id, version) pair already exists
        """
        pass
