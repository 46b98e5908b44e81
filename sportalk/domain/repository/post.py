"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from sportalk.domain.model.post import Post
from sportalk.domain.value import PostId, PostSort, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, post_id: PostId, include_deleted: bool = False
    ) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier
            include_deleted: Whether to return a soft-deleted post

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, post_id: PostId) -> Optional[Post]:
        """Find a non-deleted post and lock its row until the transaction ends.

        Must be called inside a transaction. Concurrent callers for the same
        post wait for the holder to commit or roll back.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        author_id: Optional[UserId] = None,
        include_deleted: bool = False,
        limit: int = 10,
        offset: int = 0,
        search: Optional[str] = None,
        sort: PostSort = PostSort.NEWEST,
    ) -> List[Post]:
        """Find posts with pagination.

        NEWEST orders by ``created_at`` descending; POPULAR orders by
        ``view_count`` descending first. Remaining ties are broken by
        ``created_at`` then ``id``, both descending.

        Args:
            author_id: Only return posts by this author (None for all)
            include_deleted: Whether to include soft-deleted posts
            limit: Maximum number of posts to return
            offset: Number of posts to skip
            search: Case-insensitive substring the content must contain
            sort: Feed ordering

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def soft_delete(self, post_id: PostId) -> None:
        """Mark a post as deleted without removing its row.

        Args:
            post_id: The post ID
        """
        pass

    @abstractmethod
    async def increment_view_count(self, post_id: PostId) -> bool:
        """Atomically increment the view count of a non-deleted post by 1.

        Uses SQL-level increment to avoid lost updates.

        Args:
            post_id: The post ID

        Returns:
            True if a post was updated, False if none matched
        """
        pass
