"""Follow domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from sportalk.domain.error import BadRequestError, ConflictError, NotFoundError
from sportalk.domain.model import Follow, FollowCounts, User
from sportalk.domain.repository import FollowRepository
from sportalk.domain.value import FollowId, UserId

from .base import Service
from .user_service import UserService


class FollowService(Service):
    """Domain service for follow relations.

    Unlike content, follows are hard-deleted.
    """

    def __init__(
        self, follow_repository: FollowRepository, user_service: UserService
    ) -> None:
        """Initialize follow service.

        Args:
            follow_repository: Follow repository
            user_service: User domain service
        """
        self.follow_repository = follow_repository
        self.user_service = user_service

    async def follow(self, follower_id: UserId, following_id: UserId) -> Follow:
        """Make ``follower_id`` follow ``following_id``.

        Raises:
            BadRequestError: If a user tries to follow themselves
            NotFoundError: If the target user does not exist
            ConflictError: If the relation already exists
        """
        with logfire.span(
            "follow_service.follow",
            follower_id=str(follower_id),
            following_id=str(following_id),
        ):
            if follower_id == following_id:
                logfire.warn("Self-follow attempt", user_id=str(follower_id))
                raise BadRequestError("You cannot follow yourself")

            await self.user_service.get_by_id(following_id)

            if await self.follow_repository.find_by_pair(follower_id, following_id):
                logfire.warn(
                    "Duplicate follow attempt",
                    follower_id=str(follower_id),
                    following_id=str(following_id),
                )
                raise ConflictError("Already following this user")

            follow = Follow(
                id=FollowId(uuid4()),
                follower_id=follower_id,
                following_id=following_id,
                created_at=datetime.now(),
            )
            try:
                saved = await self.follow_repository.save(follow)
            except IntegrityError:
                # Lost a race with a concurrent identical follow
                logfire.warn(
                    "Duplicate follow attempt",
                    follower_id=str(follower_id),
                    following_id=str(following_id),
                )
                raise ConflictError("Already following this user")

            logfire.info("User followed", follow_id=str(saved.id))
            return saved

    async def unfollow(self, follower_id: UserId, following_id: UserId) -> Follow:
        """Remove a follow relation.

        Returns:
            The deleted relation

        Raises:
            NotFoundError: If the relation does not exist
        """
        with logfire.span(
            "follow_service.unfollow",
            follower_id=str(follower_id),
            following_id=str(following_id),
        ):
            follow = await self.follow_repository.find_by_pair(
                follower_id, following_id
            )
            if not follow:
                logfire.warn(
                    "Follow not found",
                    follower_id=str(follower_id),
                    following_id=str(following_id),
                )
                raise NotFoundError("Follow", f"{follower_id}->{following_id}")

            await self.follow_repository.delete(follow.id)
            logfire.info("User unfollowed", follow_id=str(follow.id))
            return follow

    async def get_followers(self, user_id: UserId) -> list[User]:
        """Users following ``user_id``.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("follow_service.get_followers", user_id=str(user_id)):
            await self.user_service.get_by_id(user_id)
            return await self.follow_repository.find_followers(user_id)

    async def get_following(self, user_id: UserId) -> list[User]:
        """Users ``user_id`` follows.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("follow_service.get_following", user_id=str(user_id)):
            await self.user_service.get_by_id(user_id)
            return await self.follow_repository.find_following(user_id)

    async def is_following(self, follower_id: UserId, following_id: UserId) -> bool:
        return (
            await self.follow_repository.find_by_pair(follower_id, following_id)
            is not None
        )

    async def get_follow_counts(self, user_id: UserId) -> FollowCounts:
        """Follower and following totals.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("follow_service.get_follow_counts", user_id=str(user_id)):
            await self.user_service.get_by_id(user_id)
            return FollowCounts(
                followers=await self.follow_repository.count_followers(user_id),
                following=await self.follow_repository.count_following(user_id),
            )
