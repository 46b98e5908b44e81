"""Domain layer DI providers."""

from dishka import Scope, provide

from sportalk.config import PostSettings
from sportalk.domain.repository import (
    CommentRepository,
    FollowRepository,
    MediaRepository,
    PostRepository,
    PostVersionRepository,
    TransactionManager,
    UserRepository,
)
from sportalk.domain.service import (
    CommentService,
    FollowService,
    MediaService,
    PostService,
    UserService,
)
from sportalk.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        post_version_repository: PostVersionRepository,
        comment_repository: CommentRepository,
        media_repository: MediaRepository,
        user_service: UserService,
        transaction_manager: TransactionManager,
        post_settings: PostSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            post_version_repository=post_version_repository,
            comment_repository=comment_repository,
            media_repository=media_repository,
            user_service=user_service,
            transaction_manager=transaction_manager,
            version_on_noop_update=post_settings.version_on_noop_update,
            major_change_threshold=post_settings.major_change_threshold,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        user_service: UserService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_service=post_service,
            user_service=user_service,
        )

    @provide
    def get_media_service(
        self,
        media_repository: MediaRepository,
        post_repository: PostRepository,
        post_service: PostService,
    ) -> MediaService:
        """Provide media domain service."""
        return MediaService(
            media_repository=media_repository,
            post_repository=post_repository,
            post_service=post_service,
        )

    @provide
    def get_follow_service(
        self, follow_repository: FollowRepository, user_service: UserService
    ) -> FollowService:
        """Provide follow domain service."""
        return FollowService(
            follow_repository=follow_repository, user_service=user_service
        )
