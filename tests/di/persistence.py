"""Mock persistence providers for testing."""

from dishka import Scope, provide

from sportalk.domain.repository import (
    CommentRepository,
    FollowRepository,
    MediaRepository,
    PostRepository,
    PostVersionRepository,
    TransactionManager,
    UserRepository,
)
from sportalk.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryFollowRepository,
    InMemoryMediaRepository,
    InMemoryPostRepository,
    InMemoryPostVersionRepository,
    InMemoryTransactionManager,
    InMemoryUserRepository,
)
from sportalk.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across the requests of
    one container (e2e flows). Each test builds its own container, which
    keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_in_memory_user_repository(self) -> InMemoryUserRepository:
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_in_memory_post_repository(self) -> InMemoryPostRepository:
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_in_memory_post_version_repository(self) -> InMemoryPostVersionRepository:
        return InMemoryPostVersionRepository()

    @provide(scope=Scope.APP)
    def get_in_memory_comment_repository(self) -> InMemoryCommentRepository:
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_in_memory_media_repository(self) -> InMemoryMediaRepository:
        return InMemoryMediaRepository()

    @provide(scope=Scope.APP)
    def get_in_memory_follow_repository(
        self, user_repository: InMemoryUserRepository
    ) -> InMemoryFollowRepository:
        return InMemoryFollowRepository(user_repository)

    @provide(scope=Scope.APP)
    def get_transaction_manager(
        self,
        users: InMemoryUserRepository,
        posts: InMemoryPostRepository,
        versions: InMemoryPostVersionRepository,
        comments: InMemoryCommentRepository,
        media: InMemoryMediaRepository,
        follows: InMemoryFollowRepository,
    ) -> TransactionManager:
        """Provide a transaction manager over all in-memory repositories."""
        return InMemoryTransactionManager(
            [users, posts, versions, comments, media, follows]
        )

    @provide(scope=Scope.APP)
    def get_user_repository(self, repo: InMemoryUserRepository) -> UserRepository:
        """Provide in-memory user repository."""
        return repo

    @provide(scope=Scope.APP)
    def get_post_repository(self, repo: InMemoryPostRepository) -> PostRepository:
        """Provide in-memory post repository."""
        return repo

    @provide(scope=Scope.APP)
    def get_post_version_repository(
        self, repo: InMemoryPostVersionRepository
    ) -> PostVersionRepository:
        """Provide in-memory post version repository."""
        return repo

    @provide(scope=Scope.APP)
    def get_comment_repository(
        self, repo: InMemoryCommentRepository
    ) -> CommentRepository:
        """Provide in-memory comment repository."""
        return repo

    @provide(scope=Scope.APP)
    def get_media_repository(self, repo: InMemoryMediaRepository) -> MediaRepository:
        """Provide in-memory media repository."""
        return repo

    @provide(scope=Scope.APP)
    def get_follow_repository(
        self, repo: InMemoryFollowRepository
    ) -> FollowRepository:
        """Provide in-memory follow repository."""
        return repo
