"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from sportalk.config import Settings
from sportalk.domain.repository import (
    CommentRepository,
    FollowRepository,
    MediaRepository,
    PostRepository,
    PostVersionRepository,
    TransactionManager,
    UserRepository,
)
from sportalk.persistence.database import create_engine, create_session_factory
from sportalk.persistence.repository import (
    PostgresCommentRepository,
    PostgresFollowRepository,
    PostgresMediaRepository,
    PostgresPostRepository,
    PostgresPostVersionRepository,
    PostgresTransactionManager,
    PostgresUserRepository,
)
from sportalk.util.di.base import ProviderBase
from sportalk.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the app shuts down."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        dishka sends the request's exception (or None) back into the
        generator on exit: the session commits on a clean exit and rolls
        back otherwise.
        """
        async with session_factory() as session:
            exc = yield session
            if exc is not None:
                logfire.warn(
                    "Session rollback",
                    error=str(exc),
                    error_type=type(exc).__name__,
                )
                await session.rollback()
            else:
                await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, session: AsyncSession) -> TransactionManager:
        """Provide transaction manager bound to the request session."""
        return PostgresTransactionManager(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_version_repository(
        self, session: AsyncSession
    ) -> PostVersionRepository:
        """Provide PostVersion repository."""
        return PostgresPostVersionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_media_repository(self, session: AsyncSession) -> MediaRepository:
        """Provide Media repository."""
        return PostgresMediaRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_follow_repository(self, session: AsyncSession) -> FollowRepository:
        """Provide Follow repository."""
        return PostgresFollowRepository(session)
