"""PostgreSQL transaction manager."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from sportalk.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Transactions on the request-scoped session.

    Opens a SAVEPOINT when the session already has a transaction running,
    so a failed block only rolls back its own statements.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with the request session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        if self.session.in_transaction():
            async with self.session.begin_nested():
                yield
        else:
            async with self.session.begin():
                yield
