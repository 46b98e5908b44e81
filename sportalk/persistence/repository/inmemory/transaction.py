"""In-memory transaction manager for testing."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Sequence

from sportalk.domain.repository import TransactionManager

from .base import InMemoryRepository


class InMemoryTransactionManager(TransactionManager):
    """Runs one transaction at a time over a set of in-memory repositories.

    The lock stands in for row locks. Repository state is snapshotted on
    entry and restored when the block raises, nested blocks included.
    """

    def __init__(self, repositories: Sequence[InMemoryRepository]) -> None:
        self._repositories = list(repositories)
        self._lock = asyncio.Lock()
        self._owner: asyncio.Task | None = None

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        current = asyncio.current_task()
        if self._owner is current:
            async with self._rollback_on_error():
                yield
            return

        async with self._lock:
            self._owner = current
            try:
                async with self._rollback_on_error():
                    yield
            finally:
                self._owner = None

    @asynccontextmanager
    async def _rollback_on_error(self) -> AsyncIterator[None]:
        states = [repo.snapshot() for repo in self._repositories]
        try:
            yield
        except BaseException:
            for repo, state in zip(self._repositories, states):
                repo.restore(state)
            raise
