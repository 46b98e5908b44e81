"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Unit-of-work boundary for multi-statement writes.

    Usage:
        async with transaction_manager.transaction():
            ...

    Everything executed inside the block commits together on normal exit
    and is rolled back when the block raises. Blocks may nest; an inner
    block joins the outer transaction.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open a transaction scope."""
        pass
