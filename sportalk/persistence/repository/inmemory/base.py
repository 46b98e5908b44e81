"""Shared state handling for in-memory repositories."""

import copy
from typing import Any


class InMemoryRepository:
    """Mixin giving in-memory repositories snapshot/restore.

    The in-memory transaction manager snapshots every repository when a
    transaction opens and restores them if the transaction fails.
    """

    def snapshot(self) -> dict[str, Any]:
        """Copy the repository's containers (stored models are immutable)."""
        return {name: copy.copy(value) for name, value in vars(self).items()}

    def restore(self, state: dict[str, Any]) -> None:
        """Put back a state taken with ``snapshot``."""
        for name, value in state.items():
            setattr(self, name, value)
