"""Provider registry for the Sportalk container.

Config, domain services and use cases are always real. Persistence is the
one swappable component: PostgreSQL in production, in-memory repositories
under test.
"""

from typing import Type

from sportalk.util.di.application import ProdApplicationProvider
from sportalk.util.di.base import Component, ProviderBase
from sportalk.util.di.core import ProdConfigProvider
from sportalk.util.di.domain import ProdDomainProvider
from sportalk.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    # Settings, services and use cases
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Repositories and the transaction manager, replaced by tests/di
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a registry entry to the provider class to instantiate.

    Entries without subclasses are used as they are. Entries with subclasses
    (``PersistenceProvider``) pick the subclass whose ``__is_mock__`` flag
    matches ``use_mock``; the mock subclass only exists once tests/di has
    been imported.

    Raises:
        ValueError: If no subclass matches
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
