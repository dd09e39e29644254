"""Dependency injection module.

Providers come in two kinds. Concrete providers (config, domain services,
use cases) have a single implementation. Component providers
(persistence, notification) are abstract bases with one production
subclass and, in the test suite, one mock subclass; which of the two is
used is decided when the container is built.
"""

from typing import AbstractSet, Type

from masacarri.util.di.application import ProdApplicationProvider
from masacarri.util.di.base import Component, ProviderBase
from masacarri.util.di.core import ProdConfigProvider
from masacarri.util.di.domain import ProdDomainProvider
from masacarri.util.di.infrastructure import (
    NotificationProvider,
    PersistenceProvider,
    ProdNotificationProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    NotificationProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    Concrete providers resolve to themselves; component bases resolve to
    the subclass whose ``__is_mock__`` matches ``use_mock``.

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    if base.__mock_component__ is None:
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


def mockable_components() -> set[Component]:
    """Names of every component that can be swapped for a mock."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }


def select_providers(
    mocked: AbstractSet[Component] = frozenset(),
) -> list[ProviderBase]:
    """Instantiate one provider per ``PROVIDERS`` entry.

    Args:
        mocked: Components to take from their mock subclass; the module
            defining those subclasses must already be imported
    """
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "NotificationProvider",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdNotificationProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "mockable_components",
    "select_providers",
]
