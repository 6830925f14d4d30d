"""Dependency injection.

Providers are grouped by layer. The persistence component has a
production implementation here and an in-memory one in ``tests/di``; every
other provider is concrete and shared by both.
"""

from typing import Type

from blog.util.di.application import ProdApplicationProvider
from blog.util.di.base import Component, ProviderBase
from blog.util.di.core import ProdConfigProvider
from blog.util.di.domain import ProdDomainProvider
from blog.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

# Order is irrelevant to dishka, layers are listed bottom-up for reading
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    PersistenceProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
]


def is_mockable(base: Type[ProviderBase]) -> bool:
    """A provider is a swappable component when it names one."""
    return base.__mock_component__ is not None


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation of a provider.

    Concrete providers are returned as they are. For a component, the
    subclass whose ``__is_mock__`` matches ``use_mock`` is chosen; mock
    subclasses only exist once ``tests.di`` has been imported.

    Raises:
        ValueError: If the component has no such implementation
    """
    if not is_mockable(base):
        return base

    for implementation in base.__subclasses__():
        if implementation.__is_mock__ == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation of {base.__mock_component__}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "is_mockable",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
