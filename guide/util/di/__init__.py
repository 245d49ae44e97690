"""Dependency injection providers and provider selection.

Concrete providers are used as-is. A component that has a production and a
mock implementation is declared as a base class tagged with
``__mock_component__``; its subclasses are the implementations.
"""

from typing import Type

from guide.util.di.application import ProdApplicationProvider
from guide.util.di.base import Component, ProviderBase
from guide.util.di.core import ProdConfigProvider
from guide.util.di.domain import ProdDomainProvider
from guide.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,  # mockable: "persistence"
]


def is_mockable(base: Type[ProviderBase]) -> bool:
    """Whether the provider is a component base with swappable implementations."""
    return base.__mock_component__ is not None


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for an entry of ``PROVIDERS``.

    Raises:
        ValueError: If a mockable component lacks the requested implementation
    """
    if not is_mockable(base):
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


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
