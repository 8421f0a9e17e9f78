"""Dependency injection module."""

from typing import Type

from wire.util.di.application import ProdApplicationProvider
from wire.util.di.base import Component, ProviderBase
from wire.util.di.core import ProdConfigProvider
from wire.util.di.domain import ProdDomainProvider
from wire.util.di.infrastructure import (
    GoogleProvider,
    OAuthAggregatorProvider,
    PersistenceProvider,
    ProdGoogleProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    # Concrete
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable components
    GoogleProvider,
    PersistenceProvider,
    # Provider -> OAuth client mapping for AuthService
    OAuthAggregatorProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    A provider with no subclasses is concrete and returned as-is. A
    mockable component base returns the subclass whose ``__is_mock__``
    equals ``use_mock``.

    Args:
        base: Entry from PROVIDERS (or a test provider list)
        use_mock: Select the mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = base.__mock_component__ or base.__name__
    raise ValueError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "GoogleProvider",
    "OAuthAggregatorProvider",
    "PersistenceProvider",
    "ProdGoogleProvider",
    "ProdPersistenceProvider",
]
