"""Dependency injection module.

Providers come in two flavours. Concrete providers (config, persistence,
application) are used as-is everywhere. Mockable components declare a base
provider tagged with ``__mock_component__``; their production and mock
implementations subclass it and set ``__is_mock__``.
"""

from typing import Type

from storefront.util.di.application import ProdApplicationProvider
from storefront.util.di.base import Component, ProviderBase
from storefront.util.di.core import ProdConfigProvider
from storefront.util.di.infrastructure import (
    PersistenceProvider,
    ProdRegistrarProvider,
    RegistrarProvider,
)
from storefront.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    PersistenceProvider,
    ProdApplicationProvider,
    RegistrarProvider,
]


def is_mockable(base: Type[ProviderBase]) -> bool:
    """Whether a provider has production/mock implementations to choose from."""
    return bool(base.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for a PROVIDERS entry.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If the component has no matching implementation
    """
    if not is_mockable(base):
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdRegistrarProvider",
    "ProviderBase",
    "RegistrarProvider",
    "get_provider",
    "is_mockable",
]
