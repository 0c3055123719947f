"""Dependency injection wiring.

PROVIDERS lists every provider root. Roots without subclasses are used
as-is; roots naming a component pick their production or mock subclass.
"""

from typing import Type

from prep.util.di.application import ProdApplicationProvider
from prep.util.di.base import COMPONENTS, Component, ProviderBase
from prep.util.di.core import ProdConfigProvider
from prep.util.di.domain import ProdDomainProvider
from prep.util.di.infrastructure import (
    IdentityProvider,
    ParserProvider,
    PersistenceProvider,
    ProdIdentityProvider,
    ProdParserProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    IdentityProvider,
    ParserProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider root to the class to instantiate.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the mock subclass of a component root

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no matching implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} provider for {base.__mock_component__}")


__all__ = [
    "COMPONENTS",
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "IdentityProvider",
    "ParserProvider",
    "PersistenceProvider",
    "ProdIdentityProvider",
    "ProdParserProvider",
    "ProdPersistenceProvider",
]
