"""Dependency injection module."""

from typing import Type

from qna.util.di.application import ProdApplicationProvider
from qna.util.di.base import Component, ProviderBase
from qna.util.di.core import ProdConfigProvider
from qna.util.di.domain import ProdDomainProvider
from qna.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for one entry of PROVIDERS.

    Core providers have no subclasses and are returned unchanged. A
    component base such as PersistenceProvider is swappable: its
    implementations are told apart by their ``__is_mock__`` flag.

    Args:
        base: Entry of PROVIDERS
        use_mock: Select the in-memory implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if getattr(implementation, "__is_mock__", False) == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", base.__name__)
    raise ValueError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
