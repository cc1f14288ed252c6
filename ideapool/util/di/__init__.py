"""dishka providers and the rules for picking between implementations.

Providers without subclasses are used as they are. A provider that has
subclasses is a swappable component: production code takes the subclass
with ``__is_mock__ = False``, tests may take the one with ``True``.
"""

from typing import Type

from ideapool.util.di.application import ProdApplicationProvider
from ideapool.util.di.base import Component, ProviderBase
from ideapool.util.di.core import ProdConfigProvider
from ideapool.util.di.domain import ProdDomainProvider
from ideapool.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Order does not matter to dishka, it resolves by type
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    Args:
        base: Entry of ``PROVIDERS``
        use_mock: Prefer the in-memory implementation of a component

    Raises:
        ValueError: If the component has no implementation of that kind.
            Mock implementations live in ``tests/di`` and only register
            once that package is imported.
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if getattr(implementation, "__is_mock__", False) == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", None) or base.__name__
    raise ValueError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
