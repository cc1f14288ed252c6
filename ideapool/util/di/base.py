"""Base class shared by every dishka provider in the container."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests may swap for an in-memory implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider carrying the flags ``get_provider`` selects on.

    Attributes:
        __mock_component__: Name of the swappable component, None for
            providers that only have a production implementation
        __is_mock__: True for the in-memory implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
