"""Test container with in-memory components by default."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from ideapool.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every swappable component is mocked.

    Args:
        unmock: Components to run with their production implementation,
            e.g. ``{"persistence"}`` against a migrated PostgreSQL database

    Raises:
        ValueError: If ``unmock`` names a component that does not exist

    The returned container also carries ``FastapiProvider`` so it can back
    ``create_app`` in end-to-end tests.
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    providers = []
    for base in PROVIDERS:
        component = getattr(base, "__mock_component__", None)
        use_mock = component is not None and component not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*providers, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    known = {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")
