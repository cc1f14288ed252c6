"""Production container and its FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from ideapool.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container with the production implementation of every component.

    ``FastapiProvider`` makes the current ``Request`` resolvable inside the
    request scope.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container so ``FromDishka`` parameters resolve per request.

    The container is closed on application shutdown, which disposes the
    database engine.
    """
    setup_dishka(container, app)
