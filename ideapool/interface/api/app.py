"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ideapool.config import Settings
from ideapool.interface.api.errors import register_exception_handlers
from ideapool.interface.api.routes import access_tokens, health, ideas, me, users
from ideapool.util.di.container import create_container, setup_di
from ideapool.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    # Disposes the database engine
    await app.state.dishka_container.close()


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Application settings, loaded from the environment if omitted
        container: DI container, the production one if omitted
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Idea Pool API",
        description="Backend API for keeping a personal pool of ideas ranked by score",
        version="0.1.0",
        lifespan=lifespan,
    )

    if settings.observability.instrument:
        instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Access-Token"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(access_tokens.router)
    app_instance.include_router(me.router)
    app_instance.include_router(ideas.router)

    return app_instance
