"""Logfire setup for the API process.

Services log through ``logfire`` directly::

    with logfire.span("token_manager.refresh", email=user.email):
        ...
    logfire.info("Idea created", user_id=str(user_id), idea_id=str(idea.id))

Passwords and tokens are never passed as attributes. Attribute names that
look like token fields are scrubbed as well, in case one slips through.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from ideapool.config import Settings

SERVICE_NAME = "ideapool-api"

# Matched against attribute names, case-insensitively
TOKEN_ATTRIBUTE_PATTERNS = ["access_token", "refresh_token", "jwt"]

# Liveness probes would otherwise dominate the request traces
UNTRACED_URLS = "/health"


def _should_send(settings: Settings) -> bool:
    """Explicit setting wins, otherwise send only when a token is configured."""
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Set ``OBSERVABILITY__LOGFIRE_TOKEN`` to ship spans to Logfire, or force
    the behaviour with ``OBSERVABILITY__SEND_TO_LOGFIRE``.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=TOKEN_ATTRIBUTE_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except liveness probes.

    Headers are not captured, so ``X-Access-Token`` never reaches a span.
    """
    logfire.instrument_fastapi(
        app, capture_headers=False, excluded_urls=UNTRACED_URLS
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace the statements issued by the repositories."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
