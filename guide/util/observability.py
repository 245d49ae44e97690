"""Logfire setup and instrumentation.

Domain services wrap each operation in a span and emit structured events
inside it, e.g. ``logfire.span("relationship_service.toggle", kind=...)``
followed by ``logfire.info("Relationship toggled", ...)``.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from guide.config import ObservabilitySettings, Settings

SERVICE_NAME = "guidepedia-api"


def _sends_to_logfire(observability: ObservabilitySettings) -> bool:
    # An explicit flag wins; otherwise a configured token implies sending
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Without a token or an explicit ``send_to_logfire`` flag, spans only go to
    the console.
    """
    observability = settings.observability
    send = _sends_to_logfire(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=send,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured",
        service=SERVICE_NAME,
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by the app."""
    logfire.instrument_fastapi(app)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run through the engine.

    Logfire instruments the sync engine that backs the async one.
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    logfire.info("SQLAlchemy engine instrumented", url=engine.url.render_as_string())
