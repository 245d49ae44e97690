"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from guide.config import Settings
from guide.interface.api.errors import register_exception_handlers
from guide.interface.api.routes import (
    articles,
    categories,
    comments,
    health,
    reactions,
    saved,
    subscriptions,
    users,
)
from guide.util.di.container import create_container, setup_di
from guide.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function:
    start_app.py does it in production, conftest.py in tests.

    Args:
        container: DI container to use; the production container if omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Guidepedia API",
        description="Backend API for Guidepedia - articles, reactions, comments, saved lists and subscriptions",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(articles.router)
    app_instance.include_router(reactions.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(categories.router)
    app_instance.include_router(saved.router)
    app_instance.include_router(subscriptions.router)
    app_instance.include_router(users.router)

    return app_instance


# App instance for uvicorn. Logfire must be configured before this module is
# imported: start_app.py does it in production, conftest.py in tests.
app = create_app()
