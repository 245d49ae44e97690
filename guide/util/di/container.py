"""Production DI container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from guide.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container: Postgres persistence, settings from env."""
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app; routes use ``FromDishka``."""
    setup_dishka(container, app)
