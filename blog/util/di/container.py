"""Production DI container and its FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from blog.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with every production implementation.

    Nothing is connected until first use: the database engine is created
    on the first request that needs a repository.
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    # FastapiProvider makes the Request available to REQUEST-scoped factories
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve the app's DishkaRoute handlers from ``container``.

    The container is closed on application shutdown.
    """
    setup_dishka(container, app)
