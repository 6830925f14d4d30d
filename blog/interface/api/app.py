"""FastAPI application."""

from typing import Optional

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog.config import APP_VERSION, Settings
from blog.interface.api.errors import register_error_handlers
from blog.interface.api.routes import auth, health, posts, users
from blog.util.di.container import create_container, setup_di
from blog.util.observability import instrument_fastapi


def create_app(
    container: Optional[AsyncContainer] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create FastAPI application.

    Logfire must already be configured: ``scripts/start_app.py`` does it in
    production and ``tests/conftest.py`` in tests.

    Args:
        container: DI container to serve requests from. Defaults to the
            production container.
        settings: Settings for CORS. Loaded from the environment when omitted.
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Blog API",
        description="Posts with tags, likes and comments",
        version=APP_VERSION,
    )

    instrument_fastapi(app_instance)

    # Cookie auth needs credentials, so origins are listed explicitly
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(users.router)

    return app_instance


# Imported by uvicorn, see scripts/start_app.py
app = create_app()
