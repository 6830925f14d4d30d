#!/usr/bin/env python3
"""Serve the API with uvicorn.

Logging and Logfire are configured before the app module is imported, so
startup failures are reported too.
"""

import sys

import logfire
import uvicorn

from blog.config import Settings
from blog.util.logging import setup_logging
from blog.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting blog API",
        host=settings.server.host,
        port=settings.server.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            "blog.interface.api.app:app",
            host=settings.server.host,
            port=settings.server.port,
            log_level="debug" if settings.debug else "info",
            reload=settings.environment == "development" and settings.debug,
        )
    except Exception as e:
        logfire.error(
            "Blog API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
