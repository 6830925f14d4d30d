"""Standard library logging for third-party libraries.

Application events go through Logfire. Uvicorn, SQLAlchemy and alembic log
through ``logging``, and this routes them to stdout at a level matching the
environment.
"""

import logging
import sys

from blog.config import Settings

# Loggers that are too chatty at INFO outside of debug mode
QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure root logging once at process start."""
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    if not settings.debug:
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
