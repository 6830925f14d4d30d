"""Helpers shared by the PostgreSQL repositories."""

from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy.exc import SQLAlchemyError

from blog.domain.error import StoreError


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Translate database failures into StoreError.

    Args:
        operation: Name of the repository operation, for logs

    Raises:
        StoreError: If the wrapped block raises a SQLAlchemy error
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error("Store operation failed", operation=operation, error=str(e))
        raise StoreError(f"{operation} failed") from e
