"""Base use case and API model."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class APIModel(BaseModel):
    """Response model serialized with camelCase field names.

    Python code uses snake_case; the JSON contract of the API is camelCase
    (``totalPages``, ``isPublished``, ``viewCount``).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
