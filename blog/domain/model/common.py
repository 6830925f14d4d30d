"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


def bounded_text(value: str, label: str, max_length: int) -> str:
    """Trim a text field and check it is 1..max_length characters long.

    Args:
        value: Raw text
        label: Human readable field name used in the error message
        max_length: Maximum length after trimming

    Returns:
        The trimmed text

    Raises:
        ValueError: If the trimmed text is empty or too long
    """
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{label} must be a string")
    value = (value or "").strip()
    if not value or len(value) > max_length:
        raise ValueError(
            f"{label} is required and must be at most {max_length} characters"
        )
    return value
