"""Domain layer errors."""

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError


class DomainError(Exception):
    """Base domain error."""

    pass


class FieldError(BaseModel):
    """A single field-level validation message."""

    field: str
    message: str


class ValidationError(DomainError):
    """Domain validation error.

    Carries field-level messages so the API can report every problem with a
    request at once.
    """

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        super().__init__(
            "; ".join(f"{error.field}: {error.message}" for error in errors)
        )

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        """Build a validation error for one field."""
        return cls([FieldError(field=field, message=message)])

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        """Convert a pydantic validation error raised by a domain model."""
        errors = []
        for error in exc.errors():
            location = [str(part) for part in error["loc"]]
            message = error["msg"]
            # Strip pydantic's "Value error, " prefix from custom validators
            if message.startswith("Value error, "):
                message = message[len("Value error, ") :]
            errors.append(
                FieldError(field=".".join(location) or "__root__", message=message)
            )
        return cls(errors)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StoreError(DomainError):
    """Raised by repository implementations when the underlying store fails."""

    pass


class InvalidCredentialsError(DomainError):
    """Raised when a login presents an unknown email or a wrong password.

    The message never says which of the two was wrong.
    """

    def __init__(self) -> None:
        super().__init__("Invalid credentials")
