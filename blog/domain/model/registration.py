"""Details supplied when signing up for an account."""

from typing import Any

from pydantic import EmailStr, Field, field_validator

from blog.domain.model.common import DomainModel, bounded_text

NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 128


class Registration(DomainModel):
    """A sign-up request, validated before any account is created.

    Emails are compared case-insensitively, so they are stored lowercased.
    """

    name: str
    email: EmailStr
    password: str = Field(
        min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH, repr=False
    )

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        return bounded_text(v, "Name", NAME_MAX_LENGTH)

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()
