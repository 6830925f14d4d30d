"""Unit tests for Registration validation."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from blog.domain.model import Registration


class TestRegistration:
    def test_name_is_trimmed_and_email_lowercased(self):
        registration = Registration(
            name="  Ada  ", email="Ada@Example.COM", password="s3cret!"
        )

        assert registration.name == "Ada"
        assert registration.email == "ada@example.com"

    def test_every_invalid_field_is_reported(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            Registration(name="", email="not-an-email", password="12345")

        fields = {error["loc"][0] for error in exc_info.value.errors()}
        assert fields == {"name", "email", "password"}

    def test_password_is_kept_out_of_repr(self):
        registration = Registration(
            name="Ada", email="ada@example.com", password="s3cret!"
        )

        assert "s3cret!" not in repr(registration)
