"""Partial update of a post.

Each field is independently present or absent. Presence is tracked by
pydantic (``model_fields_set``), so a field that was sent as an empty or
falsy value is distinguishable from one that was not sent at all.
"""

from typing import Any, Optional

from pydantic import ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from blog.domain.model.common import DomainModel, bounded_text
from blog.domain.model.post import (
    CONTENT_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    normalize_image,
    normalize_tags,
)


class PostPatch(DomainModel):
    """Fields of a post that the author (or an admin) may change.

    Validators only run for fields that are present:
    - ``title``/``content`` present but empty or null are rejected
    - ``image`` accepts an empty value, which clears the image
    - ``is_published`` accepts ``false``
    - ``tags`` accepts ``[]``
    """

    # Accepts the camelCase keys of a request body (``isPublished``); other
    # keys are ignored
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[list[str]] = None
    image: Optional[str] = None
    is_published: Optional[bool] = None

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v: Any) -> str:
        return bounded_text(v, "Title", TITLE_MAX_LENGTH)

    @field_validator("content", mode="before")
    @classmethod
    def validate_content(cls, v: Any) -> str:
        return bounded_text(v, "Content", CONTENT_MAX_LENGTH)

    @field_validator("tags", mode="before")
    @classmethod
    def validate_tags(cls, v: Any) -> list[str]:
        return normalize_tags(v)

    @field_validator("image", mode="before")
    @classmethod
    def validate_image(cls, v: Any) -> Optional[str]:
        return normalize_image(v)

    @field_validator("is_published", mode="before")
    @classmethod
    def validate_is_published(cls, v: Any) -> bool:
        if not isinstance(v, bool):
            raise ValueError("isPublished must be a boolean")
        return v

    def changes(self) -> dict[str, Any]:
        """Fields present in the patch, mapped to their new values."""
        return {name: getattr(self, name) for name in self.model_fields_set}

    @property
    def is_empty(self) -> bool:
        """Whether the patch carries no fields at all."""
        return not self.model_fields_set
