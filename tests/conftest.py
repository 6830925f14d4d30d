"""Test configuration and fixtures."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from blog.domain.model import Post, User
from blog.domain.value import PostId, UserId, UserRole

# Keep telemetry local; the app module instruments FastAPI on import
logfire.configure(send_to_logfire=False, console=False)


def make_user(
    name: str = "Alice",
    role: UserRole = UserRole.USER,
    email: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> User:
    """Build a user with a fresh ID."""
    user_id = UserId(uuid4())
    return User(
        id=user_id,
        name=name,
        email=email or f"{name.lower()}-{user_id.hex[:8]}@example.com",
        avatar=f"https://example.com/avatars/{name.lower()}.png",
        role=role,
        created_at=created_at or datetime.now(),
    )


def make_post(
    author_id: UserId,
    title: str = "Test Post",
    content: str = "Test content",
    tags: Optional[list[str]] = None,
    is_published: bool = True,
    created_at: Optional[datetime] = None,
) -> Post:
    """Build a post with a fresh ID and no likes, comments or views."""
    now = created_at or datetime.now()
    return Post(
        id=PostId(uuid4()),
        title=title,
        content=content,
        author_id=author_id,
        tags=tags or [],
        is_published=is_published,
        created_at=now,
        updated_at=now,
    )
