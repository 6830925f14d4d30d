"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from datetime import datetime
from typing import Any, Dict
from uuid import UUID

from blog.domain.model import Comment, Post, User
from blog.domain.value import CommentId, PostId, UserId, UserRole


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_as_uuid(row["id"])),
        name=row["name"],
        email=row["email"],
        avatar=row.get("avatar"),
        role=UserRole(row["role"]),
        password_hash=row.get("password_hash"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def comment_to_json(comment: Comment) -> Dict[str, Any]:
    """Convert Comment to the JSON object embedded in ``posts.comments``.

    JSONB has no timestamp type, so ``created_at`` is stored as ISO 8601.
    """
    return {
        "id": str(comment.id),
        "user_id": str(comment.user_id),
        "content": comment.content,
        "created_at": comment.created_at.isoformat(),
    }


def json_to_comment(data: Dict[str, Any]) -> Comment:
    """Convert an embedded JSON comment back to the domain model."""
    return Comment(
        id=CommentId(UUID(data["id"])),
        user_id=UserId(UUID(data["user_id"])),
        content=data["content"],
        created_at=datetime.fromisoformat(data["created_at"]),
    )


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model with likes and comments in stored order
    """
    return Post(
        id=PostId(_as_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        author_id=UserId(_as_uuid(row["author_id"])),
        tags=list(row.get("tags") or []),
        image=row.get("image"),
        is_published=row["is_published"],
        likes=[UserId(_as_uuid(liker)) for liker in row.get("likes") or []],
        comments=[json_to_comment(c) for c in row.get("comments") or []],
        view_count=row["view_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": post.id,
        "title": post.title,
        "content": post.content,
        "author_id": post.author_id,
        "tags": list(post.tags),
        "image": post.image,
        "is_published": post.is_published,
        "likes": list(post.likes),
        "comments": [comment_to_json(c) for c in post.comments],
        "view_count": post.view_count,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }
