"""PostgreSQL implementation of Post repository.

Likes and comments live in array/JSONB columns of the post row, so each
mutation is one UPDATE on one row and needs no explicit locking.
"""

from datetime import datetime
from typing import Any, List, Optional

import logfire
from sqlalchemy import (
    Select,
    any_,
    case,
    delete,
    desc,
    func,
    insert,
    literal,
    or_,
    select,
    update,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Comment, Post
from blog.domain.repository import PostFilter, PostRepository
from blog.domain.value import PostId, TagCount, UserId
from blog.persistence.mappers import comment_to_json, post_to_dict, row_to_post
from blog.persistence.repository.base import store_errors
from blog.persistence.tables import posts_table


def _apply_filter(stmt: Select, post_filter: PostFilter) -> Select:
    """Add the filter's criteria to a statement over the posts table."""
    if post_filter.published_only:
        stmt = stmt.where(posts_table.c.is_published.is_(True))

    if post_filter.search:
        stmt = stmt.where(
            or_(
                posts_table.c.title.icontains(post_filter.search, autoescape=True),
                posts_table.c.content.icontains(post_filter.search, autoescape=True),
            )
        )

    if post_filter.tag:
        stmt = stmt.where(posts_table.c.tags.contains([post_filter.tag]))

    if post_filter.author_id is not None:
        stmt = stmt.where(posts_table.c.author_id == post_filter.author_id)

    return stmt


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            with store_errors("post_repository.find_by_id"):
                stmt = select(posts_table).where(posts_table.c.id == post_id)
                result = await self.session.execute(stmt)
                row = result.mappings().first()

            if not row:
                logfire.debug("Post not found", post_id=str(post_id))
                return None

            return row_to_post(dict(row))

    async def find_all(
        self,
        post_filter: PostFilter,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with filtering and pagination, newest first."""
        with logfire.span(
            "post_repository.find_all",
            search=post_filter.search,
            tag=post_filter.tag,
            author_id=str(post_filter.author_id) if post_filter.author_id else None,
            limit=limit,
            offset=offset,
        ):
            stmt = _apply_filter(select(posts_table), post_filter)
            stmt = (
                stmt.order_by(desc(posts_table.c.created_at), posts_table.c.seq)
                .limit(limit)
                .offset(offset)
            )

            with store_errors("post_repository.find_all"):
                result = await self.session.execute(stmt)
                rows = result.mappings().all()

            posts = [row_to_post(dict(row)) for row in rows]
            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(self, post_filter: PostFilter) -> int:
        """Count posts matching the given filter."""
        with logfire.span("post_repository.count"):
            stmt = _apply_filter(
                select(func.count()).select_from(posts_table), post_filter
            )

            with store_errors("post_repository.count"):
                result = await self.session.execute(stmt)
                count = result.scalar() or 0

            logfire.debug("Post count", count=count)
            return count

    async def save(self, post: Post) -> Post:
        """Insert a new post."""
        with logfire.span(
            "post_repository.save", post_id=str(post.id), tags=post.tags
        ):
            stmt = insert(posts_table).values(**post_to_dict(post))

            with store_errors("post_repository.save"):
                await self.session.execute(stmt)
                await self.session.flush()

            logfire.info("Post saved successfully", post_id=str(post.id))
            return post

    async def update_fields(
        self, post_id: PostId, changes: dict[str, Any]
    ) -> Optional[Post]:
        """Set only the given columns with one UPDATE ... RETURNING."""
        with logfire.span(
            "post_repository.update_fields",
            post_id=str(post_id),
            fields=sorted(changes),
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(**changes)
                .returning(posts_table)
            )
            return await self._update_returning(
                stmt, "post_repository.update_fields"
            )

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        stmt = (
            delete(posts_table)
            .where(posts_table.c.id == post_id)
            .returning(posts_table.c.id)
        )
        with store_errors("post_repository.delete"):
            result = await self.session.execute(stmt)
            deleted = result.first() is not None
            await self.session.flush()
        return deleted

    async def increment_view_count(self, post_id: PostId) -> Optional[Post]:
        """Atomically increment the view count by 1."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(view_count=posts_table.c.view_count + 1)
            .returning(posts_table)
        )
        return await self._update_returning(
            stmt, "post_repository.increment_view_count"
        )

    async def toggle_like(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[tuple[Post, bool]]:
        """Atomically add or remove the user's like."""
        with logfire.span(
            "post_repository.toggle_like", post_id=str(post_id), user_id=str(user_id)
        ):
            liker = literal(user_id, PG_UUID(as_uuid=True))
            likes = posts_table.c.likes
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(
                    likes=case(
                        (
                            liker == any_(likes),
                            func.array_remove(likes, liker, type_=likes.type),
                        ),
                        else_=func.array_append(likes, liker, type_=likes.type),
                    ),
                    updated_at=datetime.now(),
                )
                .returning(posts_table)
            )

            post = await self._update_returning(stmt, "post_repository.toggle_like")
            if post is None:
                return None
            return post, post.is_liked_by(user_id)

    async def append_comment(
        self, post_id: PostId, comment: Comment
    ) -> Optional[Post]:
        """Atomically append a comment to the JSONB comments array."""
        with logfire.span(
            "post_repository.append_comment",
            post_id=str(post_id),
            comment_id=str(comment.id),
        ):
            comments = posts_table.c.comments
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(
                    comments=comments.op("||", return_type=JSONB)(
                        literal([comment_to_json(comment)], JSONB)
                    ),
                    updated_at=datetime.now(),
                )
                .returning(posts_table)
            )
            return await self._update_returning(
                stmt, "post_repository.append_comment"
            )

    async def popular_tags(self, limit: int = 10) -> List[TagCount]:
        """Count tags across published posts, most used first."""
        with logfire.span("post_repository.popular_tags", limit=limit):
            tags = (
                select(func.unnest(posts_table.c.tags).label("tag"))
                .where(posts_table.c.is_published.is_(True))
                .subquery()
            )
            usage = func.count().label("count")
            stmt = (
                select(tags.c.tag, usage)
                .group_by(tags.c.tag)
                .order_by(desc(usage), tags.c.tag)
                .limit(limit)
            )

            with store_errors("post_repository.popular_tags"):
                result = await self.session.execute(stmt)
                rows = result.all()

            return [TagCount(tag=tag, count=count) for tag, count in rows]

    async def _update_returning(self, stmt, operation: str) -> Optional[Post]:
        """Run an UPDATE ... RETURNING on one post and map the new row."""
        with store_errors(operation):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            await self.session.flush()

        if row is None:
            logfire.warn("Post not found", operation=operation)
            return None
        return row_to_post(dict(row))
