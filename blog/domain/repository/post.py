"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict

from blog.domain.model.comment import Comment
from blog.domain.model.post import Post
from blog.domain.value import PostId, TagCount, UserId


class PostFilter(BaseModel):
    """Conjunctive predicate over posts.

    Every criterion that is set must match:
    - search: case-insensitive substring of the title or the content
    - tag: the post carries this tag
    - author_id: the post was written by this user
    - published_only: the post is published
    """

    model_config = ConfigDict(frozen=True)

    search: Optional[str] = None
    tag: Optional[str] = None
    author_id: Optional[UserId] = None
    published_only: bool = True

    def matches(self, post: Post) -> bool:
        """Evaluate the predicate in memory."""
        if self.published_only and not post.is_published:
            return False
        if self.search:
            needle = self.search.casefold()
            if (
                needle not in post.title.casefold()
                and needle not in post.content.casefold()
            ):
                return False
        if self.tag and self.tag not in post.tags:
            return False
        if self.author_id is not None and post.author_id != self.author_id:
            return False
        return True


class PostRepository(ABC):
    """Repository for the Post aggregate (the entity store).

    Defines the contract for post persistence operations. Every method is a
    single-document operation; implementations guarantee per-document
    atomicity and raise StoreError when the underlying store fails.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        post_filter: PostFilter,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts matching a filter, newest first.

        Posts created at the same instant keep their insertion order.

        Args:
            post_filter: Predicate the posts must match
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, post_filter: PostFilter) -> int:
        """Count posts matching a filter.

        Args:
            post_filter: Predicate the posts must match

        Returns:
            Total number of posts matching the criteria
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post.

        Existing posts are never rewritten as a whole: changes go through
        ``update_fields`` and the other single-field operations.

        Args:
            post: The post to insert

        Returns:
            The saved post

        Raises:
            StoreError: If a post with the same ID already exists
        """
        pass

    @abstractmethod
    async def update_fields(
        self, post_id: PostId, changes: dict[str, Any]
    ) -> Optional[Post]:
        """Atomically set the given fields of a post, leaving the others alone.

        Likes, comments and the view count written concurrently by other
        requests are kept. A post deleted in the meantime stays deleted.

        Args:
            post_id: The post ID
            changes: Field names mapped to their already validated values

        Returns:
            The updated post, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def increment_view_count(self, post_id: PostId) -> Optional[Post]:
        """Atomically increment the view count by 1.

        Args:
            post_id: The post ID

        Returns:
            The updated post, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def toggle_like(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[tuple[Post, bool]]:
        """Atomically add the user to likes, or remove them if present.

        Args:
            post_id: The post ID
            user_id: The user toggling their like

        Returns:
            The updated post and whether the user now likes it,
            or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def append_comment(
        self, post_id: PostId, comment: Comment
    ) -> Optional[Post]:
        """Atomically append a comment to the end of the post's comments.

        Args:
            post_id: The post ID
            comment: The comment to append

        Returns:
            The updated post, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def popular_tags(self, limit: int = 10) -> List[TagCount]:
        """Count tag usage across published posts.

        Args:
            limit: Maximum number of tags to return

        Returns:
            Tags ordered by usage count, most used first. The order of tags
            with equal counts is implementation-defined.
        """
        pass
