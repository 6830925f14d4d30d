"""In-memory post repository for testing."""

from collections import Counter
from typing import Any, Optional

from blog.domain.error import StoreError
from blog.domain.model.comment import Comment
from blog.domain.model.post import Post
from blog.domain.repository.post import PostFilter, PostRepository
from blog.domain.value import PostId, TagCount, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        # Insertion ordered, so equal timestamps keep creation order
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(
        self,
        post_filter: PostFilter,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts with filtering and pagination, newest first."""
        posts = [p for p in self._posts.values() if post_filter.matches(p)]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def count(self, post_filter: PostFilter) -> int:
        """Count posts matching the filter."""
        return sum(1 for p in self._posts.values() if post_filter.matches(p))

    async def save(self, post: Post) -> Post:
        """Insert a new post."""
        if post.id in self._posts:
            raise StoreError(f"Post {post.id} already exists")
        self._posts[post.id] = post
        return post

    async def update_fields(
        self, post_id: PostId, changes: dict[str, Any]
    ) -> Optional[Post]:
        """Replace only the given fields of the stored post."""
        post = self._posts.get(post_id)
        if post is None:
            return None
        updated = post.with_changes(**changes)
        self._posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None

    async def increment_view_count(self, post_id: PostId) -> Optional[Post]:
        """Increment the view count by 1."""
        post = self._posts.get(post_id)
        if post is None:
            return None
        updated = post.with_changes(view_count=post.view_count + 1)
        self._posts[post_id] = updated
        return updated

    async def toggle_like(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[tuple[Post, bool]]:
        """Add or remove the user's like."""
        post = self._posts.get(post_id)
        if post is None:
            return None
        updated, liked = post.with_like_toggled(user_id)
        self._posts[post_id] = updated
        return updated, liked

    async def append_comment(
        self, post_id: PostId, comment: Comment
    ) -> Optional[Post]:
        """Append a comment at the end of the post's comments."""
        post = self._posts.get(post_id)
        if post is None:
            return None
        updated = post.with_comment(comment)
        self._posts[post_id] = updated
        return updated

    async def popular_tags(self, limit: int = 10) -> list[TagCount]:
        """Count tags across published posts."""
        counter: Counter[str] = Counter()
        for post in self._posts.values():
            if post.is_published:
                counter.update(post.tags)
        return [
            TagCount(tag=tag, count=count) for tag, count in counter.most_common(limit)
        ]
