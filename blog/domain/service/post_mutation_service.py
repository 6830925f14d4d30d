"""Post mutation domain service.

Write side of the posts resource. Every operation is a single-document
update: input is validated before the store is touched and ownership is
checked before anything is changed.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from blog.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from blog.domain.model.comment import Comment
from blog.domain.model.patch import PostPatch
from blog.domain.model.post import Post
from blog.domain.repository import PostRepository
from blog.domain.value import Caller, CommentId, PostId, UserId

from .base import Service


class PostMutationService(Service):
    """Domain service for creating and changing posts."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post mutation service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(
        self,
        author_id: UserId,
        title: str,
        content: str,
        tags: Optional[list[str]] = None,
        image: Optional[str] = None,
    ) -> Post:
        """Create a published post owned by the author.

        Args:
            author_id: Creating user, owner of the post from now on
            title: Title (1-100 characters after trimming)
            content: Body (1-5000 characters after trimming)
            tags: Tags, empty when absent
            image: Optional image URL

        Returns:
            The saved post

        Raises:
            ValidationError: If any field is out of bounds
        """
        now = datetime.now()
        try:
            post = Post(
                id=PostId(uuid4()),
                title=title,
                content=content,
                author_id=author_id,
                tags=[] if tags is None else tags,
                image=image,
                is_published=True,
                likes=[],
                comments=[],
                view_count=0,
                created_at=now,
                updated_at=now,
            )
        except PydanticValidationError as e:
            logfire.warn("Post creation validation failed", error=str(e))
            raise ValidationError.from_pydantic(e)

        with logfire.span(
            "post_mutation_service.create_post",
            post_id=str(post.id),
            author_id=str(author_id),
            title=post.title,
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def update_post(
        self, post_id: PostId, caller: Caller, patch: PostPatch
    ) -> Post:
        """Apply a partial update to a post.

        Only the fields present in the patch change. An empty patch leaves
        the post as it is.

        Args:
            post_id: Post to update
            caller: Authenticated caller (must be the author or an admin)
            patch: Fields to change

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the caller is neither author nor admin
            ValidationError: If the patched post violates a field rule
        """
        with logfire.span(
            "post_mutation_service.update_post",
            post_id=str(post_id),
            user_id=str(caller.user_id),
            fields=sorted(patch.model_fields_set),
        ):
            post = await self._get_owned_post(post_id, caller, action="update")

            if patch.is_empty:
                logfire.info("Empty patch, post unchanged", post_id=str(post_id))
                return post

            changes = patch.changes()
            try:
                candidate = post.with_changes(**changes)
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            # Write only the patched columns, never the likes, comments or views
            fields = {name: getattr(candidate, name) for name in changes}
            fields["updated_at"] = datetime.now()

            saved = await self.post_repository.update_fields(post_id, fields)
            if saved is None:
                logfire.warn("Post deleted during update", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post updated", post_id=str(post_id))
            return saved

    async def delete_post(self, post_id: PostId, caller: Caller) -> None:
        """Delete a post permanently.

        Args:
            post_id: Post to delete
            caller: Authenticated caller (must be the author or an admin)

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the caller is neither author nor admin
        """
        with logfire.span(
            "post_mutation_service.delete_post",
            post_id=str(post_id),
            user_id=str(caller.user_id),
        ):
            await self._get_owned_post(post_id, caller, action="delete")

            deleted = await self.post_repository.delete(post_id)
            if not deleted:
                # Removed by a concurrent request between the read and the delete
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post deleted", post_id=str(post_id))

    async def toggle_like(self, post_id: PostId, user_id: UserId) -> tuple[Post, bool]:
        """Like the post, or unlike it if the user already likes it.

        Args:
            post_id: Post ID
            user_id: User toggling their like

        Returns:
            The updated post and whether the user now likes it

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "post_mutation_service.toggle_like",
            post_id=str(post_id),
            user_id=str(user_id),
        ):
            result = await self.post_repository.toggle_like(post_id, user_id)

            if result is None:
                logfire.warn("Like on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            post, liked = result
            logfire.info(
                "Post liked" if liked else "Post unliked",
                post_id=str(post_id),
                user_id=str(user_id),
                like_count=post.like_count,
            )
            return post, liked

    async def add_comment(
        self, post_id: PostId, user_id: UserId, content: str
    ) -> Post:
        """Append a comment to a post.

        Args:
            post_id: Post ID
            user_id: Commenting user
            content: Comment text (1-500 characters after trimming)

        Returns:
            The post with the comment appended last

        Raises:
            ValidationError: If the content is out of bounds
            NotFoundError: If the post doesn't exist
        """
        try:
            comment = Comment(
                id=CommentId(uuid4()),
                user_id=user_id,
                content=content,
                created_at=datetime.now(),
            )
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)

        with logfire.span(
            "post_mutation_service.add_comment",
            post_id=str(post_id),
            user_id=str(user_id),
            comment_id=str(comment.id),
        ):
            post = await self.post_repository.append_comment(post_id, comment)

            if post is None:
                logfire.warn("Comment on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info(
                "Comment added",
                post_id=str(post_id),
                comment_count=post.comment_count,
            )
            return post

    async def _get_owned_post(
        self, post_id: PostId, caller: Caller, action: str
    ) -> Post:
        """Load a post and check the caller may modify it."""
        post = await self.post_repository.find_by_id(post_id)
        if not post:
            logfire.warn("Post not found", post_id=str(post_id), action=action)
            raise NotFoundError("Post", str(post_id))

        if not post.can_be_modified_by(caller):
            logfire.warn(
                "Unauthorized post modification attempt",
                post_id=str(post_id),
                user_id=str(caller.user_id),
                action=action,
            )
            raise NotAuthorizedError(action, "post", str(post_id), str(caller.user_id))

        return post
