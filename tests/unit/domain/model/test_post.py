"""Unit tests for the Post aggregate."""

from uuid import uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError

from blog.domain.model.comment import Comment
from blog.domain.value import Caller, CommentId, UserId, UserRole
from tests.conftest import make_post


class TestPostValidation:
    """Field rules enforced on construction."""

    def test_title_and_content_are_trimmed(self):
        post = make_post(UserId(uuid4()), title="  Hello  ", content="\n Body \t")

        assert post.title == "Hello"
        assert post.content == "Body"

    def test_title_at_max_length_is_accepted(self):
        post = make_post(UserId(uuid4()), title="x" * 100)
        assert len(post.title) == 100

    @pytest.mark.parametrize("title", ["", "   ", "x" * 101])
    def test_invalid_title_is_rejected(self, title):
        with pytest.raises(PydanticValidationError, match="Title is required"):
            make_post(UserId(uuid4()), title=title)

    def test_content_over_5000_characters_is_rejected(self):
        with pytest.raises(PydanticValidationError, match="Content is required"):
            make_post(UserId(uuid4()), content="x" * 5001)

    def test_tags_are_trimmed_and_keep_order(self):
        post = make_post(UserId(uuid4()), tags=[" python ", "web", "python"])
        assert post.tags == ["python", "web", "python"]

    def test_blank_tag_is_rejected(self):
        with pytest.raises(PydanticValidationError, match="non-empty strings"):
            make_post(UserId(uuid4()), tags=["ok", "  "])

    def test_empty_image_means_no_image(self):
        post = make_post(UserId(uuid4())).with_changes(image="  ")
        assert post.image is None

    def test_invalid_image_url_is_rejected(self):
        with pytest.raises(PydanticValidationError, match="Image must be a valid URL"):
            make_post(UserId(uuid4())).with_changes(image="not a url")

    def test_duplicate_likes_are_rejected(self):
        liker = UserId(uuid4())
        with pytest.raises(PydanticValidationError, match="only once"):
            make_post(UserId(uuid4())).with_changes(likes=[liker, liker])


class TestPostBehaviour:
    """Derived values and copy-on-write mutations."""

    def test_new_post_has_zero_counts(self):
        post = make_post(UserId(uuid4()))

        assert post.view_count == 0
        assert post.like_count == 0
        assert post.comment_count == 0
        assert post.is_published is True

    def test_like_toggle_is_an_involution(self):
        post = make_post(UserId(uuid4()))
        liker = UserId(uuid4())

        liked_post, liked = post.with_like_toggled(liker)
        unliked_post, still_liked = liked_post.with_like_toggled(liker)

        assert liked is True
        assert liked_post.likes == [liker]
        assert still_liked is False
        assert unliked_post.likes == post.likes

    def test_with_comment_appends_last(self):
        post = make_post(UserId(uuid4()))
        first = Comment(id=CommentId(uuid4()), user_id=UserId(uuid4()), content="a")
        second = Comment(id=CommentId(uuid4()), user_id=UserId(uuid4()), content="b")

        result = post.with_comment(first).with_comment(second)

        assert [c.content for c in result.comments] == ["a", "b"]
        assert post.comments == []

    def test_author_and_admin_can_modify(self):
        author = UserId(uuid4())
        post = make_post(author)

        assert post.can_be_modified_by(Caller(user_id=author))
        assert post.can_be_modified_by(
            Caller(user_id=UserId(uuid4()), role=UserRole.ADMIN)
        )
        assert not post.can_be_modified_by(Caller(user_id=UserId(uuid4())))


class TestComment:
    @pytest.mark.parametrize("content", ["", "  ", "x" * 501])
    def test_invalid_content_is_rejected(self, content):
        with pytest.raises(PydanticValidationError, match="Comment is required"):
            Comment(id=CommentId(uuid4()), user_id=UserId(uuid4()), content=content)

    def test_content_is_trimmed(self):
        comment = Comment(
            id=CommentId(uuid4()), user_id=UserId(uuid4()), content="  nice  "
        )
        assert comment.content == "nice"
