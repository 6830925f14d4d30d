"""End-to-end tests for the posts API."""

import pytest

from blog.domain.value import UserRole


class TestPostLifecycle:
    """The full create / like / forbid / delete scenario."""

    @pytest.mark.asyncio
    async def test_create_like_forbid_delete(self, api):
        alice = await api.login("Alice")
        bob = await api.login("Bob")
        carol = await api.login("Carol")

        # A creates a post
        response = await api.post(
            "/posts",
            json={"title": "Test Post", "content": "Hello", "tags": ["intro"]},
            headers=alice.headers,
        )
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Post created successfully"
        post_id = body["post"]["id"]
        assert body["post"]["author"]["name"] == "Alice"

        # Listed for anyone
        response = await api.get("/posts")
        assert response.status_code == 200
        listing = response.json()
        assert listing["total"] == 1
        assert listing["totalPages"] == 1
        assert listing["currentPage"] == 1
        assert [p["title"] for p in listing["posts"]] == ["Test Post"]

        # B likes, then unlikes
        response = await api.post(f"/posts/{post_id}/like", headers=bob.headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Post liked"
        assert response.json()["liked"] is True
        assert [like["id"] for like in response.json()["post"]["likes"]] == [bob.id]

        response = await api.post(f"/posts/{post_id}/like", headers=bob.headers)
        assert response.json()["message"] == "Post unliked"
        assert response.json()["post"]["likes"] == []

        # C may not delete it
        response = await api.delete(f"/posts/{post_id}", headers=carol.headers)
        assert response.status_code == 403
        assert response.json()["detail"] == "Not authorized to delete this post"
        assert (await api.get(f"/posts/{post_id}")).status_code == 200

        # A deletes it
        response = await api.delete(f"/posts/{post_id}", headers=alice.headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Post deleted successfully"}

        response = await api.get(f"/posts/{post_id}")
        assert response.status_code == 404
        assert response.json()["detail"] == "Post not found"


class TestReadPost:
    @pytest.mark.asyncio
    async def test_view_count_only_grows_for_authenticated_reads(self, api):
        alice = await api.login("Alice")
        created = await api.post(
            "/posts", json={"title": "T", "content": "C"}, headers=alice.headers
        )
        post_id = created.json()["post"]["id"]

        anonymous = await api.get(f"/posts/{post_id}")
        assert anonymous.json()["post"]["viewCount"] == 0

        authenticated = await api.get(f"/posts/{post_id}", headers=alice.headers)
        assert authenticated.json()["post"]["viewCount"] == 1

    @pytest.mark.asyncio
    async def test_invalid_token_reads_anonymously(self, api):
        alice = await api.login("Alice")
        created = await api.post(
            "/posts", json={"title": "T", "content": "C"}, headers=alice.headers
        )
        post_id = created.json()["post"]["id"]

        response = await api.get(
            f"/posts/{post_id}", headers={"Authorization": "Bearer garbage"}
        )

        assert response.status_code == 200
        assert response.json()["post"]["viewCount"] == 0

    @pytest.mark.asyncio
    async def test_malformed_id_is_not_found(self, api):
        response = await api.get("/posts/not-a-uuid")
        assert response.status_code == 404


class TestWritePost:
    @pytest.mark.asyncio
    async def test_create_requires_authentication(self, api):
        response = await api.post("/posts", json={"title": "T", "content": "C"})
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_cookie_authenticates_too(self, api):
        alice = await api.login("Alice")
        token = alice.headers["Authorization"].removeprefix("Bearer ")

        response = await api.post(
            "/posts",
            json={"title": "T", "content": "C"},
            headers={"Cookie": f"auth_token={token}"},
        )

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_create_reports_every_invalid_field(self, api):
        alice = await api.login("Alice")

        response = await api.post(
            "/posts", json={"title": "   ", "content": ""}, headers=alice.headers
        )

        assert response.status_code == 400
        body = response.json()
        assert body["detail"] == "Validation failed"
        assert {e["field"] for e in body["errors"]} == {"title", "content"}

    @pytest.mark.asyncio
    async def test_update_is_partial(self, api):
        alice = await api.login("Alice")
        created = await api.post(
            "/posts",
            json={"title": "Draft", "content": "Body", "tags": ["a"]},
            headers=alice.headers,
        )
        post_id = created.json()["post"]["id"]

        response = await api.put(
            f"/posts/{post_id}",
            json={"isPublished": False},
            headers=alice.headers,
        )

        assert response.status_code == 200
        post = response.json()["post"]
        assert response.json()["message"] == "Post updated successfully"
        assert post["isPublished"] is False
        assert post["title"] == "Draft"
        assert post["tags"] == ["a"]

        # Unpublished posts drop out of the listing
        assert (await api.get("/posts")).json()["total"] == 0

    @pytest.mark.asyncio
    async def test_admin_can_update_and_delete_others_posts(self, api):
        alice = await api.login("Alice")
        admin = await api.login("Admin", role=UserRole.ADMIN)
        created = await api.post(
            "/posts", json={"title": "T", "content": "C"}, headers=alice.headers
        )
        post_id = created.json()["post"]["id"]

        updated = await api.put(
            f"/posts/{post_id}", json={"title": "Moderated"}, headers=admin.headers
        )
        deleted = await api.delete(f"/posts/{post_id}", headers=admin.headers)

        assert updated.status_code == 200
        assert updated.json()["post"]["title"] == "Moderated"
        assert deleted.status_code == 200

    @pytest.mark.asyncio
    async def test_comments_are_appended_in_order(self, api):
        alice = await api.login("Alice")
        bob = await api.login("Bob")
        created = await api.post(
            "/posts", json={"title": "T", "content": "C"}, headers=alice.headers
        )
        post_id = created.json()["post"]["id"]

        for text in ["one", "two"]:
            response = await api.post(
                f"/posts/{post_id}/comments",
                json={"content": text},
                headers=bob.headers,
            )
            assert response.status_code == 200
            assert response.json()["message"] == "Comment added successfully"

        comments = response.json()["post"]["comments"]
        assert [c["content"] for c in comments] == ["one", "two"]
        assert comments[0]["user"]["name"] == "Bob"

        empty = await api.post(
            f"/posts/{post_id}/comments", json={"content": " "}, headers=bob.headers
        )
        assert empty.status_code == 400


class TestListPosts:
    @pytest.mark.asyncio
    async def test_page_beyond_last_is_empty(self, api):
        alice = await api.login("Alice")
        for i in range(3):
            await api.post(
                "/posts",
                json={"title": f"Post {i}", "content": "C"},
                headers=alice.headers,
            )

        response = await api.get("/posts", params={"page": 2, "limit": 10})

        body = response.json()
        assert body["posts"] == []
        assert body["total"] == 3
        assert body["totalPages"] == 1
        assert body["currentPage"] == 2

    @pytest.mark.asyncio
    async def test_search_and_tag_filters(self, api):
        alice = await api.login("Alice")
        await api.post(
            "/posts",
            json={"title": "Learning FastAPI", "content": "C", "tags": ["python"]},
            headers=alice.headers,
        )
        await api.post(
            "/posts",
            json={"title": "Other", "content": "C", "tags": ["rust"]},
            headers=alice.headers,
        )

        by_search = await api.get("/posts", params={"search": "fastapi"})
        by_tag = await api.get("/posts", params={"tag": "rust"})

        assert [p["title"] for p in by_search.json()["posts"]] == ["Learning FastAPI"]
        assert [p["title"] for p in by_tag.json()["posts"]] == ["Other"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [{"limit": 101}, {"page": 0}, {"page": "x"}])
    async def test_bad_pagination_is_a_400(self, api, params):
        response = await api.get("/posts", params=params)

        assert response.status_code == 400
        assert response.json()["detail"] == "Validation failed"

    @pytest.mark.asyncio
    async def test_popular_tags(self, api):
        alice = await api.login("Alice")
        await api.post(
            "/posts",
            json={"title": "One", "content": "C", "tags": ["a"]},
            headers=alice.headers,
        )
        await api.post(
            "/posts",
            json={"title": "Two", "content": "C", "tags": ["a", "b"]},
            headers=alice.headers,
        )

        response = await api.get("/posts/tags/popular")

        assert response.status_code == 200
        assert response.json() == {
            "tags": [{"tag": "a", "count": 2}, {"tag": "b", "count": 1}]
        }
