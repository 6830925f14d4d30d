"""End-to-end tests for the user directory API."""

import pytest

from blog.domain.value import UserRole


class TestUsersApi:
    @pytest.mark.asyncio
    async def test_get_user_requires_authentication(self, api):
        alice = await api.login("Alice")

        anonymous = await api.get(f"/users/{alice.id}")
        authenticated = await api.get(f"/users/{alice.id}", headers=alice.headers)

        assert anonymous.status_code == 401
        assert authenticated.status_code == 200
        user = authenticated.json()["user"]
        assert user["name"] == "Alice"
        assert user["role"] == "user"
        assert "email" not in user

    @pytest.mark.asyncio
    async def test_unknown_user_is_not_found(self, api):
        alice = await api.login("Alice")

        response = await api.get(
            "/users/00000000-0000-0000-0000-000000000000", headers=alice.headers
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    @pytest.mark.asyncio
    async def test_listing_users_is_admin_only(self, api):
        alice = await api.login("Alice")
        admin = await api.login("Root", role=UserRole.ADMIN)

        assert (await api.get("/users")).status_code == 401
        assert (await api.get("/users", headers=alice.headers)).status_code == 403

        response = await api.get("/users", headers=admin.headers)
        assert response.status_code == 200
        assert response.json()["total"] == 2
        assert response.json()["totalPages"] == 1
