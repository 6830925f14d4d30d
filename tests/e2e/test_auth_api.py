"""End-to-end tests for registering and logging in."""

import pytest

NEW_USER = {
    "name": "New User",
    "email": "newuser@example.com",
    "password": "password123",
}


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_creates_account_and_token(self, api):
        response = await api.post("/auth/register", json=NEW_USER)

        assert response.status_code == 201
        body = response.json()
        assert set(body) == {"token", "user"}
        assert body["user"]["name"] == "New User"
        assert body["user"]["email"] == "newuser@example.com"
        assert body["user"]["role"] == "user"
        assert "password" not in response.text
        assert "passwordHash" not in body["user"]

    @pytest.mark.asyncio
    async def test_registered_token_authenticates_writes(self, api):
        token = (await api.post("/auth/register", json=NEW_USER)).json()["token"]
        api.cookies.clear()

        response = await api.post(
            "/posts",
            json={"title": "First", "content": "Hello"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 201
        assert response.json()["post"]["author"]["name"] == "New User"

    @pytest.mark.asyncio
    async def test_register_sets_the_auth_cookie(self, api):
        await api.post("/auth/register", json=NEW_USER)

        response = await api.post("/posts", json={"title": "T", "content": "C"})

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected(self, api):
        await api.post("/auth/register", json=NEW_USER)

        response = await api.post(
            "/auth/register", json={**NEW_USER, "email": "NewUser@Example.com"}
        )

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"field": "email", "message": "Email is already registered"}
        ]

    @pytest.mark.asyncio
    async def test_every_invalid_field_is_reported(self, api):
        response = await api.post(
            "/auth/register", json={"email": "nope", "password": "123"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["detail"] == "Validation failed"
        assert {e["field"] for e in body["errors"]} == {"name", "email", "password"}


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_returns_token_and_user(self, api):
        await api.post("/auth/register", json=NEW_USER)

        response = await api.post(
            "/auth/login",
            json={"email": NEW_USER["email"], "password": NEW_USER["password"]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["token"]
        assert body["user"]["email"] == NEW_USER["email"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "credentials",
        [
            {"email": "newuser@example.com", "password": "wrongpassword"},
            {"email": "nobody@example.com", "password": "password123"},
        ],
    )
    async def test_bad_credentials_are_unauthorized(self, api, credentials):
        await api.post("/auth/register", json=NEW_USER)

        response = await api.post("/auth/login", json=credentials)

        assert response.status_code == 401
        assert response.json() == {"detail": "Invalid credentials"}

    @pytest.mark.asyncio
    async def test_seeded_account_without_password_cannot_log_in(self, api):
        alice = await api.login("Alice")

        response = await api.post(
            "/auth/login", json={"email": alice.user.email, "password": ""}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_missing_fields_are_a_validation_error(self, api):
        response = await api.post("/auth/login", json={"email": "a@example.com"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "password"
