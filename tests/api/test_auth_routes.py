"""HTTP tests for signup, login, password changes and first-run setup."""

import pytest


@pytest.mark.asyncio
class TestAuthRoutes:
    async def test_signup_then_login_sets_cookies(self, client):
        # Arrange
        signup = await client.post(
            "/api/v1/auth/signup",
            json={"email": "new@example.com", "password": "password123", "name": "Ana"},
        )

        # Act
        login = await client.post(
            "/api/v1/auth/login",
            json={"email": "new@example.com", "password": "password123"},
        )

        # Assert
        assert signup.status_code == 201
        assert signup.json()["email"] == "new@example.com"
        assert login.status_code == 200
        cookies = login.headers.get_list("set-cookie")
        assert any(c.startswith("access_token=") for c in cookies)
        refresh = next(c for c in cookies if c.startswith("refresh_token="))
        assert "Path=/api/v1/auth" in refresh
        assert "HttpOnly" in refresh

    async def test_signup_rejects_short_password(self, client):
        response = await client.post(
            "/api/v1/auth/signup",
            json={"email": "new@example.com", "password": "short"},
        )

        assert response.status_code == 400

    async def test_signup_rejects_duplicate_email(self, client, tutor):
        response = await client.post(
            "/api/v1/auth/signup",
            json={"email": "tutor@example.com", "password": "password123"},
        )

        assert response.status_code == 400

    async def test_login_wrong_password(self, client, tutor):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "tutor@example.com", "password": "wrong-password"},
        )

        assert response.status_code == 401

    async def test_me(self, client, sign_in, tutor):
        sign_in(client, tutor)

        response = await client.get("/api/v1/auth/me")

        assert response.status_code == 200
        assert response.json()["email"] == "tutor@example.com"
        assert response.json()["role"] == "tutor"

    async def test_change_password_then_login_with_new_password(
        self, client, sign_in, tutor
    ):
        # Arrange
        sign_in(client, tutor)

        # Act
        changed = await client.post(
            "/api/v1/auth/change-password",
            json={"current_password": "password123", "new_password": "brand-new-pass"},
        )
        old_login = await client.post(
            "/api/v1/auth/login",
            json={"email": "tutor@example.com", "password": "password123"},
        )
        new_login = await client.post(
            "/api/v1/auth/login",
            json={"email": "tutor@example.com", "password": "brand-new-pass"},
        )

        # Assert
        assert changed.status_code == 200
        assert changed.json() == {"message": "Password changed successfully"}
        assert old_login.status_code == 401
        assert new_login.status_code == 200

    async def test_change_password_rejects_wrong_current_password(
        self, client, sign_in, tutor
    ):
        sign_in(client, tutor)

        response = await client.post(
            "/api/v1/auth/change-password",
            json={"current_password": "guess", "new_password": "brand-new-pass"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Current password is incorrect"

    async def test_change_password_rejects_short_new_password(
        self, client, sign_in, tutor
    ):
        sign_in(client, tutor)

        response = await client.post(
            "/api/v1/auth/change-password",
            json={"current_password": "password123", "new_password": "short"},
        )

        assert response.status_code == 400
        assert "8 characters" in response.json()["detail"]

    async def test_change_password_requires_sign_in(self, client):
        response = await client.post(
            "/api/v1/auth/change-password",
            json={"current_password": "password123", "new_password": "brand-new-pass"},
        )

        assert response.status_code == 401

    async def test_setup_flow(self, client):
        before = await client.get("/api/v1/auth/setup-required")
        created = await client.post(
            "/api/v1/auth/setup-admin",
            json={"email": "admin@pipo.com", "password": "admin123"},
        )
        after = await client.get("/api/v1/auth/setup-required")

        assert before.json() == {"setup_required": True}
        assert created.status_code == 200
        assert after.json() == {"setup_required": False}
