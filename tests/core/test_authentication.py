"""Tests for authentication utilities."""

import uuid
from datetime import UTC, datetime, timedelta

import pytest
from fastapi import HTTPException
from jose import jwt

from pipo.core.authentication import (
    create_access_token,
    create_refresh_token,
    get_optional_user,
    get_password_hash,
    hash_refresh_token,
    user_from_token,
    verify_password,
    verify_refresh_token,
    verify_token,
)
from pipo.core.schemas import UserRole
from pipo.core.settings import get_settings


def test_password_hashing():
    """Test password hashing and verification."""
    password = "testpassword123"
    hashed = get_password_hash(password)

    # Hash should be different from original password
    assert hashed != password

    assert verify_password(password, hashed) is True
    assert verify_password("wrongpassword", hashed) is False


def test_create_access_token_with_expiration():
    """Test JWT token creation with custom expiration."""
    data = {"sub": "123"}
    expires_delta = timedelta(minutes=15)
    token = create_access_token(data, expires_delta)

    settings = get_settings()
    payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])

    exp_time = datetime.fromtimestamp(payload["exp"], tz=UTC)
    expected_time = datetime.now(UTC) + expires_delta

    # Allow 1 minute tolerance
    assert abs((exp_time - expected_time).total_seconds()) < 60


def test_verify_token_invalid():
    with pytest.raises(HTTPException) as exc_info:
        verify_token("invalid.token.here")

    assert exc_info.value.status_code == 401
    assert "Could not validate credentials" in str(exc_info.value.detail)


def test_refresh_tokens_are_random_and_hashed():
    token = create_refresh_token()

    assert len(token) == 64
    assert token != create_refresh_token()

    hashed = hash_refresh_token(token)
    assert verify_refresh_token(token, hashed) is True
    assert verify_refresh_token("other", hashed) is False


def test_user_from_token():
    user_id = uuid.uuid4()
    token = create_access_token({"sub": str(user_id), "role": "tutor"})

    user = user_from_token(token)

    assert user.user_id == user_id
    assert user.role == UserRole.TUTOR


@pytest.mark.parametrize(
    "claims",
    [
        {"sub": "not-a-uuid", "role": "tutor"},
        {"sub": str(uuid.uuid4()), "role": "superuser"},
        {"sub": str(uuid.uuid4())},
    ],
)
def test_user_from_token_rejects_bad_claims(claims):
    token = create_access_token(claims)

    with pytest.raises(HTTPException) as exc_info:
        user_from_token(token)

    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
class TestGetOptionalUser:
    """Finders reach the public page without an account."""

    async def test_no_cookie_is_anonymous(self):
        assert await get_optional_user(None) is None

    async def test_tampered_cookie_is_anonymous(self):
        assert await get_optional_user("invalid.token.here") is None

    async def test_expired_cookie_is_anonymous(self):
        token = create_access_token(
            {"sub": str(uuid.uuid4()), "role": "tutor"},
            expires_delta=timedelta(minutes=-5),
        )

        assert await get_optional_user(token) is None

    async def test_valid_cookie(self):
        user_id = uuid.uuid4()
        token = create_access_token({"sub": str(user_id), "role": "admin"})

        user = await get_optional_user(token)

        assert user is not None
        assert user.user_id == user_id
        assert user.role == UserRole.ADMIN
