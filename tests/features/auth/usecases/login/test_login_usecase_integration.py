"""Integration tests for the LoginUseCase."""

import pytest
from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pipo.core.authentication import pwd_context, refresh_token_context
from pipo.core.schemas import UserRole
from pipo.features.auth.models import RefreshToken, User
from pipo.features.auth.usecases.login.login_usecase import LoginUseCaseImpl


class PasswordVerifierImpl:
    """Wrapper for password verification to match protocol."""

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        return pwd_context.verify(plain_password, hashed_password)


class TokenCreatorImpl:
    """Records the claims instead of signing a real token."""

    def __init__(self):
        self.created_tokens = []

    def __call__(self, data: dict[str, str | int], expires_delta=None) -> str:
        self.created_tokens.append(data)
        return f"mock_token_{len(self.created_tokens)}"


class RefreshTokenCreatorImpl:
    """Wrapper for refresh token creation to match protocol."""

    def create(self) -> str:
        return "plain_refresh_token"

    def hash(self, token: str) -> str:
        return refresh_token_context.hash(token)


@pytest.fixture
def token_creator() -> TokenCreatorImpl:
    return TokenCreatorImpl()


@pytest.fixture
def use_case(session_factory, token_creator) -> LoginUseCaseImpl:
    return LoginUseCaseImpl(
        password_verifier=PasswordVerifierImpl(),
        token_creator=token_creator,
        refresh_token_creator=RefreshTokenCreatorImpl(),
        get_db_session=session_factory,
    )


@pytest.mark.asyncio
class TestLoginUseCase:
    """Test suite for the LoginUseCase."""

    async def test_login_successful(
        self,
        db_session: AsyncSession,
        create_user,
        use_case: LoginUseCaseImpl,
        token_creator: TokenCreatorImpl,
    ):
        """Test successful login issues both tokens."""
        # Arrange
        user = await create_user("tutor@example.com", password="correctpassword")

        # Act
        response = await use_case.execute("tutor@example.com", "correctpassword")

        # Assert
        assert response.access_token == "mock_token_1"
        assert response.refresh_token == "plain_refresh_token"
        assert response.token_type == "bearer"
        assert response.expires_in == 30 * 60
        assert token_creator.created_tokens == [
            {"sub": str(user.user_id), "role": UserRole.TUTOR.value}
        ]

        # Verify the refresh token was stored hashed
        result = await db_session.execute(
            select(RefreshToken).where(RefreshToken.user_id == user.user_id)
        )
        stored = result.scalar_one()
        assert stored.token_hash != "plain_refresh_token"
        assert refresh_token_context.verify("plain_refresh_token", stored.token_hash)
        assert stored.revoked is False

    async def test_login_admin_carries_role(
        self, create_user, use_case: LoginUseCaseImpl, token_creator: TokenCreatorImpl
    ):
        await create_user("admin@pipo.com", role=UserRole.ADMIN, password="admin123")

        await use_case.execute("admin@pipo.com", "admin123")

        assert token_creator.created_tokens[0]["role"] == "admin"

    async def test_login_wrong_password(self, create_user, use_case: LoginUseCaseImpl):
        """Test login fails with wrong password."""
        # Arrange
        await create_user("tutor@example.com", password="correctpassword")

        # Act & Assert
        with pytest.raises(HTTPException) as exc_info:
            await use_case.execute("tutor@example.com", "wrongpassword")

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Incorrect email or password"

    async def test_login_unknown_email(self, use_case: LoginUseCaseImpl):
        with pytest.raises(HTTPException) as exc_info:
            await use_case.execute("nobody@example.com", "whatever")

        assert exc_info.value.status_code == 401

    async def test_login_disabled_account(
        self, db_session: AsyncSession, create_user, use_case: LoginUseCaseImpl
    ):
        """Test login fails for a deactivated account."""
        # Arrange
        user = await create_user("tutor@example.com", password="correctpassword")
        db_user = await db_session.get(User, user.user_id)
        db_user.is_active = False
        await db_session.commit()

        # Act & Assert
        with pytest.raises(HTTPException) as exc_info:
            await use_case.execute("tutor@example.com", "correctpassword")

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Account is disabled"
