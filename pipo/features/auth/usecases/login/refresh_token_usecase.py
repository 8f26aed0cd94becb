"""Use case for refreshing access tokens."""

from datetime import UTC, datetime, timedelta
from typing import Protocol

from fastapi import HTTPException, status
from sqlalchemy import select

from pipo.core.settings import get_settings
from pipo.db.session import SessionFactory
from pipo.features.auth.dtos import RefreshTokenResponse
from pipo.features.auth.models import RefreshToken, User
from pipo.features.auth.usecases.login.login_usecase import (
    RefreshTokenCreator,
    TokenCreator,
)


class RefreshTokenVerifier(Protocol):
    """Protocol for refresh token verification operations."""

    def verify(self, plain_token: str, hashed_token: str) -> bool:
        """Verify a refresh token against its hash."""
        ...


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


class RefreshTokenUseCaseImpl:
    """Implementation of the refresh token use case."""

    def __init__(
        self,
        token_creator: TokenCreator,
        refresh_token_creator: RefreshTokenCreator,
        refresh_token_verifier: RefreshTokenVerifier,
        get_db_session: SessionFactory,
    ):
        """Initialize the use case with dependencies.

        Args:
            token_creator: Service for creating access tokens
            refresh_token_creator: Service for creating refresh tokens
            refresh_token_verifier: Service for verifying refresh tokens
            get_db_session: Function to get database session
        """
        self.token_creator = token_creator
        self.refresh_token_creator = refresh_token_creator
        self.refresh_token_verifier = refresh_token_verifier
        self.get_db_session = get_db_session

    async def execute(self, refresh_token: str) -> RefreshTokenResponse:
        """Refresh access token using a valid refresh token.

        The presented token is revoked and a new one issued (rotation).

        Args:
            refresh_token: The refresh token from the request

        Returns:
            Response with new access token and refresh token

        Raises:
            HTTPException: 401 if the token is unknown, revoked or expired
        """
        settings = get_settings()

        async with self.get_db_session() as session:
            result = await session.execute(
                select(RefreshToken)
                .where(RefreshToken.revoked.is_(False))
                .order_by(RefreshToken.created_at.desc())
            )
            db_refresh_token: RefreshToken | None = None
            for token in result.scalars().all():
                if self.refresh_token_verifier.verify(refresh_token, token.token_hash):
                    db_refresh_token = token
                    break

            if not db_refresh_token:
                raise _unauthorized("Invalid refresh token")

            if _as_utc(db_refresh_token.expires_at) < datetime.now(UTC):
                raise _unauthorized("Refresh token has expired")

            user = await session.get(User, db_refresh_token.user_id)
            if not user:
                raise _unauthorized("User not found")
            if not user.is_active:
                raise _unauthorized("Account is disabled")

            access_token_expires = timedelta(
                minutes=settings.access_token_expire_minutes
            )
            access_token = self.token_creator(
                data={"sub": str(user.id), "role": user.role.value},
                expires_delta=access_token_expires,
            )

            new_refresh_token = self.refresh_token_creator.create()
            session.add(
                RefreshToken(
                    token_hash=self.refresh_token_creator.hash(new_refresh_token),
                    user_id=user.id,
                    expires_at=datetime.now(UTC)
                    + timedelta(days=settings.refresh_token_expire_days),
                    revoked=False,
                )
            )
            db_refresh_token.revoked = True

            await session.commit()

            return RefreshTokenResponse(
                access_token=access_token,
                refresh_token=new_refresh_token,
                token_type="bearer",
                expires_in=int(access_token_expires.total_seconds()),
            )
