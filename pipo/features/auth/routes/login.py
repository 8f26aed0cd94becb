"""Login route handler."""

from typing import Any, Protocol

from fastapi import APIRouter, Cookie, Depends, HTTPException, Response, status
from sqlalchemy import select

from pipo.core.authentication import (
    create_access_token,
    create_refresh_token,
    get_current_user,
    hash_refresh_token,
    verify_password,
    verify_refresh_token,
)
from pipo.core.schemas import AuthenticatedUser
from pipo.core.settings import get_settings
from pipo.db.session import SessionFactory, get_session_factory
from pipo.features.auth.dtos import (
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    RefreshTokenResponse,
)
from pipo.features.auth.models import RefreshToken, User
from pipo.features.auth.usecases.login.login_usecase import LoginUseCaseImpl
from pipo.features.auth.usecases.login.refresh_token_usecase import (
    RefreshTokenUseCaseImpl,
)

REFRESH_COOKIE_PATH = "/api/v1/auth"


class PasswordVerifierImpl:
    """Wrapper for password verification to match protocol."""

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return verify_password(plain_password, hashed_password)


class TokenCreatorImpl:
    """Wrapper for token creation to match protocol."""

    def __call__(self, data: dict[str, Any], expires_delta=None) -> str:
        """Create an access token."""
        return create_access_token(data, expires_delta)


class RefreshTokenCreatorImpl:
    """Wrapper for refresh token creation to match protocol."""

    def create(self) -> str:
        """Create a refresh token."""
        return create_refresh_token()

    def hash(self, token: str) -> str:
        """Hash a refresh token."""
        return hash_refresh_token(token)


class RefreshTokenVerifierImpl:
    """Wrapper for refresh token verification to match protocol."""

    def verify(self, plain_token: str, hashed_token: str) -> bool:
        """Verify a refresh token against its hash."""
        return verify_refresh_token(plain_token, hashed_token)


class LoginUseCase(Protocol):
    """Protocol for the login use case."""

    async def execute(self, email: str, password: str) -> LoginResponse:
        """Authenticate user and return token."""
        ...


class RefreshTokenUseCase(Protocol):
    """Protocol for the refresh token use case."""

    async def execute(self, refresh_token: str) -> RefreshTokenResponse:
        """Refresh access token using refresh token."""
        ...


async def get_login_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> LoginUseCase:
    """Dependency injection for the login use case."""
    return LoginUseCaseImpl(
        password_verifier=PasswordVerifierImpl(),
        token_creator=TokenCreatorImpl(),
        refresh_token_creator=RefreshTokenCreatorImpl(),
        get_db_session=get_db_session,
    )


async def get_refresh_token_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> RefreshTokenUseCase:
    """Dependency injection for the refresh token use case."""
    return RefreshTokenUseCaseImpl(
        token_creator=TokenCreatorImpl(),
        refresh_token_creator=RefreshTokenCreatorImpl(),
        refresh_token_verifier=RefreshTokenVerifierImpl(),
        get_db_session=get_db_session,
    )


def set_auth_cookies(
    response: Response, access_token: str, refresh_token: str, expires_in: int
) -> None:
    """Set both tokens as HTTP-only cookies."""
    settings = get_settings()
    is_production = not settings.debug

    response.set_cookie(
        key="access_token",
        value=access_token,
        httponly=True,
        secure=is_production,
        samesite="lax",
        max_age=expires_in,
        path="/",
    )
    response.set_cookie(
        key="refresh_token",
        value=refresh_token,
        httponly=True,
        secure=is_production,
        samesite="lax",
        max_age=60 * 60 * 24 * settings.refresh_token_expire_days,
        path=REFRESH_COOKIE_PATH,  # Only sent to auth endpoints
    )


router = APIRouter()


@router.post("/login")
async def login_for_access_token(
    response: Response,
    login_data: LoginRequest,
    use_case: LoginUseCase = Depends(get_login_use_case),
) -> dict[str, str]:
    """Authenticate user and set tokens in HTTP-only cookies."""
    result = await use_case.execute(login_data.email, login_data.password)
    set_auth_cookies(
        response, result.access_token, result.refresh_token, result.expires_in
    )
    return {"message": "Login successful", "token_type": "bearer"}


@router.post("/refresh")
async def refresh_access_token(
    response: Response,
    refresh_token: str | None = Cookie(None),
    use_case: RefreshTokenUseCase = Depends(get_refresh_token_use_case),
) -> dict[str, str]:
    """Refresh access token using refresh token from cookie."""
    if not refresh_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Refresh token not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    result = await use_case.execute(refresh_token)
    set_auth_cookies(
        response, result.access_token, result.refresh_token, result.expires_in
    )
    return {"message": "Token refreshed successfully", "token_type": "bearer"}


@router.post("/logout")
async def logout(
    response: Response,
    refresh_token: str | None = Cookie(None),
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> dict[str, str]:
    """Logout user and clear authentication cookies."""
    if refresh_token:
        async with get_db_session() as session:
            result = await session.execute(
                select(RefreshToken).where(RefreshToken.revoked.is_(False))
            )
            for token in result.scalars().all():
                if verify_refresh_token(refresh_token, token.token_hash):
                    token.revoked = True
                    await session.commit()
                    break

    response.delete_cookie(key="access_token", path="/")
    response.delete_cookie(key="refresh_token", path=REFRESH_COOKIE_PATH)

    return {"message": "Logged out successfully"}


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user_info(
    current_user: AuthenticatedUser = Depends(get_current_user),
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> CurrentUserResponse:
    """Get current authenticated user information."""
    async with get_db_session() as session:
        user = await session.get(User, current_user.user_id)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found",
            )

        return CurrentUserResponse(
            id=str(user.id),
            email=user.email,
            name=user.name,
            role=user.role.value,
        )
