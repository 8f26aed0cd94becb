"""Signup route handler."""

from typing import Protocol

from fastapi import APIRouter, Depends, HTTPException, status

from pipo.core.authentication import pwd_context
from pipo.db.session import SessionFactory, get_session_factory
from pipo.features.auth.dtos import SignupRequest, SignupResponse
from pipo.features.auth.usecases.signup_tutor_usecase import (
    EmailAlreadyExistsError,
    SignupFailedError,
    SignupTutorUseCaseImpl,
    ValidationError,
)


class PasswordHasherImpl:
    """Wrapper for password hashing to match protocol."""

    def hash(self, secret: str | bytes, **kwargs) -> str:
        """Hash a password or secret."""
        return pwd_context.hash(secret, **kwargs)


async def get_signup_tutor_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
):
    """Dependency injection for the signup tutor use case."""
    return SignupTutorUseCaseImpl(
        password_hasher=PasswordHasherImpl(),
        get_db_session=get_db_session,
    )


class SignupTutorUseCase(Protocol):
    """Protocol for the signup tutor use case."""

    async def execute(self, request: SignupRequest) -> SignupResponse:
        """Create a new tutor account."""
        ...


router = APIRouter()


@router.post(
    "/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED
)
async def signup_tutor(
    request: SignupRequest,
    use_case: SignupTutorUseCase = Depends(get_signup_tutor_use_case),
) -> SignupResponse:
    """Create a tutor account. Tutors register pets by activating tags."""
    try:
        return await use_case.execute(request)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except EmailAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except SignupFailedError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
