"""Change password route handler."""

from typing import Protocol

from fastapi import APIRouter, Depends, HTTPException, status

from pipo.core.authentication import get_current_user, pwd_context
from pipo.core.schemas import AuthenticatedUser
from pipo.db.session import SessionFactory, get_session_factory
from pipo.features.auth.dtos import ChangePasswordRequest, ChangePasswordResponse
from pipo.features.auth.usecases.change_password_usecase import (
    AccountNotFoundError,
    ChangePasswordFailedError,
    ChangePasswordUseCaseImpl,
    InvalidCurrentPasswordError,
    PasswordTooShortError,
)


class ChangePasswordUseCase(Protocol):
    """Protocol for the change password use case."""

    async def execute(
        self, request: ChangePasswordRequest, requester: AuthenticatedUser
    ) -> ChangePasswordResponse:
        """Change the requester's password."""
        ...


async def get_change_password_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> ChangePasswordUseCase:
    """Dependency injection for the change password use case."""
    return ChangePasswordUseCaseImpl(
        password_context=pwd_context,
        get_db_session=get_db_session,
    )


router = APIRouter()


@router.post("/change-password", response_model=ChangePasswordResponse)
async def change_password(
    request: ChangePasswordRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    use_case: ChangePasswordUseCase = Depends(get_change_password_use_case),
) -> ChangePasswordResponse:
    """Change the signed-in user's password after checking the current one."""
    try:
        return await use_case.execute(request, current_user)
    except (PasswordTooShortError, InvalidCurrentPasswordError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except AccountNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except ChangePasswordFailedError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
