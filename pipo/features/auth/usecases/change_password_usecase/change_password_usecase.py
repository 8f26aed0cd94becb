"""Use case for a signed-in user changing their password."""

import logging
from typing import Protocol

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError

from pipo.core.schemas import AuthenticatedUser
from pipo.db.session import SessionFactory
from pipo.features.auth.dtos import ChangePasswordRequest, ChangePasswordResponse
from pipo.features.auth.models import RefreshToken, User
from pipo.features.auth.usecases.change_password_usecase.errors import (
    AccountNotFoundError,
    ChangePasswordFailedError,
    InvalidCurrentPasswordError,
)
from pipo.features.auth.usecases.signup_tutor_usecase.errors import (
    PasswordTooShortError,
)
from pipo.features.auth.usecases.signup_tutor_usecase.signup_tutor_usecase import (
    MIN_PASSWORD_LENGTH,
)

logger = logging.getLogger(__name__)


class PasswordContext(Protocol):
    """Protocol for hashing and checking passwords."""

    def hash(self, secret: str | bytes, **kwargs) -> str:
        """Hash a password."""
        ...

    def verify(self, secret: str | bytes, hash: str, **kwargs) -> bool:
        """Verify a password against its hash."""
        ...


class ChangePasswordUseCaseImpl:
    """Implementation of the change password use case."""

    def __init__(self, password_context: PasswordContext, get_db_session: SessionFactory):
        """Initialize the use case with dependencies.

        Args:
            password_context: Service for hashing and verifying passwords
            get_db_session: Function to get database session
        """
        self.password_context = password_context
        self.get_db_session = get_db_session

    async def execute(
        self, request: ChangePasswordRequest, requester: AuthenticatedUser
    ) -> ChangePasswordResponse:
        """Replace the requester's password.

        Outstanding refresh tokens are revoked, so other sessions have to
        sign in again once their access token expires.

        Args:
            request: The current and the new password
            requester: The signed-in account

        Returns:
            Response with a success message

        Raises:
            PasswordTooShortError: If the new password is too short
            AccountNotFoundError: If the account is gone or disabled
            InvalidCurrentPasswordError: If the current password is wrong
            ChangePasswordFailedError: If the database call fails
        """
        if len(request.new_password) < MIN_PASSWORD_LENGTH:
            raise PasswordTooShortError()

        async with self.get_db_session() as session:
            user = await session.get(User, requester.user_id)
            if user is None or not user.is_active:
                raise AccountNotFoundError()

            if not self.password_context.verify(
                request.current_password, user.hashed_password
            ):
                logger.info("Wrong current password for user %s", user.id)
                raise InvalidCurrentPasswordError()

            try:
                user.hashed_password = self.password_context.hash(request.new_password)
                await session.execute(
                    update(RefreshToken)
                    .where(RefreshToken.user_id == user.id)
                    .values(revoked=True)
                )
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Password change failed for user %s", user.id)
                raise ChangePasswordFailedError() from e

        logger.info("Password changed for user %s", requester.user_id)
        return ChangePasswordResponse(message="Password changed successfully")
