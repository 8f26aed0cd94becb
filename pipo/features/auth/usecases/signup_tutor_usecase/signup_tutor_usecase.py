"""Use case for signing up a new tutor account."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from pipo.core.schemas import UserRole
from pipo.db.session import SessionFactory
from pipo.features.auth.dtos import SignupRequest, SignupResponse
from pipo.features.auth.models import User
from pipo.features.auth.usecases.setup.setup_admin_usecase import PasswordHasher
from pipo.features.auth.usecases.signup_tutor_usecase.errors import (
    EmailAlreadyExistsError,
    PasswordTooShortError,
    SignupFailedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


class SignupTutorUseCaseImpl:
    """Implementation of the signup tutor use case."""

    def __init__(self, password_hasher: PasswordHasher, get_db_session: SessionFactory):
        """Initialize the use case with dependencies.

        Args:
            password_hasher: Service for hashing passwords
            get_db_session: Function to get database session
        """
        self.password_hasher = password_hasher
        self.get_db_session = get_db_session

    async def execute(self, request: SignupRequest) -> SignupResponse:
        """Create a tutor account.

        Args:
            request: The signup request containing account details

        Returns:
            Response with success message and the new user id

        Raises:
            ValidationError: If the name is too long
            PasswordTooShortError: If password is too short
            EmailAlreadyExistsError: If the email is already registered
            SignupFailedError: If signup fails for unexpected reasons
        """
        name = request.name.strip() if request.name else None
        if name and len(name) > 255:
            raise ValidationError("Name must be at most 255 characters")

        if len(request.password) < MIN_PASSWORD_LENGTH:
            raise PasswordTooShortError()

        async with self.get_db_session() as session:
            try:
                user = User(
                    email=request.email,
                    name=name or None,
                    hashed_password=self.password_hasher.hash(request.password),
                    role=UserRole.TUTOR,
                )
                session.add(user)
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise EmailAlreadyExistsError() from e
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Signup failed for %s", request.email)
                raise SignupFailedError() from e

        logger.info("Tutor account %s created", user.id)
        return SignupResponse(
            message="Account created successfully",
            user_id=str(user.id),
            email=user.email,
        )
