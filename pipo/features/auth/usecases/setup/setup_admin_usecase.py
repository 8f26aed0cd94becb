"""Use case for setting up the first admin."""

import logging
from typing import Protocol
from uuid import uuid4

from fastapi import HTTPException, status
from sqlalchemy import func, select

from pipo.core.schemas import UserRole
from pipo.db.session import SessionFactory
from pipo.features.auth.dtos import SetupAdminRequest, SetupAdminResponse
from pipo.features.auth.models import User

logger = logging.getLogger(__name__)


class PasswordHasher(Protocol):
    """Protocol for password hashing operations."""

    def hash(self, secret: str | bytes, **kwargs) -> str:
        """Hash a password or secret."""
        ...


class SetupAdminUseCaseImpl:
    """Implementation of the setup admin use case."""

    def __init__(
        self,
        password_hasher: PasswordHasher,
        get_db_session: SessionFactory,
    ):
        """Initialize the use case with dependencies.

        Args:
            password_hasher: Service for hashing passwords
            get_db_session: Function to get database session
        """
        self.password_hasher = password_hasher
        self.get_db_session = get_db_session

    async def execute(self, request: SetupAdminRequest) -> SetupAdminResponse:
        """Create the first admin user. Only allowed if no admin exists.

        Args:
            request: The setup request containing admin details

        Returns:
            Response with success message and email

        Raises:
            HTTPException: 403 once setup is done, 400 if the email is taken
        """
        async with self.get_db_session() as session:
            result = await session.execute(
                select(func.count()).select_from(User).where(User.role == UserRole.ADMIN)
            )
            if result.scalar_one() > 0:
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail="Setup has already been completed.",
                )

            email_check = await session.execute(
                select(User).where(User.email == request.email)
            )
            if email_check.scalar_one_or_none():
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="User with this email already exists.",
                )

            admin = User(
                id=uuid4(),
                email=request.email,
                name=request.name,
                hashed_password=self.password_hasher.hash(request.password),
                role=UserRole.ADMIN,
                is_active=True,
            )
            session.add(admin)
            await session.commit()

            logger.info("Initial admin %s created", admin.email)
            return SetupAdminResponse(
                message="Admin created successfully.",
                email=admin.email,
            )
