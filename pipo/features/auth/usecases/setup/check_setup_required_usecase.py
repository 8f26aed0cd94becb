"""Use case for checking if setup is required."""

from sqlalchemy import func, select

from pipo.core.schemas import UserRole
from pipo.db.session import SessionFactory
from pipo.features.auth.dtos import SetupRequiredResponse
from pipo.features.auth.models import User


class CheckSetupRequiredUseCaseImpl:
    """Implementation of the check setup required use case."""

    def __init__(self, get_db_session: SessionFactory):
        """Initialize the use case with dependencies.

        Args:
            get_db_session: Function to get database session
        """
        self.get_db_session = get_db_session

    async def execute(self) -> SetupRequiredResponse:
        """Check if the application requires initial setup (no admin exists).

        Returns:
            Response indicating if setup is required
        """
        async with self.get_db_session() as session:
            result = await session.execute(
                select(func.count()).select_from(User).where(User.role == UserRole.ADMIN)
            )
            count = result.scalar_one()

            return SetupRequiredResponse(setup_required=count == 0)
