"""Use case for the admin dashboard counters."""

from sqlalchemy import func, select

from pipo.core.errors import ForbiddenError
from pipo.core.schemas import AuthenticatedUser, UserRole
from pipo.db.session import SessionFactory
from pipo.features.pets.models import PetProfile
from pipo.features.tags.dtos import TagStatsResponse
from pipo.features.tags.models import PetTag, PetTagStatus


class GetTagStatsUseCaseImpl:
    """Implementation of the tag stats use case."""

    def __init__(self, get_db_session: SessionFactory):
        self.get_db_session = get_db_session

    async def execute(self, admin_user: AuthenticatedUser) -> TagStatsResponse:
        """Count tags by status and registered pets."""
        if admin_user.role != UserRole.ADMIN:
            raise ForbiddenError("Unauthorized")

        async with self.get_db_session() as session:
            result = await session.execute(
                select(PetTag.status, func.count()).group_by(PetTag.status)
            )
            by_status = {row[0]: row[1] for row in result.all()}

            pets_result = await session.execute(
                select(func.count()).select_from(PetProfile)
            )
            total_pets = pets_result.scalar() or 0

        unbound = by_status.get(PetTagStatus.UNBOUND, 0)
        bound = by_status.get(PetTagStatus.BOUND, 0)
        return TagStatsResponse(
            total_tags=unbound + bound,
            unbound_tags=unbound,
            bound_tags=bound,
            total_pets=total_pets,
        )
