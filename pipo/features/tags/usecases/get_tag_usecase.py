"""Use case for getting a single tag by ID."""

from uuid import UUID

from pipo.core.errors import ForbiddenError, TagNotFoundError
from pipo.core.schemas import AuthenticatedUser, UserRole
from pipo.db.session import SessionFactory
from pipo.features.tags.dtos import TagSummary
from pipo.features.tags.models import PetTag
from pipo.features.tags.usecases.tag_queries import tag_summaries_query, to_tag_summary


class GetTagUseCaseImpl:
    """Implementation of the get tag use case."""

    def __init__(self, get_db_session: SessionFactory):
        """Initialize the use case with dependencies.

        Args:
            get_db_session: Function to get database session
        """
        self.get_db_session = get_db_session

    async def execute(self, tag_id: UUID, admin_user: AuthenticatedUser) -> TagSummary:
        """Get a tag and its linked pet summary.

        Raises:
            ForbiddenError: If the caller is not an admin
            TagNotFoundError: If no tag has this id
        """
        if admin_user.role != UserRole.ADMIN:
            raise ForbiddenError("Unauthorized")

        async with self.get_db_session() as session:
            result = await session.execute(
                tag_summaries_query().where(PetTag.id == tag_id)
            )
            row = result.first()

        if row is None:
            raise TagNotFoundError("Pet tag not found")
        return to_tag_summary(row)
