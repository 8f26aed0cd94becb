"""Use case for listing tags with pagination and filtering."""

from sqlalchemy import func, select

from pipo.core.errors import ForbiddenError
from pipo.core.schemas import AuthenticatedUser, UserRole
from pipo.db.session import SessionFactory
from pipo.features.tags.dtos import ListTagsRequest, ListTagsResponse
from pipo.features.tags.models import PetTag
from pipo.features.tags.usecases.tag_queries import tag_summaries_query, to_tag_summary


class ListTagsUseCaseImpl:
    """Implementation of the list tags use case."""

    def __init__(self, get_db_session: SessionFactory):
        """Initialize the use case with dependencies.

        Args:
            get_db_session: Function to get database session
        """
        self.get_db_session = get_db_session

    async def execute(
        self, request: ListTagsRequest, admin_user: AuthenticatedUser
    ) -> ListTagsResponse:
        """List tags newest first with their linked pet summary.

        Args:
            request: Status filter and pagination parameters
            admin_user: The authenticated admin performing the action

        Returns:
            Response with the requested page and pagination metadata
        """
        if admin_user.role != UserRole.ADMIN:
            raise ForbiddenError("Unauthorized")

        status = request.filter.to_status()
        offset = (request.page - 1) * request.page_size

        async with self.get_db_session() as session:
            query = tag_summaries_query(status).limit(request.page_size).offset(offset)
            result = await session.execute(query)
            tags = [to_tag_summary(row) for row in result.all()]

            count_query = select(func.count()).select_from(PetTag)
            if status is not None:
                count_query = count_query.where(PetTag.status == status)
            count_result = await session.execute(count_query)
            total = count_result.scalar() or 0

        total_pages = (total + request.page_size - 1) // request.page_size

        return ListTagsResponse(
            tags=tags,
            total=total,
            page=request.page,
            page_size=request.page_size,
            total_pages=total_pages,
        )
