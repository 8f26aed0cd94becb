"""Use case for provisioning a batch of new tags."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from pipo.core.errors import (
    ForbiddenError,
    StorageError,
    TagAllocationConflictError,
)
from pipo.core.schemas import AuthenticatedUser, UserRole
from pipo.db.session import SessionFactory
from pipo.features.tags.allocator import allocate_batch, validate_batch_count
from pipo.features.tags.dtos import GenerateTagsResponse
from pipo.features.tags.models import PetTag, PetTagStatus
from pipo.features.tags.usecases.tag_queries import summarize_tag

logger = logging.getLogger(__name__)


class GenerateTagsUseCaseImpl:
    """Implementation of the generate tags use case."""

    def __init__(self, get_db_session: SessionFactory):
        """Initialize the use case with dependencies.

        Args:
            get_db_session: Function to get database session
        """
        self.get_db_session = get_db_session

    async def execute(
        self, count: int, admin_user: AuthenticatedUser
    ) -> GenerateTagsResponse:
        """Allocate ``count`` codes after the current highest one and store them.

        Args:
            count: Number of tags to create (1..100)
            admin_user: The authenticated admin performing the action

        Returns:
            Response with the new tags in allocation order

        Raises:
            ForbiddenError: If the caller is not an admin
            InvalidCountError: If count is out of range, before touching storage
            FormatError: If the stored highest code is malformed
            TagAllocationConflictError: If a concurrent batch claimed the same codes
            StorageError: If the database call fails
        """
        if admin_user.role != UserRole.ADMIN:
            raise ForbiddenError("Unauthorized")

        validate_batch_count(count)

        async with self.get_db_session() as session:
            try:
                result = await session.execute(select(func.max(PetTag.code)))
                last_code = result.scalar_one_or_none()

                codes = allocate_batch(last_code, count)
                tags = [PetTag(code=code, status=PetTagStatus.UNBOUND) for code in codes]
                session.add_all(tags)
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                logger.warning("Tag code collision while generating %d tags", count)
                raise TagAllocationConflictError() from e
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Failed to generate tags")
                raise StorageError("Failed to generate tags") from e

        logger.info("Generated tags %s..%s", codes[0], codes[-1])
        return GenerateTagsResponse(
            message=f"Generated {count} tag(s)",
            tags=[summarize_tag(tag) for tag in tags],
        )
