"""Use case for deleting a tag."""

import logging
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from pipo.core.errors import ForbiddenError, StorageError, TagNotFoundError
from pipo.core.schemas import AuthenticatedUser, UserRole
from pipo.db.session import SessionFactory
from pipo.features.pets.models import PetProfile
from pipo.features.tags.dtos import DeleteTagResponse
from pipo.features.tags.models import PetTag

logger = logging.getLogger(__name__)


class DeleteTagUseCaseImpl:
    """Implementation of the delete tag use case."""

    def __init__(self, get_db_session: SessionFactory):
        """Initialize the use case with dependencies.

        Args:
            get_db_session: Function to get database session
        """
        self.get_db_session = get_db_session

    async def execute(
        self, tag_id: UUID, admin_user: AuthenticatedUser
    ) -> DeleteTagResponse:
        """Delete a tag together with the pet registered on it.

        Args:
            tag_id: The ID of the tag to delete
            admin_user: The authenticated admin performing the action

        Raises:
            ForbiddenError: If the caller is not an admin
            TagNotFoundError: If no tag has this id
            StorageError: If the database call fails
        """
        if admin_user.role != UserRole.ADMIN:
            raise ForbiddenError("Unauthorized")

        async with self.get_db_session() as session:
            try:
                result = await session.execute(select(PetTag).filter_by(id=tag_id))
                tag = result.scalar_one_or_none()

                if tag is None:
                    raise TagNotFoundError("Pet tag not found")

                code = tag.code
                await session.execute(
                    delete(PetProfile).where(PetProfile.tag_id == tag.id)
                )
                await session.delete(tag)
                await session.commit()
            except TagNotFoundError:
                await session.rollback()
                raise
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Failed to delete tag %s", tag_id)
                raise StorageError("Failed to delete tag") from e

        logger.info("Deleted tag %s", code)
        return DeleteTagResponse(message="Pet tag deleted", tag_id=str(tag_id))
