"""Use case for an owner removing a pet photo."""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from pipo.core.errors import PipoError, StorageError
from pipo.core.schemas import AuthenticatedUser
from pipo.db.session import SessionFactory
from pipo.features.pets.dtos import PhotoResponse
from pipo.features.pets.usecases.pet_access import load_owned_pet
from pipo.features.pets.usecases.upload_photo_usecase import PhotoStorage

logger = logging.getLogger(__name__)


class DeletePhotoUseCaseImpl:
    """Implementation of the delete photo use case."""

    def __init__(self, get_db_session: SessionFactory, storage: PhotoStorage):
        self.get_db_session = get_db_session
        self.storage = storage

    async def execute(
        self, pet_id: UUID, requester: AuthenticatedUser | None
    ) -> PhotoResponse:
        """Clear the pet's photo and remove the stored file."""
        async with self.get_db_session() as session:
            try:
                pet = await load_owned_pet(session, pet_id, requester)
                previous = pet.photo_url
                pet.photo_url = None
                await session.commit()
            except PipoError:
                await session.rollback()
                raise
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Failed to remove photo of pet %s", pet_id)
                raise StorageError("Failed to delete photo") from e

        if previous:
            await self.storage.delete(previous)

        return PhotoResponse(photo_url=None)
