"""Use case for an owner uploading a pet photo."""

import logging
from typing import Protocol
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from pipo.core.errors import (
    PipoError,
    StorageError,
    UnauthenticatedError,
    ValidationError,
)
from pipo.core.schemas import AuthenticatedUser
from pipo.db.session import SessionFactory
from pipo.features.pets.dtos import PhotoResponse
from pipo.features.pets.usecases.pet_access import load_owned_pet

logger = logging.getLogger(__name__)


class PhotoStorage(Protocol):
    """Protocol for photo storage backends."""

    def accepts(self, content_type: str | None) -> bool: ...

    async def save(self, pet_id: UUID, content_type: str, content: bytes) -> str: ...

    async def delete(self, url: str) -> None: ...


class UploadPhotoUseCaseImpl:
    """Implementation of the upload photo use case."""

    def __init__(
        self,
        get_db_session: SessionFactory,
        storage: PhotoStorage,
        max_bytes: int,
    ):
        """Initialize the use case with dependencies.

        Args:
            get_db_session: Function to get database session
            storage: Where photo files are written
            max_bytes: Largest accepted photo
        """
        self.get_db_session = get_db_session
        self.storage = storage
        self.max_bytes = max_bytes

    async def execute(
        self,
        pet_id: UUID,
        content_type: str | None,
        content: bytes | None,
        requester: AuthenticatedUser | None,
    ) -> PhotoResponse:
        """Store a new photo for the pet and point the profile at it.

        A previous photo stored by us is removed once the new URL is committed.

        Raises:
            UnauthenticatedError: If nobody is signed in
            PetNotFoundError: If the pet does not exist
            ForbiddenError: If the requester is not the owner
            ValidationError: If the file is missing, of the wrong type or too large
            StorageError: If the database call fails
        """
        if requester is None:
            raise UnauthenticatedError()

        saved: str | None = None
        async with self.get_db_session() as session:
            try:
                pet = await load_owned_pet(session, pet_id, requester)

                if not content:
                    raise ValidationError("No file uploaded")
                if not self.storage.accepts(content_type):
                    raise ValidationError(
                        "Invalid file type. Only JPEG, PNG, WebP, and GIF are allowed."
                    )
                if len(content) > self.max_bytes:
                    raise ValidationError(
                        f"File too large. Maximum size is {self.max_bytes // (1024 * 1024)}MB."
                    )

                previous = pet.photo_url
                saved = await self.storage.save(pet.id, content_type, content)
                pet.photo_url = saved
                await session.commit()
            except PipoError:
                await session.rollback()
                raise
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Failed to save photo for pet %s", pet_id)
                if saved:
                    # Nothing points at the new file once the commit failed
                    await self.storage.delete(saved)
                raise StorageError("Failed to upload photo") from e

        if previous:
            await self.storage.delete(previous)

        return PhotoResponse(photo_url=pet.photo_url)
