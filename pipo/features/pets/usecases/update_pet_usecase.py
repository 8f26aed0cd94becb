"""Use case for an owner editing their pet profile."""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from pipo.core.errors import PipoError, StorageError, ValidationError
from pipo.core.schemas import AuthenticatedUser
from pipo.db.session import SessionFactory
from pipo.features.pets.dtos import PetProfileResponse
from pipo.features.pets.models import (
    BREED_MAX_LENGTH,
    CONTACT_NAME_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    SEX_MAX_LENGTH,
    SPECIES_MAX_LENGTH,
)
from pipo.features.pets.patch import PetPatch
from pipo.features.pets.usecases.pet_access import load_owned_pet
from pipo.features.pets.usecases.pet_mappers import to_pet_profile
from pipo.features.pets.usecases.upload_photo_usecase import PhotoStorage

logger = logging.getLogger(__name__)

# Contact fields a finder relies on; they can be changed but never emptied.
REQUIRED_FIELDS = ("contact_name", "phone", "contact_channel")

MAX_LENGTHS = {
    "name": NAME_MAX_LENGTH,
    "species": SPECIES_MAX_LENGTH,
    "breed": BREED_MAX_LENGTH,
    "sex": SEX_MAX_LENGTH,
    "contact_name": CONTACT_NAME_MAX_LENGTH,
    "phone": PHONE_MAX_LENGTH,
    "secondary_phone": PHONE_MAX_LENGTH,
}


def _validated_changes(patch: PetPatch) -> dict:
    changes = patch.changes()
    for field in REQUIRED_FIELDS:
        if field not in changes:
            continue
        value = changes[field]
        if isinstance(value, str):
            value = value.strip()
            changes[field] = value
        if value is None or value == "":
            raise ValidationError(f"{field} cannot be empty")
    for field, limit in MAX_LENGTHS.items():
        value = changes.get(field)
        if isinstance(value, str) and len(value) > limit:
            raise ValidationError(f"{field} must be at most {limit} characters")
    return changes


class UpdatePetUseCaseImpl:
    """Implementation of the update pet use case."""

    def __init__(self, get_db_session: SessionFactory, storage: PhotoStorage):
        """Initialize the use case with dependencies.

        Args:
            get_db_session: Function to get database session
            storage: Where photo files live, for removing the current photo
        """
        self.get_db_session = get_db_session
        self.storage = storage

    async def execute(
        self,
        pet_id: UUID,
        patch: PetPatch,
        requester: AuthenticatedUser | None,
    ) -> PetProfileResponse:
        """Apply ``patch`` to the pet if ``requester`` owns it.

        Args:
            pet_id: The pet to update
            patch: Fields to set or clear; unset fields are left alone
            requester: The signed-in account

        Returns:
            The updated pet profile

        Raises:
            UnauthenticatedError: If nobody is signed in
            PetNotFoundError: If the pet does not exist
            ForbiddenError: If the requester is not the owner
            ValidationError: If a required contact field would become empty
            StorageError: If the database call fails
        """
        changes = _validated_changes(patch)
        removed_photo: str | None = None

        async with self.get_db_session() as session:
            try:
                pet = await load_owned_pet(session, pet_id, requester)

                for field, value in changes.items():
                    setattr(pet, field, value)
                if patch.remove_photo:
                    removed_photo = pet.photo_url
                    pet.photo_url = None

                await session.commit()
            except PipoError:
                await session.rollback()
                raise
            except SQLAlchemyError as e:
                await session.rollback()
                logger.exception("Failed to update pet %s", pet_id)
                raise StorageError("Failed to update pet") from e

        if removed_photo:
            await self.storage.delete(removed_photo)

        return to_pet_profile(pet, pet.tag.code)
