"""Use case for a tutor opening one of their pets."""

from uuid import UUID

from pipo.core.schemas import AuthenticatedUser
from pipo.db.session import SessionFactory
from pipo.features.pets.dtos import PetProfileResponse
from pipo.features.pets.usecases.pet_access import load_owned_pet
from pipo.features.pets.usecases.pet_mappers import to_pet_profile


class GetMyPetUseCaseImpl:
    """Implementation of the get my pet use case."""

    def __init__(self, get_db_session: SessionFactory):
        self.get_db_session = get_db_session

    async def execute(
        self, pet_id: UUID, requester: AuthenticatedUser | None
    ) -> PetProfileResponse:
        """The full profile of ``pet_id`` if ``requester`` owns it."""
        async with self.get_db_session() as session:
            pet = await load_owned_pet(session, pet_id, requester)

        return to_pet_profile(pet, pet.tag.code)
