"""Use case for a tutor listing their own pets."""

from sqlalchemy import select

from pipo.core.errors import UnauthenticatedError
from pipo.core.schemas import AuthenticatedUser
from pipo.db.session import SessionFactory
from pipo.features.pets.dtos import ListPetsResponse
from pipo.features.pets.models import PetProfile
from pipo.features.pets.usecases.pet_mappers import to_pet_profile


class ListMyPetsUseCaseImpl:
    """Implementation of the list my pets use case."""

    def __init__(self, get_db_session: SessionFactory):
        self.get_db_session = get_db_session

    async def execute(self, requester: AuthenticatedUser | None) -> ListPetsResponse:
        """Pets owned by ``requester``, most recently registered first."""
        if requester is None:
            raise UnauthenticatedError()

        async with self.get_db_session() as session:
            result = await session.execute(
                select(PetProfile)
                .where(PetProfile.owner_id == requester.user_id)
                .order_by(PetProfile.created_at.desc())
            )
            pets = result.scalars().all()

        return ListPetsResponse(pets=[to_pet_profile(pet, pet.tag.code) for pet in pets])
