"""Ownership checks shared by the tutor-side pet use cases."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pipo.core.errors import ForbiddenError, PetNotFoundError, UnauthenticatedError
from pipo.core.schemas import AuthenticatedUser
from pipo.features.pets.models import PetProfile


async def load_owned_pet(
    session: AsyncSession, pet_id: UUID, requester: AuthenticatedUser | None
) -> PetProfile:
    """Load ``pet_id`` and make sure ``requester`` owns it.

    Raises:
        UnauthenticatedError: If nobody is signed in
        PetNotFoundError: If the pet does not exist
        ForbiddenError: If the pet belongs to another account
    """
    if requester is None:
        raise UnauthenticatedError()

    result = await session.execute(select(PetProfile).filter_by(id=pet_id))
    pet = result.scalar_one_or_none()

    if pet is None:
        raise PetNotFoundError()
    if pet.owner_id != requester.user_id:
        raise ForbiddenError("This pet belongs to another tutor")
    return pet
