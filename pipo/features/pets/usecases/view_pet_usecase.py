"""Use case for the public page reached by scanning a tag."""

from sqlalchemy import select

from pipo.core.errors import PetNotFoundError, SignInRequiredError, TagNotFoundError
from pipo.core.schemas import AuthenticatedUser
from pipo.db.session import SessionFactory
from pipo.features.pets.dtos import PetViewResponse
from pipo.features.pets.models import PetProfile
from pipo.features.pets.usecases.pet_mappers import to_public_pet
from pipo.features.tags.models import PetTag, PetTagStatus


def activation_path(code: str) -> str:
    return f"/activate/{code}"


class ViewPetUseCaseImpl:
    """Implementation of the view pet use case."""

    def __init__(self, get_db_session: SessionFactory):
        """Initialize the use case with dependencies.

        Args:
            get_db_session: Function to get database session
        """
        self.get_db_session = get_db_session

    async def execute(
        self, code: str, requester: AuthenticatedUser | None
    ) -> PetViewResponse:
        """Resolve what the visitor of ``/pet/{code}`` should see.

        Args:
            code: The scanned tag code
            requester: The signed-in account, or None for an anonymous finder

        Returns:
            The public profile for bound tags, or an activation hint for
            signed-in visitors of unbound tags

        Raises:
            TagNotFoundError: If no tag has this code
            SignInRequiredError: If the tag is unbound and nobody is signed in
        """
        async with self.get_db_session() as session:
            result = await session.execute(
                select(PetTag, PetProfile)
                .outerjoin(PetProfile, PetProfile.tag_id == PetTag.id)
                .where(PetTag.code == code)
            )
            row = result.first()

        if row is None:
            raise TagNotFoundError()

        tag: PetTag = row.PetTag
        pet: PetProfile | None = row.PetProfile

        if tag.status == PetTagStatus.UNBOUND:
            if requester is None:
                raise SignInRequiredError(next_path=activation_path(code))
            return PetViewResponse(
                code=code,
                status=PetTagStatus.UNBOUND,
                needs_activation=True,
                activation_path=activation_path(code),
            )

        if pet is None:
            raise PetNotFoundError()

        return PetViewResponse(
            code=code,
            status=PetTagStatus.BOUND,
            pet=to_public_pet(pet, code),
            is_owner=requester is not None and requester.user_id == pet.owner_id,
        )
