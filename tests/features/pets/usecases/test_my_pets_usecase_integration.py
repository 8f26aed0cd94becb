"""Integration tests for the tutor-side read use cases."""

import uuid

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from pipo.core.errors import ForbiddenError, PetNotFoundError, UnauthenticatedError
from pipo.core.schemas import AuthenticatedUser
from pipo.features.pets.usecases import GetMyPetUseCaseImpl, ListMyPetsUseCaseImpl


@pytest.mark.asyncio
class TestListMyPetsUseCase:
    """Test suite for the ListMyPetsUseCase."""

    async def test_lists_only_own_pets_newest_first(
        self,
        db_session: AsyncSession,
        tutor: AuthenticatedUser,
        other_tutor: AuthenticatedUser,
        create_tags,
        register_pet,
    ):
        # Arrange
        await create_tags("00001", "00002", "00003")
        await register_pet("00001", tutor, name="First")
        await register_pet("00002", other_tutor, name="Not mine")
        await register_pet("00003", tutor, name="Second")
        use_case = ListMyPetsUseCaseImpl(get_db_session=lambda: db_session)

        # Act
        response = await use_case.execute(tutor)

        # Assert
        assert [pet.name for pet in response.pets] == ["Second", "First"]
        assert [pet.code for pet in response.pets] == ["00003", "00001"]

    async def test_no_pets(self, db_session: AsyncSession, tutor: AuthenticatedUser):
        use_case = ListMyPetsUseCaseImpl(get_db_session=lambda: db_session)

        response = await use_case.execute(tutor)

        assert response.pets == []

    async def test_anonymous_is_rejected(self, db_session: AsyncSession):
        use_case = ListMyPetsUseCaseImpl(get_db_session=lambda: db_session)

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(None)


@pytest.mark.asyncio
class TestGetMyPetUseCase:
    """Test suite for the GetMyPetUseCase."""

    async def test_owner_gets_profile(
        self,
        db_session: AsyncSession,
        tutor: AuthenticatedUser,
        create_tags,
        register_pet,
    ):
        # Arrange
        await create_tags("00007")
        pet = await register_pet("00007", tutor, name="Pipoca", species="Dog")
        use_case = GetMyPetUseCaseImpl(get_db_session=lambda: db_session)

        # Act
        profile = await use_case.execute(uuid.UUID(pet.id), tutor)

        # Assert
        assert profile.id == pet.id
        assert profile.code == "00007"
        assert profile.species == "Dog"
        assert profile.contact_name == "Ana Souza"

    async def test_other_tutor_is_forbidden(
        self,
        db_session: AsyncSession,
        tutor: AuthenticatedUser,
        other_tutor: AuthenticatedUser,
        create_tags,
        register_pet,
    ):
        # Arrange
        await create_tags("00007")
        pet = await register_pet("00007", tutor)
        use_case = GetMyPetUseCaseImpl(get_db_session=lambda: db_session)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await use_case.execute(uuid.UUID(pet.id), other_tutor)

    async def test_unknown_pet(self, db_session: AsyncSession, tutor: AuthenticatedUser):
        use_case = GetMyPetUseCaseImpl(get_db_session=lambda: db_session)

        with pytest.raises(PetNotFoundError):
            await use_case.execute(uuid.uuid4(), tutor)
