"""Integration tests for the ViewPetUseCase."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from pipo.core.errors import SignInRequiredError, TagNotFoundError
from pipo.core.schemas import AuthenticatedUser
from pipo.features.pets.usecases import ViewPetUseCaseImpl
from pipo.features.tags.models import PetTagStatus


@pytest.mark.asyncio
class TestViewPetUseCase:
    """Test suite for the ViewPetUseCase."""

    async def test_anonymous_finder_sees_profile(
        self,
        db_session: AsyncSession,
        tutor: AuthenticatedUser,
        create_tags,
        register_pet,
    ):
        """Finders need no account; they are never the owner."""
        # Arrange
        await create_tags("00001")
        await register_pet("00001", tutor, name="Pipoca", phone="+5511988887777")
        use_case = ViewPetUseCaseImpl(get_db_session=lambda: db_session)

        # Act
        view = await use_case.execute("00001", None)

        # Assert
        assert view.status == PetTagStatus.BOUND
        assert view.needs_activation is False
        assert view.is_owner is False
        assert view.pet is not None
        assert view.pet.name == "Pipoca"
        assert view.pet.phone == "+5511988887777"

    async def test_owner_is_flagged(
        self,
        db_session: AsyncSession,
        tutor: AuthenticatedUser,
        other_tutor: AuthenticatedUser,
        create_tags,
        register_pet,
    ):
        """Only the owner gets is_owner; the profile is the same for everyone."""
        # Arrange
        await create_tags("00001")
        await register_pet("00001", tutor)
        use_case = ViewPetUseCaseImpl(get_db_session=lambda: db_session)

        # Act
        as_owner = await use_case.execute("00001", tutor)
        as_other = await use_case.execute("00001", other_tutor)

        # Assert
        assert as_owner.is_owner is True
        assert as_other.is_owner is False
        assert as_owner.pet == as_other.pet

    async def test_unbound_tag_asks_anonymous_visitor_to_sign_in(
        self, db_session: AsyncSession, create_tags
    ):
        """The sign-in hint brings the visitor back to the activation page."""
        # Arrange
        await create_tags("00002")
        use_case = ViewPetUseCaseImpl(get_db_session=lambda: db_session)

        # Act & Assert
        with pytest.raises(SignInRequiredError) as excinfo:
            await use_case.execute("00002", None)

        assert excinfo.value.next_path == "/activate/00002"
        assert excinfo.value.status_code == 401

    async def test_unbound_tag_offers_activation_to_signed_in_visitor(
        self, db_session: AsyncSession, tutor: AuthenticatedUser, create_tags
    ):
        # Arrange
        await create_tags("00002")
        use_case = ViewPetUseCaseImpl(get_db_session=lambda: db_session)

        # Act
        view = await use_case.execute("00002", tutor)

        # Assert
        assert view.status == PetTagStatus.UNBOUND
        assert view.needs_activation is True
        assert view.activation_path == "/activate/00002"
        assert view.pet is None
        assert view.is_owner is False

    async def test_unknown_code(self, db_session: AsyncSession):
        use_case = ViewPetUseCaseImpl(get_db_session=lambda: db_session)

        with pytest.raises(TagNotFoundError):
            await use_case.execute("99999", None)
