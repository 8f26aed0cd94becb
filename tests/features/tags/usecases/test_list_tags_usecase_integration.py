"""Integration tests for the ListTagsUseCase."""

import pytest
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from pipo.core.errors import ForbiddenError
from pipo.core.schemas import AuthenticatedUser
from pipo.features.tags.dtos import ListTagsRequest, TagFilter
from pipo.features.tags.models import PetTagStatus
from pipo.features.tags.usecases import GenerateTagsUseCaseImpl, ListTagsUseCaseImpl


@pytest.mark.asyncio
class TestListTagsUseCase:
    """Test suite for the ListTagsUseCase."""

    async def test_list_newest_first_with_pet(
        self,
        db_session: AsyncSession,
        admin: AuthenticatedUser,
        tutor: AuthenticatedUser,
        create_tags,
        register_pet,
    ):
        """Tags come back newest first and bound tags carry their pet."""
        # Arrange
        await create_tags("00001", "00002", "00003")
        await register_pet("00002", tutor, name="Pipoca", contact_name="Ana Souza")
        use_case = ListTagsUseCaseImpl(get_db_session=lambda: db_session)

        # Act
        response = await use_case.execute(ListTagsRequest(), admin)

        # Assert
        assert response.total == 3
        assert [tag.code for tag in response.tags] == ["00003", "00002", "00001"]
        bound = response.tags[1]
        assert bound.status == PetTagStatus.BOUND
        assert bound.pet is not None
        assert bound.pet.name == "Pipoca"
        assert bound.pet.contact_name == "Ana Souza"
        assert response.tags[0].pet is None

    async def test_filter_by_status(
        self,
        db_session: AsyncSession,
        admin: AuthenticatedUser,
        tutor: AuthenticatedUser,
        create_tags,
        register_pet,
    ):
        """The filter narrows both the page and the total."""
        # Arrange
        await create_tags("00001", "00002", "00003")
        await register_pet("00001", tutor)
        use_case = ListTagsUseCaseImpl(get_db_session=lambda: db_session)

        # Act
        bound = await use_case.execute(ListTagsRequest(filter=TagFilter.BOUND), admin)
        unbound = await use_case.execute(
            ListTagsRequest(filter=TagFilter.UNBOUND), admin
        )

        # Assert
        assert [tag.code for tag in bound.tags] == ["00001"]
        assert bound.total == 1
        assert [tag.code for tag in unbound.tags] == ["00003", "00002"]
        assert unbound.total == 2

    async def test_pagination(self, db_session: AsyncSession, admin: AuthenticatedUser):
        """Page n starts at (n - 1) * page_size."""
        # Arrange
        await GenerateTagsUseCaseImpl(get_db_session=lambda: db_session).execute(
            25, admin
        )
        use_case = ListTagsUseCaseImpl(get_db_session=lambda: db_session)

        # Act
        first = await use_case.execute(ListTagsRequest(page=1, page_size=10), admin)
        third = await use_case.execute(ListTagsRequest(page=3, page_size=10), admin)
        beyond = await use_case.execute(ListTagsRequest(page=4, page_size=10), admin)

        # Assert
        assert first.total == 25
        assert first.total_pages == 3
        assert [tag.code for tag in first.tags] == [
            f"{n:05d}" for n in range(25, 15, -1)
        ]
        assert [tag.code for tag in third.tags] == [f"{n:05d}" for n in range(5, 0, -1)]
        assert beyond.tags == []

    @pytest.mark.parametrize(
        "params", [{"page": 0}, {"page_size": 0}, {"page_size": 101}]
    )
    async def test_out_of_range_paging_is_rejected(self, params: dict):
        """Page and page size are validated, never clamped."""
        with pytest.raises(ValidationError):
            ListTagsRequest(**params)

    async def test_tutor_cannot_list(
        self, db_session: AsyncSession, tutor: AuthenticatedUser
    ):
        """Only admins see the tag inventory."""
        use_case = ListTagsUseCaseImpl(get_db_session=lambda: db_session)

        with pytest.raises(ForbiddenError):
            await use_case.execute(ListTagsRequest(), tutor)
