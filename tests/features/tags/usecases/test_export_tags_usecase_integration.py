"""Integration tests for the ExportTagsUseCase."""

import csv
import io
import zipfile

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from pipo.core.errors import ForbiddenError
from pipo.core.schemas import AuthenticatedUser
from pipo.features.tags.dtos import ExportFormat, TagFilter
from pipo.features.tags.usecases import ExportTagsUseCaseImpl

BASE_URL = "https://pipo.example.com"


@pytest.mark.asyncio
class TestExportTagsUseCase:
    """Test suite for the ExportTagsUseCase."""

    async def test_csv_export_of_all_tags(
        self,
        db_session: AsyncSession,
        admin: AuthenticatedUser,
        tutor: AuthenticatedUser,
        create_tags,
        register_pet,
    ):
        """CSV lists every tag with its URL and linked pet."""
        # Arrange
        await create_tags("00001", "00002")
        await register_pet("00001", tutor, name="Pipoca", contact_name="Ana Souza")
        use_case = ExportTagsUseCaseImpl(
            get_db_session=lambda: db_session, base_url=BASE_URL
        )

        # Act
        result = await use_case.execute(ExportFormat.TABULAR, TagFilter.ALL, admin)

        # Assert
        assert result.media_type == "text/csv"
        assert result.filename.startswith("pipo-tags-all-")
        assert result.filename.endswith(".csv")

        rows = list(csv.reader(io.StringIO(result.content.decode("utf-8"))))
        assert len(rows) == 3
        by_code = {row[0]: row for row in rows[1:]}
        assert by_code["00001"][1] == "BOUND"
        assert by_code["00001"][2] == f"{BASE_URL}/pet/00001"
        assert by_code["00001"][5:] == ["Pipoca", "Ana Souza"]
        assert by_code["00002"][1] == "UNBOUND"

    async def test_zip_export_of_unbound_tags(
        self,
        db_session: AsyncSession,
        admin: AuthenticatedUser,
        tutor: AuthenticatedUser,
        create_tags,
        register_pet,
    ):
        """The archive holds only tags matching the filter."""
        # Arrange
        await create_tags("00001", "00002", "00003")
        await register_pet("00002", tutor)
        use_case = ExportTagsUseCaseImpl(
            get_db_session=lambda: db_session, base_url=BASE_URL
        )

        # Act
        result = await use_case.execute(ExportFormat.ARCHIVE, TagFilter.UNBOUND, admin)

        # Assert
        assert result.media_type == "application/zip"
        assert result.filename.endswith(".zip")
        with zipfile.ZipFile(io.BytesIO(result.content)) as archive:
            assert set(archive.namelist()) == {"00001.png", "00003.png", "manifest.csv"}

    async def test_tutor_cannot_export(
        self, db_session: AsyncSession, tutor: AuthenticatedUser
    ):
        use_case = ExportTagsUseCaseImpl(
            get_db_session=lambda: db_session, base_url=BASE_URL
        )

        with pytest.raises(ForbiddenError):
            await use_case.execute(ExportFormat.TABULAR, TagFilter.ALL, tutor)
