"""Use case for rendering the QR image of an existing tag."""

from uuid import UUID

from sqlalchemy import select

from pipo.core.errors import TagNotFoundError
from pipo.db.session import SessionFactory
from pipo.features.tags.models import PetTag
from pipo.features.tags.services.tag_renderer import render_tag


class RenderTagImageUseCaseImpl:
    """Implementation of the render tag image use case.

    Images are never stored; they are rendered on demand from the code.
    """

    def __init__(self, get_db_session: SessionFactory, base_url: str):
        self.get_db_session = get_db_session
        self.base_url = base_url

    async def by_code(self, code: str) -> bytes:
        """PNG for the tag with ``code``; unknown codes raise TagNotFoundError."""
        async with self.get_db_session() as session:
            result = await session.execute(select(PetTag.code).where(PetTag.code == code))
            found = result.scalar_one_or_none()

        if found is None:
            raise TagNotFoundError()
        return render_tag(found, self.base_url)

    async def by_id(self, tag_id: UUID) -> tuple[str, bytes]:
        """Code and PNG for the tag with ``tag_id``."""
        async with self.get_db_session() as session:
            result = await session.execute(select(PetTag.code).where(PetTag.id == tag_id))
            code = result.scalar_one_or_none()

        if code is None:
            raise TagNotFoundError("Pet tag not found")
        return code, render_tag(code, self.base_url)
