"""Use case for exporting tags for printing."""

from datetime import UTC, datetime

from pipo.core.errors import ForbiddenError
from pipo.core.schemas import AuthenticatedUser, UserRole
from pipo.db.session import SessionFactory
from pipo.features.tags.dtos import ExportFormat, ExportResult, TagFilter
from pipo.features.tags.services.tag_exporter import export_batch
from pipo.features.tags.usecases.tag_queries import tag_summaries_query, to_tag_summary

MEDIA_TYPES = {
    ExportFormat.TABULAR: "text/csv",
    ExportFormat.ARCHIVE: "application/zip",
}


class ExportTagsUseCaseImpl:
    """Implementation of the export tags use case."""

    def __init__(self, get_db_session: SessionFactory, base_url: str):
        """Initialize the use case with dependencies.

        Args:
            get_db_session: Function to get database session
            base_url: Public base URL printed in every tag
        """
        self.get_db_session = get_db_session
        self.base_url = base_url

    async def execute(
        self,
        export_format: ExportFormat,
        tag_filter: TagFilter,
        admin_user: AuthenticatedUser,
    ) -> ExportResult:
        """Export every tag matching ``tag_filter`` as CSV or ZIP."""
        if admin_user.role != UserRole.ADMIN:
            raise ForbiddenError("Unauthorized")

        async with self.get_db_session() as session:
            result = await session.execute(tag_summaries_query(tag_filter.to_status()))
            tags = [to_tag_summary(row) for row in result.all()]

        stamp = datetime.now(UTC).strftime("%Y%m%d%H%M%S")
        return ExportResult(
            content=export_batch(tags, self.base_url, export_format),
            media_type=MEDIA_TYPES[export_format],
            filename=f"pipo-tags-{tag_filter.value}-{stamp}.{export_format.value}",
        )
