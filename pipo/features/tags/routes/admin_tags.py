"""Admin routes for provisioning and printing tags."""

from typing import Protocol
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from pipo.core.authorization import is_admin
from pipo.core.errors import PipoError, to_http_exception
from pipo.core.schemas import AuthenticatedUser
from pipo.core.settings import get_settings
from pipo.db.session import SessionFactory, get_session_factory
from pipo.features.tags.allocator import MAX_BATCH_SIZE
from pipo.features.tags.dtos import (
    DeleteTagResponse,
    ExportFormat,
    ExportResult,
    GenerateTagsRequest,
    GenerateTagsResponse,
    ListTagsRequest,
    ListTagsResponse,
    TagFilter,
    TagStatsResponse,
    TagSummary,
)
from pipo.features.tags.usecases import (
    DeleteTagUseCaseImpl,
    ExportTagsUseCaseImpl,
    GenerateTagsUseCaseImpl,
    GetTagStatsUseCaseImpl,
    GetTagUseCaseImpl,
    ListTagsUseCaseImpl,
    RenderTagImageUseCaseImpl,
)

router = APIRouter(prefix="/admin/tags")


class GenerateTagsUseCase(Protocol):
    """Protocol for the generate tags use case."""

    async def execute(
        self, count: int, admin_user: AuthenticatedUser
    ) -> GenerateTagsResponse:
        """Allocate and persist a batch of tags."""
        ...


class ListTagsUseCase(Protocol):
    """Protocol for the list tags use case."""

    async def execute(
        self, request: ListTagsRequest, admin_user: AuthenticatedUser
    ) -> ListTagsResponse:
        """List tags with pagination and filtering."""
        ...


class GetTagStatsUseCase(Protocol):
    """Protocol for the tag stats use case."""

    async def execute(self, admin_user: AuthenticatedUser) -> TagStatsResponse:
        """Count tags by status."""
        ...


class ExportTagsUseCase(Protocol):
    """Protocol for the export tags use case."""

    async def execute(
        self,
        export_format: ExportFormat,
        tag_filter: TagFilter,
        admin_user: AuthenticatedUser,
    ) -> ExportResult:
        """Export tags as CSV or ZIP."""
        ...


class GetTagUseCase(Protocol):
    """Protocol for the get tag use case."""

    async def execute(self, tag_id: UUID, admin_user: AuthenticatedUser) -> TagSummary:
        """Get a single tag by ID."""
        ...


class DeleteTagUseCase(Protocol):
    """Protocol for the delete tag use case."""

    async def execute(
        self, tag_id: UUID, admin_user: AuthenticatedUser
    ) -> DeleteTagResponse:
        """Delete a tag and its pet."""
        ...


class RenderTagImageUseCase(Protocol):
    """Protocol for rendering a tag image."""

    async def by_code(self, code: str) -> bytes: ...

    async def by_id(self, tag_id: UUID) -> tuple[str, bytes]: ...


async def get_generate_tags_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> GenerateTagsUseCase:
    """Dependency injection for the generate tags use case."""
    return GenerateTagsUseCaseImpl(get_db_session=get_db_session)


async def get_list_tags_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> ListTagsUseCase:
    """Dependency injection for the list tags use case."""
    return ListTagsUseCaseImpl(get_db_session=get_db_session)


async def get_tag_stats_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> GetTagStatsUseCase:
    """Dependency injection for the tag stats use case."""
    return GetTagStatsUseCaseImpl(get_db_session=get_db_session)


async def get_export_tags_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> ExportTagsUseCase:
    """Dependency injection for the export tags use case."""
    return ExportTagsUseCaseImpl(
        get_db_session=get_db_session,
        base_url=get_settings().public_base_url,
    )


async def get_get_tag_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> GetTagUseCase:
    """Dependency injection for the get tag use case."""
    return GetTagUseCaseImpl(get_db_session=get_db_session)


async def get_delete_tag_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> DeleteTagUseCase:
    """Dependency injection for the delete tag use case."""
    return DeleteTagUseCaseImpl(get_db_session=get_db_session)


async def get_render_tag_image_use_case(
    get_db_session: SessionFactory = Depends(get_session_factory),
) -> RenderTagImageUseCase:
    """Dependency injection for the render tag image use case."""
    return RenderTagImageUseCaseImpl(
        get_db_session=get_db_session,
        base_url=get_settings().public_base_url,
    )


@router.post(
    "/generate",
    response_model=GenerateTagsResponse,
    status_code=status.HTTP_201_CREATED,
)
async def generate_tags(
    request: GenerateTagsRequest,
    admin_user: AuthenticatedUser = Depends(is_admin),
    use_case: GenerateTagsUseCase = Depends(get_generate_tags_use_case),
) -> GenerateTagsResponse:
    """Generate a batch of new unbound tags.

    Codes continue the sequence after the highest existing code.
    """
    try:
        return await use_case.execute(request.count, admin_user)
    except PipoError as e:
        raise to_http_exception(e) from e


@router.get("", response_model=ListTagsResponse)
async def list_tags(
    filter: TagFilter = Query(TagFilter.ALL),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=MAX_BATCH_SIZE),
    admin_user: AuthenticatedUser = Depends(is_admin),
    use_case: ListTagsUseCase = Depends(get_list_tags_use_case),
) -> ListTagsResponse:
    """List tags, newest first, with their linked pet if any.

    Filter by ``all``, ``unbound`` or ``bound``. Pages start at 1.
    """
    request = ListTagsRequest(filter=filter, page=page, page_size=page_size)
    try:
        return await use_case.execute(request, admin_user)
    except PipoError as e:
        raise to_http_exception(e) from e


@router.get("/stats", response_model=TagStatsResponse)
async def get_tag_stats(
    admin_user: AuthenticatedUser = Depends(is_admin),
    use_case: GetTagStatsUseCase = Depends(get_tag_stats_use_case),
) -> TagStatsResponse:
    """Counts of tags by status and of registered pets."""
    try:
        return await use_case.execute(admin_user)
    except PipoError as e:
        raise to_http_exception(e) from e


@router.get("/export")
async def export_tags(
    format: ExportFormat = Query(ExportFormat.TABULAR),
    filter: TagFilter = Query(TagFilter.ALL),
    admin_user: AuthenticatedUser = Depends(is_admin),
    use_case: ExportTagsUseCase = Depends(get_export_tags_use_case),
) -> Response:
    """Download tags for printing.

    - ``csv``: one row per tag with its URL and linked pet
    - ``zip``: one PNG per tag plus a ``manifest.csv``
    """
    try:
        result = await use_case.execute(format, filter, admin_user)
    except PipoError as e:
        raise to_http_exception(e) from e

    return Response(
        content=result.content,
        media_type=result.media_type,
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )


@router.get("/{tag_id}", response_model=TagSummary)
async def get_tag(
    tag_id: UUID,
    admin_user: AuthenticatedUser = Depends(is_admin),
    use_case: GetTagUseCase = Depends(get_get_tag_use_case),
) -> TagSummary:
    """Get a single tag with its linked pet."""
    try:
        return await use_case.execute(tag_id, admin_user)
    except PipoError as e:
        raise to_http_exception(e) from e


@router.get("/{tag_id}/qr.png")
async def download_tag_image(
    tag_id: UUID,
    admin_user: AuthenticatedUser = Depends(is_admin),
    use_case: RenderTagImageUseCase = Depends(get_render_tag_image_use_case),
) -> Response:
    """Download the printable PNG of a tag."""
    try:
        code, image = await use_case.by_id(tag_id)
    except PipoError as e:
        raise to_http_exception(e) from e

    return Response(
        content=image,
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="pipo-qr-{code}.png"'},
    )


@router.delete("/{tag_id}", response_model=DeleteTagResponse)
async def delete_tag(
    tag_id: UUID,
    admin_user: AuthenticatedUser = Depends(is_admin),
    use_case: DeleteTagUseCase = Depends(get_delete_tag_use_case),
) -> DeleteTagResponse:
    """Delete a tag.

    A pet registered on the tag is deleted with it.
    """
    try:
        return await use_case.execute(tag_id, admin_user)
    except PipoError as e:
        raise to_http_exception(e) from e
