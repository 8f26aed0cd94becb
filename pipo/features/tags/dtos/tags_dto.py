"""Pet tag data transfer objects."""

import enum
from datetime import datetime

from pydantic import BaseModel, Field

from pipo.features.tags.allocator import MAX_BATCH_SIZE
from pipo.features.tags.models import PetTagStatus


class TagFilter(str, enum.Enum):
    """Status filter accepted by the admin listing and export."""

    ALL = "all"
    UNBOUND = "unbound"
    BOUND = "bound"

    def to_status(self) -> PetTagStatus | None:
        if self is TagFilter.ALL:
            return None
        return PetTagStatus(self.value)


class ExportFormat(str, enum.Enum):
    """Bulk export formats."""

    TABULAR = "csv"
    ARCHIVE = "zip"


class GenerateTagsRequest(BaseModel):
    """Request model for generating a batch of tags.

    Range checking happens in the allocator so the same rule applies to
    every caller, not only HTTP clients.
    """

    count: int = 1


class TagPetSummary(BaseModel):
    """The part of a linked pet shown next to a tag."""

    id: str
    name: str | None
    contact_name: str


class TagSummary(BaseModel):
    """Summary information about a tag."""

    id: str
    code: str
    status: PetTagStatus
    created_at: datetime
    bound_at: datetime | None
    pet: TagPetSummary | None = None


class GenerateTagsResponse(BaseModel):
    """Response model for a generated batch."""

    message: str
    tags: list[TagSummary]


class ListTagsRequest(BaseModel):
    """Request model for listing tags with pagination and filtering.

    Out-of-range ``page`` / ``page_size`` are rejected, never clamped.
    """

    filter: TagFilter = TagFilter.ALL
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1, le=MAX_BATCH_SIZE)


class ListTagsResponse(BaseModel):
    """Response model for listing tags."""

    tags: list[TagSummary]
    total: int
    page: int
    page_size: int
    total_pages: int


class TagStatsResponse(BaseModel):
    """Counts shown on the admin dashboard."""

    total_tags: int
    unbound_tags: int
    bound_tags: int
    total_pets: int


class DeleteTagResponse(BaseModel):
    """Response model for successful tag deletion."""

    message: str
    tag_id: str


class ExportResult(BaseModel):
    """Bytes of an export plus what the HTTP layer needs to serve them."""

    content: bytes
    media_type: str
    filename: str
