"""Pet tag data transfer objects."""

from .tags_dto import (
    DeleteTagResponse,
    ExportFormat,
    ExportResult,
    GenerateTagsRequest,
    GenerateTagsResponse,
    ListTagsRequest,
    ListTagsResponse,
    TagFilter,
    TagPetSummary,
    TagStatsResponse,
    TagSummary,
)

__all__ = [
    "DeleteTagResponse",
    "ExportFormat",
    "ExportResult",
    "GenerateTagsRequest",
    "GenerateTagsResponse",
    "ListTagsRequest",
    "ListTagsResponse",
    "TagFilter",
    "TagPetSummary",
    "TagStatsResponse",
    "TagSummary",
]
