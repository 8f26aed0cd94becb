"""Pet tag use cases."""

from .delete_tag_usecase import DeleteTagUseCaseImpl
from .export_tags_usecase import ExportTagsUseCaseImpl
from .generate_tags_usecase import GenerateTagsUseCaseImpl
from .get_tag_stats_usecase import GetTagStatsUseCaseImpl
from .get_tag_usecase import GetTagUseCaseImpl
from .list_tags_usecase import ListTagsUseCaseImpl
from .render_tag_image_usecase import RenderTagImageUseCaseImpl

__all__ = [
    "DeleteTagUseCaseImpl",
    "ExportTagsUseCaseImpl",
    "GenerateTagsUseCaseImpl",
    "GetTagStatsUseCaseImpl",
    "GetTagUseCaseImpl",
    "ListTagsUseCaseImpl",
    "RenderTagImageUseCaseImpl",
]
