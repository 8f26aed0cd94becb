"""Public route serving tag images."""

from fastapi import APIRouter, Depends, Response

from pipo.core.errors import PipoError, to_http_exception
from pipo.features.tags.routes.admin_tags import (
    RenderTagImageUseCase,
    get_render_tag_image_use_case,
)

router = APIRouter()


@router.get("/tags/{code}/qr.png")
async def tag_image(
    code: str,
    use_case: RenderTagImageUseCase = Depends(get_render_tag_image_use_case),
) -> Response:
    """Render the PNG printed on the tag ``code``."""
    try:
        image = await use_case.by_code(code)
    except PipoError as e:
        raise to_http_exception(e) from e

    return Response(
        content=image,
        media_type="image/png",
        headers={"Cache-Control": "public, max-age=86400"},
    )
