"""Application middleware."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

from pipo.core.context import (
    clear_request_context,
    mark_request_end,
    mark_request_start,
    new_request_id,
    set_request_id,
)

logger = logging.getLogger(__name__)


async def request_context_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Attach a request_id to contextvars and log the request outcome.

    Also adds `X-Request-Id` to the response.
    """
    clear_request_context()

    request_id = new_request_id()
    set_request_id(request_id)
    started_at = mark_request_start()

    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        response.headers["X-Request-Id"] = str(request_id)
        return response
    finally:
        duration_ms = mark_request_end(started_at)
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            status_code,
            duration_ms or 0.0,
        )
        # Always clean up to avoid context leaking across requests.
        clear_request_context()
