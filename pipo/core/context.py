"""Request-scoped context.

We use `contextvars` so log records can carry the current request id
without passing it through every call.
"""

from __future__ import annotations

import contextvars
import uuid
from time import perf_counter

request_id_var: contextvars.ContextVar[uuid.UUID | None] = contextvars.ContextVar(
    "request_id", default=None
)
request_started_at_var: contextvars.ContextVar[float | None] = contextvars.ContextVar(
    "request_started_at", default=None
)
request_duration_ms_var: contextvars.ContextVar[float | None] = contextvars.ContextVar(
    "request_duration_ms", default=None
)


def new_request_id() -> uuid.UUID:
    return uuid.uuid4()


def mark_request_start() -> float:
    started_at = perf_counter()
    _ = request_started_at_var.set(started_at)
    return started_at


def mark_request_end(started_at: float | None) -> float | None:
    if started_at is None:
        return None
    duration_ms = (perf_counter() - started_at) * 1000.0
    _ = request_duration_ms_var.set(duration_ms)
    return duration_ms


def set_request_id(request_id: uuid.UUID | None) -> None:
    _ = request_id_var.set(request_id)


def get_request_id() -> uuid.UUID | None:
    return request_id_var.get()


def clear_request_context() -> None:
    """Best-effort cleanup to avoid cross-request leakage."""
    _ = request_id_var.set(None)
    _ = request_started_at_var.set(None)
    _ = request_duration_ms_var.set(None)
