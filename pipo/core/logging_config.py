"""Logging configuration."""

import logging

from pipo.core.context import get_request_id

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [req=%(request_id)s] %(message)s"


class RequestIdFilter(logging.Filter):
    """Attach the current request id (or '-') to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        request_id = get_request_id()
        record.request_id = str(request_id) if request_id else "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """Install a stream handler on the root logger, once."""
    root = logging.getLogger()
    root.setLevel(level.upper())

    for handler in root.handlers:
        if any(isinstance(f, RequestIdFilter) for f in handler.filters):
            return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    root.addHandler(handler)
