"""Root logger setup.

Log lines carry the request ID set by ``RequestIDMiddleware`` so entries
from one request can be grouped.
"""

import logging

from blog_api.middleware import request_id_var

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"


class RequestIDFilter(logging.Filter):
    """Copy the current request ID onto every record (``-`` outside requests)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once.

    Does nothing if the root logger already has handlers, e.g. when running
    under uvicorn with its own log config or when tests import the app twice.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIDFilter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
