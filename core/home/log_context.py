"""
Request context for log records.

``RequestIdMiddleware`` stores the id of the request being handled in a
context variable; ``RequestIdFilter`` copies it onto every log record so the
formatter configured in ``settings.LOGGING`` can print ``%(request_id)s``.
"""

import logging
from contextvars import ContextVar
from typing import Optional

current_request_id: ContextVar[Optional[str]] = ContextVar("current_request_id", default=None)


class RequestIdFilter(logging.Filter):
    """Adds ``request_id`` to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = current_request_id.get() or "-"
        return True
