"""
Request context middleware.

Assigns every request a correlation id, makes it available to logging and
to the error pages, and remembers the exception of a failed request so the
500 handler can show details in development.
"""

import logging
import re
import time
import uuid
from typing import Callable, Optional

from django.core.exceptions import PermissionDenied
from django.http import Http404, HttpRequest, HttpResponse

from .log_context import current_request_id

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# W3C trace context: version-traceid-parentid-flags
TRACEPARENT_RE = re.compile(
    r"^[0-9a-f]{2}-(?P<trace_id>[0-9a-f]{32})-(?P<parent_id>[0-9a-f]{16})-[0-9a-f]{2}$"
)


def trace_id_from_traceparent(header: Optional[str]) -> Optional[str]:
    """Return the trace id of a valid ``traceparent`` header, else None."""
    if not header:
        return None
    match = TRACEPARENT_RE.match(header.strip().lower())
    if not match or match.group("trace_id") == "0" * 32:
        return None
    return match.group("trace_id")


class RequestIdMiddleware:
    """Middleware to add request context to logs and error pages"""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request.request_id = uuid.uuid4().hex
        request.trace_id = trace_id_from_traceparent(request.headers.get("traceparent"))
        request.captured_exception = None
        token = current_request_id.set(request.request_id)

        start_time = time.monotonic()
        try:
            response = self.get_response(request)
            duration_ms = int((time.monotonic() - start_time) * 1000)
            logger.debug(
                f"{request.method} {request.path} -> {response.status_code} ({duration_ms} ms)"
            )
            response[REQUEST_ID_HEADER] = request.request_id
            return response
        finally:
            current_request_id.reset(token)

    def process_exception(self, request: HttpRequest, exception: Exception) -> None:
        # Returning None lets Django continue with its 404/500 handlers.
        if isinstance(exception, (Http404, PermissionDenied)):
            return None
        request.captured_exception = exception
        logger.error(
            f"Unhandled {type(exception).__name__} on {request.method} {request.path}",
            exc_info=exception,
        )
        return None
