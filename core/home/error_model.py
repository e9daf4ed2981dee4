"""
Error View Model

Data rendered by the generic error page. Knows how to produce a safe,
non-leaking message and decides whether exception details may be shown:
only when ``show_detailed_error`` is set AND the environment is
"Development".

Author: Employee Directory Team
Version: 1.0.0
"""

import traceback
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from django.conf import settings
from django.http import HttpRequest
from django.utils import timezone

DEVELOPMENT_ENVIRONMENT = "Development"

STATUS_CODE_DESCRIPTIONS = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Page Not Found",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
}


@dataclass
class ErrorViewModel:
    """
    Represents error information to be displayed in error views.

    Attributes:
        request_id: Correlation id (trace id or request-scoped id)
        status_code: HTTP status code of the error, if any
        error_message: Explicit message for the user
        exception_message / exception_type / stack_trace: Details for
            development only
        timestamp: When the error occurred (UTC)
        request_path / http_method: The original request
        show_detailed_error: Opt-in switch for exception details
        environment: Hosting environment name
    """

    request_id: Optional[str] = None
    status_code: Optional[int] = None
    error_message: Optional[str] = None
    exception_message: Optional[str] = None
    exception_type: Optional[str] = None
    stack_trace: Optional[str] = None
    timestamp: datetime = field(default_factory=timezone.now)
    request_path: Optional[str] = None
    http_method: Optional[str] = None
    show_detailed_error: bool = False
    environment: str = "Production"

    @classmethod
    def from_request(
        cls,
        request: HttpRequest,
        status_code: Optional[int] = None,
        exception: Optional[BaseException] = None,
        error_message: Optional[str] = None,
    ) -> "ErrorViewModel":
        """
        Build the view model for ``request``.

        The correlation id prefers the ambient trace id (``traceparent``)
        and falls back to the id assigned by ``RequestIdMiddleware``.
        """
        model = cls(
            request_id=resolve_request_id(request),
            status_code=status_code,
            error_message=error_message,
            request_path=request.path,
            http_method=request.method,
            show_detailed_error=getattr(settings, "SHOW_DETAILED_ERRORS", False),
            environment=getattr(settings, "ENVIRONMENT", "Production"),
        )
        if exception is not None:
            model.exception_type = type(exception).__name__
            model.exception_message = str(exception)
            model.stack_trace = "".join(
                traceback.format_exception(
                    type(exception), exception, exception.__traceback__
                )
            )
        return model

    @property
    def show_request_id(self) -> bool:
        return bool(self.request_id)

    @property
    def status_code_description(self) -> str:
        return STATUS_CODE_DESCRIPTIONS.get(self.status_code, "An error occurred")

    @property
    def is_development(self) -> bool:
        return (self.environment or "").lower() == DEVELOPMENT_ENVIRONMENT.lower()

    def get_safe_error_message(self) -> str:
        """Safe error message for display (prevents information leakage)."""
        if self.error_message:
            return self.error_message
        if self.status_code is not None:
            return f"An error occurred (Status Code: {self.status_code})"
        return "An unexpected error occurred while processing your request."

    def should_show_stack_trace(self) -> bool:
        return bool(self.show_detailed_error and self.stack_trace and self.is_development)

    def should_show_exception_details(self) -> bool:
        return bool(
            self.show_detailed_error
            and (self.exception_message or self.exception_type)
            and self.is_development
        )


def resolve_request_id(request: HttpRequest) -> Optional[str]:
    """Trace id if the request carries one, else the request-scoped id."""
    return getattr(request, "trace_id", None) or getattr(request, "request_id", None)
