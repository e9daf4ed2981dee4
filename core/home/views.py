"""
Home & Diagnostics Views

Views:
- index / privacy: static pages, visits are logged
- health: liveness probe for external monitoring (JSON, no dependency checks)
- error / error_status: generic error page, optionally for a status code
- page_not_found / server_error: project-wide 404 and 500 handlers

The error pages never show exception details unless SHOW_DETAILED_ERRORS is
enabled and ENVIRONMENT is "Development".

Author: Employee Directory Team
Version: 1.0.0
"""

import logging
from typing import Optional

from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.utils import timezone
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_GET
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response

from .error_model import ErrorViewModel

logger = logging.getLogger(__name__)

ERROR_TEMPLATE = "home/error.html"


@require_GET
def index(request: HttpRequest) -> HttpResponse:
    try:
        logger.info(f"Home page visited at {timezone.now().isoformat()}")
        return render(request, "home/index.html")
    except Exception as e:
        logger.exception(f"An error occurred while loading the home page: {e}")
        return redirect("home:error")


@require_GET
def privacy(request: HttpRequest) -> HttpResponse:
    try:
        logger.info(f"Privacy page visited at {timezone.now().isoformat()}")
        return render(request, "home/privacy.html")
    except Exception as e:
        logger.exception(f"An error occurred while loading the privacy page: {e}")
        return redirect("home:error")


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def health(request: Request) -> Response:
    """
    Health check endpoint for monitoring.

    Always reports healthy; the store is deliberately not consulted.
    """
    return Response({"status": "Healthy", "timestamp": timezone.now()})


def render_error(
    request: HttpRequest, error: ErrorViewModel, response_status: int = 200
) -> HttpResponse:
    return render(request, ERROR_TEMPLATE, {"error": error}, status=response_status)


@never_cache
@require_GET
def error(request: HttpRequest) -> HttpResponse:
    error_model = ErrorViewModel.from_request(request)
    logger.error(
        f"Error page displayed with RequestId: {error_model.request_id} "
        f"at {error_model.timestamp.isoformat()}"
    )
    return render_error(request, error_model)


@never_cache
@require_GET
def error_status(request: HttpRequest, status_code: int) -> HttpResponse:
    """
    Custom error page for a specific status code.
    """
    error_model = ErrorViewModel.from_request(request, status_code=status_code)
    logger.warning(
        f"HTTP {status_code} error occurred. RequestId: {error_model.request_id}"
    )
    return render_error(request, error_model)


def page_not_found(request: HttpRequest, exception: Optional[Exception] = None) -> HttpResponse:
    error_model = ErrorViewModel.from_request(request, status_code=404)
    logger.warning(
        f"HTTP 404 for {request.method} {request.path}. RequestId: {error_model.request_id}"
    )
    return render_error(request, error_model, response_status=404)


def server_error(request: HttpRequest) -> HttpResponse:
    error_model = ErrorViewModel.from_request(
        request,
        status_code=500,
        exception=getattr(request, "captured_exception", None),
    )
    logger.error(
        f"HTTP 500 for {request.method} {request.path}. RequestId: {error_model.request_id}"
    )
    return render_error(request, error_model, response_status=500)
