# apps/api/common/middleware.py
# RequestLogMiddleware: one line per request (method, path, status, duration).
# UnhandledExceptionMiddleware: anything escaping the view becomes a 500 JSON.
# process_exception responses skip CorsMiddleware, so CORS headers are added here.
from __future__ import annotations

import logging
import time

from django.conf import settings
from django.http import JsonResponse

logger = logging.getLogger(__name__)
request_logger = logging.getLogger("apps.api.requests")


def _add_cors_headers_to_response(request, response):
    """
    Add CORS headers to responses built in process_exception so the browser
    can read 500 bodies too.
    """
    origin = (request.META.get("HTTP_ORIGIN") or "").strip()
    allowed = getattr(settings, "CORS_ALLOWED_ORIGINS", []) or []
    if origin and (origin in allowed or getattr(settings, "CORS_ALLOW_ALL_ORIGINS", False)):
        response["Access-Control-Allow-Origin"] = origin
    elif allowed:
        response["Access-Control-Allow-Origin"] = allowed[0]
    if getattr(settings, "CORS_ALLOW_CREDENTIALS", False):
        response["Access-Control-Allow-Credentials"] = "true"
    return response


class RequestLogMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        duration_ms = int((time.monotonic() - started) * 1000)
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        request_logger.log(
            level,
            "%s %s %s %sms",
            request.method,
            request.get_full_path(),
            response.status_code,
            duration_ms,
        )
        return response


class UnhandledExceptionMiddleware:
    """Unhandled exception -> 500 JSON, with CORS headers attached directly."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        logger.exception("Unhandled exception: %s", exception)
        body = {"error": "Internal server error", "code": "INTERNAL"}
        if settings.DEBUG:
            body["details"] = str(exception)
        resp = JsonResponse(body, status=500)
        return _add_cors_headers_to_response(request, resp)
