"""
Service-level views (no auth)
"""
import logging

from django.conf import settings
from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)

SERVICE_NAME = "exampass-api"


def health_check(request):
    """
    Health check

    Returns:
        - 200: database reachable
        - 503: database connection failed
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as e:
        logger.warning("health check failed: %s", e)
        body = {
            "status": "unhealthy",
            "service": SERVICE_NAME,
            "database": "disconnected",
        }
        if settings.DEBUG:
            body["error"] = str(e)
        return JsonResponse(body, status=503)

    return JsonResponse({
        "status": "healthy",
        "service": SERVICE_NAME,
        "database": "connected",
    }, status=200)


def root_banner(request):
    return JsonResponse({
        "service": SERVICE_NAME,
        "message": "ExamPass API is running",
        "docs": "/swagger/",
        "api": "/api/v1/",
    })
