"""
Common API views
"""
import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health_check(request):
    """
    Returns:
        - 200: database reachable
        - 503: database unreachable
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as e:
        logger.warning("health check failed: %s", e)
        return JsonResponse({
            "status": "unhealthy",
            "service": "exam-session-api",
            "database": "disconnected",
        }, status=503)

    return JsonResponse({
        "status": "healthy",
        "service": "exam-session-api",
        "database": "connected",
    }, status=200)
