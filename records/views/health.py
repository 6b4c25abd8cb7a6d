"""Liveness probe and JSON fallback for unknown routes."""
import logging

from django.db import DatabaseError, connections
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def healthz(request):
    try:
        with connections['default'].cursor() as c:
            c.execute('SELECT 1')
            row = c.fetchone()
    except DatabaseError as e:
        logger.error("health check failed: %s", e)
        return JsonResponse({'status': 'error', 'message': 'database unavailable', 'data': None}, status=503)
    return JsonResponse({'status': 'success', 'message': 'ok', 'data': {'db': bool(row and row[0] == 1)}})


def not_found(request, exception=None):
    return JsonResponse(
        {'status': 'error', 'message': f'Route {request.method} {request.path} not found', 'data': None},
        status=404,
    )
