"""
Error kinds raised by the record access layer and the project-wide DRF
exception handler that renders every failure as the error envelope
``{"status": "error", "message": ..., "data": ...}``.
"""
from __future__ import annotations

import logging

from django.conf import settings
from django.db import DatabaseError, IntegrityError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class RecordError(exceptions.APIException):
    """Base for record access failures.

    ``message`` becomes the envelope message; ``data`` carries optional
    structured detail such as serializer field errors.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Storage failure'
    default_code = 'storage_failure'

    def __init__(self, message: str | None = None, data=None):
        super().__init__(detail=message or self.default_detail, code=self.default_code)
        self.data = data


class InvalidInput(RecordError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input'
    default_code = 'invalid_input'


class NotFound(RecordError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Record not found'
    default_code = 'not_found'


class Conflict(RecordError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Record already exists'
    default_code = 'conflict'


class StorageFailure(RecordError):
    pass


def error_body(message, data=None) -> dict:
    return {'status': 'error', 'message': message, 'data': data}


def _internal_detail(exc: Exception):
    return str(exc) if settings.DEBUG else None


def _passthrough_headers(resp: Response) -> dict:
    return {k: resp[k] for k in ('WWW-Authenticate', 'Retry-After') if resp.has_header(k)}


def api_exception_handler(exc, context):
    if isinstance(exc, IntegrityError):
        exc = Conflict(data=_internal_detail(exc))
    elif isinstance(exc, DatabaseError):
        logger.exception("storage failure in %s", context.get('view'))
        exc = StorageFailure(data=_internal_detail(exc))
    elif isinstance(exc, Http404):
        exc = NotFound()

    if isinstance(exc, RecordError):
        return Response(error_body(str(exc.detail), exc.data), status=exc.status_code)

    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.exception("unhandled error in %s", context.get('view'))
        return Response(
            error_body('Internal server error', _internal_detail(exc)),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        return Response(error_body('Invalid input', resp.data), status=resp.status_code)

    # normalize {"detail": ...} payloads
    data = None
    if isinstance(resp.data, dict):
        message = resp.data.get('detail') or 'Request failed'
        data = {k: v for k, v in resp.data.items() if k != 'detail'} or None
    else:
        message = str(resp.data)
    return Response(error_body(str(message), data), status=resp.status_code, headers=_passthrough_headers(resp))
