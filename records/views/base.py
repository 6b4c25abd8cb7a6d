"""
Function views shared by every record type.

:func:`resource_views` builds the list, search, create and detail
endpoints for one :class:`~records.services.access.RecordAccess`, so a
resource module only has to name its access object and labels.
Responses use the ``{status, message, data[, pagination]}`` envelope.
"""
from __future__ import annotations

from typing import NamedTuple

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..services.access import RecordAccess
from ..services.pagination import PageParams, Pagination


def success(message: str, data=None, *, pagination: Pagination | None = None, status_code: int = status.HTTP_200_OK):
    body = {'status': 'success', 'message': message, 'data': data}
    if pagination is not None:
        body['pagination'] = pagination.envelope()
    return Response(body, status=status_code)


class ResourceViews(NamedTuple):
    list: object
    search: object
    create: object
    detail: object


def resource_views(access: RecordAccess, *, singular: str, plural: str) -> ResourceViews:
    @api_view(['GET'])
    @permission_classes([IsAuthenticated])
    def list_records(request):
        pagination, records = access.list_paginated(PageParams.from_query(request.query_params))
        return success(f'{plural} retrieved successfully', access.serialize_many(records), pagination=pagination)

    @api_view(['GET'])
    @permission_classes([IsAuthenticated])
    def search_records(request):
        params = PageParams.from_query(request.query_params)
        pagination, records = access.search(request.query_params, params)
        return success(f'{plural} retrieved successfully', access.serialize_many(records), pagination=pagination)

    @api_view(['POST'])
    @permission_classes([IsAuthenticated])
    def create_record(request):
        instance = access.create(request.data)
        return success(f'{singular} created successfully', access.serialize(instance), status_code=status.HTTP_201_CREATED)

    @api_view(['GET', 'PUT', 'DELETE'])
    @permission_classes([IsAuthenticated])
    def record_detail(request, pk):
        if request.method == 'GET':
            return success(f'{singular} retrieved successfully', access.serialize(access.get(pk)))
        if request.method == 'PUT':
            instance = access.update(pk, request.data)
            return success(f'{singular} updated successfully', access.serialize(instance))
        deleted = access.delete(pk)
        return success(f'{singular} deleted successfully', {'id': deleted})

    return ResourceViews(list=list_records, search=search_records, create=create_record, detail=record_detail)
