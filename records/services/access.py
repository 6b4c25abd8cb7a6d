"""
Generic record access façade.

One :class:`RecordAccess` subclass per resource wires a model to its
payload serializer, output serializer, search filters and many-to-many
associations.  The same six operations (create, get, list, search,
update, delete) then behave identically for every record type.

Updates and deletes are single conditional statements scoped by id; the
affected-row count decides between success and :class:`NotFound`, so
there is no separate existence check to race against.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from django.db import IntegrityError, transaction
from django.utils import timezone

from ..exceptions import Conflict, InvalidInput, NotFound
from .filters import Filter, build_predicate
from .pagination import PageParams, Pagination, paginate
from .partial import PartialUpdate, build_update, split_associations, validate_payload

logger = logging.getLogger(__name__)


def parse_id(raw: Any) -> int:
    try:
        pk = int(str(raw))
    except (TypeError, ValueError):
        raise InvalidInput(f'Invalid id: {raw!r}') from None
    if pk < 1:
        raise InvalidInput(f'Invalid id: {raw!r}')
    return pk


class RecordAccess:
    model = None
    payload_serializer_class = None
    output_serializer_class = None
    filters: tuple[Filter, ...] = ()
    # payload key -> many-to-many attribute replaced as a whole
    associations: dict[str, str] = {}
    # payload keys holding nested objects, written by apply_nested()
    nested: tuple[str, ...] = ()
    ordering: tuple[str, ...] = ('id',)
    label = 'Record'
    conflict_message = None

    # -----------------------------------------------------------------
    # Hooks
    # -----------------------------------------------------------------
    def get_queryset(self):
        return self.model.objects.all().order_by(*self.ordering)

    def serialize(self, instance) -> dict:
        return self.output_serializer_class(instance).data

    def serialize_many(self, instances) -> list:
        return self.output_serializer_class(instances, many=True).data

    def perform_create(self, fields: dict[str, Any]):
        return self.model.objects.create(**fields)

    def prepare_update(self, fields: dict[str, Any]) -> dict[str, Any]:
        return fields

    def apply_associations(self, instance, associations: dict[str, Any]) -> None:
        for key, values in associations.items():
            getattr(instance, self.associations[key]).set(values)

    def apply_nested(self, instance, nested: dict[str, Any]) -> None:
        raise NotImplementedError

    # -----------------------------------------------------------------
    # Operations
    # -----------------------------------------------------------------
    def _conflict(self, exc: IntegrityError) -> Conflict:
        logger.info("%s write rejected by constraint: %s", self.label, exc)
        return Conflict(self.conflict_message or f'{self.label} already exists')

    def create(self, data) -> Any:
        values = validate_payload(self.payload_serializer_class, data)
        payload = split_associations(values, self.associations)
        try:
            with transaction.atomic():
                instance = self.perform_create(payload.fields)
                self.apply_associations(instance, payload.associations)
        except IntegrityError as exc:
            raise self._conflict(exc)
        logger.info("created %s id=%s", self.label, instance.pk)
        return self.get(instance.pk)

    def get(self, raw_id) -> Any:
        pk = parse_id(raw_id)
        instance = self.get_queryset().filter(pk=pk).first()
        if instance is None:
            raise NotFound(f'{self.label} not found')
        return instance

    def list_paginated(self, params: PageParams) -> tuple[Pagination, list]:
        return paginate(self.get_queryset(), params)

    def search(self, query_params: Mapping[str, Any], params: PageParams) -> tuple[Pagination, list]:
        predicate = build_predicate(self.filters, query_params)
        return paginate(self.get_queryset().filter(predicate), params)

    def build_update(self, data) -> PartialUpdate:
        return build_update(self.payload_serializer_class, data, association_keys=self.associations)

    def update(self, raw_id, data) -> Any:
        pk = parse_id(raw_id)
        update = self.build_update(data)
        fields = self.prepare_update(dict(update.fields))
        nested = {k: fields.pop(k) for k in self.nested if k in fields}
        try:
            with transaction.atomic():
                rows = self.model.objects.filter(pk=pk).update(updated_at=timezone.now(), **fields)
                if rows == 0:
                    raise NotFound(f'{self.label} not found')
                if update.associations or nested:
                    instance = self.model.objects.get(pk=pk)
                    self.apply_associations(instance, update.associations)
                    if nested:
                        self.apply_nested(instance, nested)
        except IntegrityError as exc:
            raise self._conflict(exc)
        logger.info(
            "updated %s id=%s fields=%s", self.label, pk, sorted(fields) + sorted(update.associations) + sorted(nested)
        )
        return self.get(pk)

    def delete(self, raw_id) -> int:
        pk = parse_id(raw_id)
        _, per_model = self.model.objects.filter(pk=pk).delete()
        if not per_model.get(self.model._meta.label, 0):
            raise NotFound(f'{self.label} not found')
        logger.info("deleted %s id=%s", self.label, pk)
        return pk
