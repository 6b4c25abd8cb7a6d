"""
Cases with their charges, witnesses and linked people.

A case can be created or updated with inline ``charges``; those charge
rows are created inside the same transaction.  When an update replaces
the case's charges, charges left attached to no case are deleted.
"""
from __future__ import annotations

import logging

from ..models import Case, Charge, Witness
from ..serializers.cases import (
    CasePayloadSerializer,
    CaseSerializer,
    ChargePayloadSerializer,
    ChargeSerializer,
    WitnessPayloadSerializer,
    WitnessSerializer,
)
from .access import RecordAccess
from .filters import Contains, IntegerExact, date_range

logger = logging.getLogger(__name__)


class CaseAccess(RecordAccess):
    model = Case
    label = 'Case'
    payload_serializer_class = CasePayloadSerializer
    output_serializer_class = CaseSerializer
    associations = {
        'suspect_ids': 'suspects',
        'victim_ids': 'victims',
        'witness_ids': 'witnesses',
        'charge_ids': 'charges',
        'charges': 'charges',
    }
    filters = (
        Contains('case_number'),
        Contains('title'),
        Contains('status'),
        IntegerExact('police_post_id'),
        IntegerExact('officer_id'),
        *date_range('date_opened'),
    )
    conflict_message = 'A case with this case number already exists'

    def get_queryset(self):
        return super().get_queryset().prefetch_related('suspects', 'witnesses', 'victims', 'charges')

    def apply_associations(self, instance, associations):
        associations = dict(associations)
        inline = associations.pop('charges', None)
        replacing = inline is not None or 'charge_ids' in associations
        previous = list(instance.charges.values_list('pk', flat=True)) if replacing else []
        super().apply_associations(instance, associations)
        if inline is not None:
            created = [Charge.objects.create(**charge) for charge in inline]
            if 'charge_ids' in associations:
                instance.charges.add(*created)
            else:
                instance.charges.set(created)
        if not previous:
            return
        orphaned, _ = Charge.objects.filter(pk__in=previous, cases__isnull=True).delete()
        if orphaned:
            logger.info("removed %d charges replaced on case id=%s", orphaned, instance.pk)


class ChargeAccess(RecordAccess):
    model = Charge
    label = 'Charge'
    payload_serializer_class = ChargePayloadSerializer
    output_serializer_class = ChargeSerializer
    filters = (
        Contains('chargetitle', 'charge_title'),
        Contains('severity'),
    )


class WitnessAccess(RecordAccess):
    model = Witness
    label = 'Witness'
    payload_serializer_class = WitnessPayloadSerializer
    output_serializer_class = WitnessSerializer
    filters = (
        Contains('first_name'),
        Contains('last_name'),
        Contains('phone_number'),
    )


cases = CaseAccess()
charges = ChargeAccess()
witnesses = WitnessAccess()
