from ..models import Arrest, Suspect
from ..serializers.suspects import (
    ArrestPayloadSerializer,
    ArrestSerializer,
    SuspectPayloadSerializer,
    SuspectSerializer,
)
from .access import RecordAccess
from .filters import Contains, IntegerExact, date_range


class SuspectAccess(RecordAccess):
    model = Suspect
    label = 'Suspect'
    payload_serializer_class = SuspectPayloadSerializer
    output_serializer_class = SuspectSerializer
    associations = {'case_ids': 'cases'}
    filters = (
        Contains('first_name'),
        Contains('middle_name'),
        Contains('last_name'),
        Contains('gender'),
        Contains('phone_number'),
        Contains('nin'),
        Contains('nationality'),
        Contains('occupation'),
        Contains('status'),
        IntegerExact('case_id', 'cases__id'),
    )

    def get_queryset(self):
        return super().get_queryset().prefetch_related('cases', 'arrests')


class ArrestAccess(RecordAccess):
    model = Arrest
    label = 'Arrest'
    payload_serializer_class = ArrestPayloadSerializer
    output_serializer_class = ArrestSerializer
    filters = (
        Contains('location'),
        Contains('officer_name'),
        IntegerExact('suspect_id'),
        *date_range('arrest_date'),
    )


suspects = SuspectAccess()
arrests = ArrestAccess()
