from ..models import Victim
from ..serializers.victims import VictimPayloadSerializer, VictimSerializer
from .access import RecordAccess
from .filters import Contains, Exact, IntegerExact


class VictimAccess(RecordAccess):
    model = Victim
    label = 'Victim'
    payload_serializer_class = VictimPayloadSerializer
    output_serializer_class = VictimSerializer
    associations = {'case_ids': 'cases'}
    filters = (
        Contains('firstname', 'first_name'),
        Contains('lastname', 'last_name'),
        Exact('gender'),
        Exact('nationality'),
        Exact('nin'),
        IntegerExact('case_id', 'cases__id'),
    )

    def get_queryset(self):
        return super().get_queryset().prefetch_related('cases')


victims = VictimAccess()
