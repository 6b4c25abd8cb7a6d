from ..models import Examination, HealthFacility, HealthPractitioner
from ..serializers.medical import (
    ExaminationPayloadSerializer,
    ExaminationSerializer,
    HealthFacilityPayloadSerializer,
    HealthFacilitySerializer,
    HealthPractitionerPayloadSerializer,
    HealthPractitionerSerializer,
)
from .access import RecordAccess
from .filters import Contains, IntegerExact, date_range


class HealthFacilityAccess(RecordAccess):
    model = HealthFacility
    label = 'Health facility'
    payload_serializer_class = HealthFacilityPayloadSerializer
    output_serializer_class = HealthFacilitySerializer
    filters = (
        Contains('name'),
        Contains('location'),
    )


class HealthPractitionerAccess(RecordAccess):
    model = HealthPractitioner
    label = 'Health practitioner'
    payload_serializer_class = HealthPractitionerPayloadSerializer
    output_serializer_class = HealthPractitionerSerializer
    filters = (
        Contains('first_name'),
        Contains('last_name'),
        Contains('profession'),
        Contains('gender'),
        IntegerExact('facility_id'),
    )


class ExaminationAccess(RecordAccess):
    model = Examination
    label = 'Examination'
    payload_serializer_class = ExaminationPayloadSerializer
    output_serializer_class = ExaminationSerializer
    filters = (
        IntegerExact('facility_id'),
        IntegerExact('practitioner_id'),
        IntegerExact('victim_id'),
        IntegerExact('case_id'),
        *date_range('exam_date'),
    )

    def get_queryset(self):
        return super().get_queryset().select_related('victim', 'case', 'facility', 'practitioner')


facilities = HealthFacilityAccess()
practitioners = HealthPractitionerAccess()
examinations = ExaminationAccess()
