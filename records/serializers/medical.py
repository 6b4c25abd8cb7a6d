from rest_framework import serializers

from ..models import Case, Examination, HealthFacility, HealthPractitioner, Victim
from .fields import CleanCharField, optional_clean_text, optional_text
from .victims import VictimBriefSerializer


class HealthFacilityPayloadSerializer(serializers.Serializer):
    name = CleanCharField(max_length=255)
    location = optional_clean_text(255)
    contact = optional_text(64)


class HealthFacilitySerializer(serializers.ModelSerializer):
    class Meta:
        model = HealthFacility
        fields = ['id', 'name', 'location', 'contact', 'created_at', 'updated_at']


class HealthPractitionerPayloadSerializer(serializers.Serializer):
    first_name = CleanCharField(max_length=50)
    last_name = CleanCharField(max_length=50)
    gender = optional_text(16)
    phone = optional_text(32)
    profession = optional_clean_text(128)
    facility_id = serializers.PrimaryKeyRelatedField(
        queryset=HealthFacility.objects.all(), source='facility', required=False, allow_null=True
    )


class HealthPractitionerSerializer(serializers.ModelSerializer):
    facility_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = HealthPractitioner
        fields = [
            'id', 'first_name', 'last_name', 'gender', 'phone', 'profession', 'facility_id',
            'created_at', 'updated_at',
        ]


class ExaminationPayloadSerializer(serializers.Serializer):
    victim_id = serializers.PrimaryKeyRelatedField(queryset=Victim.objects.all(), source='victim')
    case_id = serializers.PrimaryKeyRelatedField(queryset=Case.objects.all(), source='case')
    facility_id = serializers.PrimaryKeyRelatedField(queryset=HealthFacility.objects.all(), source='facility')
    practitioner_id = serializers.PrimaryKeyRelatedField(
        queryset=HealthPractitioner.objects.all(), source='practitioner'
    )
    exam_date = serializers.DateField()
    findings = optional_clean_text()
    treatment = optional_clean_text()
    referral = optional_clean_text(255)
    consent_given = serializers.BooleanField(required=False)


class _CaseBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Case
        fields = ['id', 'case_number', 'title', 'status']


class _FacilityBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = HealthFacility
        fields = ['id', 'name']


class _PractitionerBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = HealthPractitioner
        fields = ['id', 'first_name', 'last_name', 'profession']


class ExaminationSerializer(serializers.ModelSerializer):
    victim_id = serializers.IntegerField(read_only=True)
    case_id = serializers.IntegerField(read_only=True)
    facility_id = serializers.IntegerField(read_only=True)
    practitioner_id = serializers.IntegerField(read_only=True)
    victim = VictimBriefSerializer(read_only=True)
    case = _CaseBriefSerializer(read_only=True)
    facility = _FacilityBriefSerializer(read_only=True)
    practitioner = _PractitionerBriefSerializer(read_only=True)

    class Meta:
        model = Examination
        fields = [
            'id', 'victim_id', 'case_id', 'facility_id', 'practitioner_id', 'exam_date', 'findings',
            'treatment', 'referral', 'consent_given', 'victim', 'case', 'facility', 'practitioner',
            'created_at', 'updated_at',
        ]
