from rest_framework import serializers

from ..models import Case, Victim
from .fields import CleanCharField, optional_clean_text, optional_text


class VictimPayloadSerializer(serializers.Serializer):
    first_name = CleanCharField(max_length=50)
    last_name = CleanCharField(max_length=50)
    gender = optional_text(16)
    dob = serializers.DateField()
    phone_number = optional_text(32)
    address = optional_clean_text(255)
    nationality = optional_text(64)
    nin = optional_text(32)
    created_by = serializers.CharField(max_length=50)
    updated_by = optional_text(50)
    case_ids = serializers.PrimaryKeyRelatedField(queryset=Case.objects.all(), many=True, required=False)


class VictimSerializer(serializers.ModelSerializer):
    case_ids = serializers.PrimaryKeyRelatedField(source='cases', many=True, read_only=True)

    class Meta:
        model = Victim
        fields = [
            'id', 'first_name', 'last_name', 'gender', 'dob', 'phone_number', 'address',
            'nationality', 'nin', 'created_by', 'updated_by', 'case_ids', 'created_at', 'updated_at',
        ]


class VictimBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Victim
        fields = ['id', 'first_name', 'last_name', 'gender', 'nin']
