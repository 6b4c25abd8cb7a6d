from rest_framework import serializers

from ..models import Arrest, Case, Suspect
from .fields import BlobField, CleanCharField, optional_clean_text, optional_text


class SuspectPayloadSerializer(serializers.Serializer):
    """Suspect fields; ``photo`` and ``fingerprints`` arrive as multipart files."""
    first_name = CleanCharField(max_length=50)
    middle_name = optional_clean_text(50)
    last_name = CleanCharField(max_length=50)
    dob = serializers.DateField(required=False, allow_null=True)
    gender = optional_text(50)
    phone_number = optional_text(32)
    nin = optional_text(32)
    nationality = optional_text(64)
    address = optional_clean_text(255)
    occupation = optional_clean_text(128)
    status = optional_text(50)
    fingerprints = BlobField(required=False, allow_null=True)
    photo = BlobField(required=False, allow_null=True)
    created_by = serializers.CharField(max_length=50)
    updated_by = optional_text(50)
    case_ids = serializers.PrimaryKeyRelatedField(queryset=Case.objects.all(), many=True, required=False)


class SuspectSerializer(serializers.ModelSerializer):
    fingerprints = BlobField(read_only=True)
    photo = BlobField(read_only=True)
    case_ids = serializers.PrimaryKeyRelatedField(source='cases', many=True, read_only=True)
    arrest_ids = serializers.PrimaryKeyRelatedField(source='arrests', many=True, read_only=True)

    class Meta:
        model = Suspect
        fields = [
            'id', 'first_name', 'middle_name', 'last_name', 'dob', 'gender', 'phone_number', 'nin',
            'nationality', 'address', 'occupation', 'status', 'fingerprints', 'photo',
            'created_by', 'updated_by', 'case_ids', 'arrest_ids', 'created_at', 'updated_at',
        ]


class ArrestPayloadSerializer(serializers.Serializer):
    arrest_date = serializers.DateField()
    location = optional_clean_text(255)
    officer_name = optional_clean_text(128)
    suspect_id = serializers.PrimaryKeyRelatedField(
        queryset=Suspect.objects.all(), source='suspect', required=False, allow_null=True
    )
    notes = optional_clean_text()


class ArrestSerializer(serializers.ModelSerializer):
    suspect_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Arrest
        fields = ['id', 'arrest_date', 'location', 'officer_name', 'suspect_id', 'notes', 'created_at', 'updated_at']
