from rest_framework import serializers

from ..models import Case, Charge, PoliceOfficer, PolicePost, Suspect, Victim, Witness
from .fields import CleanCharField, optional_clean_text, optional_text
from .victims import VictimBriefSerializer


class ChargePayloadSerializer(serializers.Serializer):
    charge_title = CleanCharField(max_length=255)
    description = optional_clean_text()
    severity = optional_text(64)


class InlineChargeSerializer(ChargePayloadSerializer):
    """Charge created together with a case; the title is always required."""

    def validate(self, attrs):
        if not attrs.get('charge_title'):
            raise serializers.ValidationError({'charge_title': 'This field is required.'})
        return attrs


class ChargeSerializer(serializers.ModelSerializer):
    class Meta:
        model = Charge
        fields = ['id', 'charge_title', 'description', 'severity', 'created_at', 'updated_at']


class WitnessPayloadSerializer(serializers.Serializer):
    first_name = CleanCharField(max_length=50)
    last_name = optional_clean_text(50)
    phone_number = optional_text(32)
    address = optional_clean_text(255)
    statement = optional_clean_text()


class WitnessSerializer(serializers.ModelSerializer):
    class Meta:
        model = Witness
        fields = ['id', 'first_name', 'last_name', 'phone_number', 'address', 'statement', 'created_at', 'updated_at']


class CasePayloadSerializer(serializers.Serializer):
    case_number = serializers.CharField(max_length=64)
    title = CleanCharField(max_length=255)
    description = optional_clean_text()
    status = optional_text(50)
    date_opened = serializers.DateField(required=False, allow_null=True)
    officer_id = serializers.PrimaryKeyRelatedField(
        queryset=PoliceOfficer.objects.all(), source='officer', required=False, allow_null=True
    )
    police_post_id = serializers.PrimaryKeyRelatedField(
        queryset=PolicePost.objects.all(), source='police_post', required=False, allow_null=True
    )
    suspect_ids = serializers.PrimaryKeyRelatedField(queryset=Suspect.objects.all(), many=True, required=False)
    victim_ids = serializers.PrimaryKeyRelatedField(queryset=Victim.objects.all(), many=True, required=False)
    witness_ids = serializers.PrimaryKeyRelatedField(queryset=Witness.objects.all(), many=True, required=False)
    charge_ids = serializers.PrimaryKeyRelatedField(queryset=Charge.objects.all(), many=True, required=False)
    charges = InlineChargeSerializer(many=True, required=False)


class CaseSerializer(serializers.ModelSerializer):
    officer_id = serializers.IntegerField(read_only=True)
    police_post_id = serializers.IntegerField(read_only=True)
    suspect_ids = serializers.PrimaryKeyRelatedField(source='suspects', many=True, read_only=True)
    witness_ids = serializers.PrimaryKeyRelatedField(source='witnesses', many=True, read_only=True)
    victims = VictimBriefSerializer(many=True, read_only=True)
    charges = ChargeSerializer(many=True, read_only=True)

    class Meta:
        model = Case
        fields = [
            'id', 'case_number', 'title', 'description', 'status', 'date_opened', 'officer_id',
            'police_post_id', 'suspect_ids', 'witness_ids', 'victims', 'charges', 'created_at', 'updated_at',
        ]
