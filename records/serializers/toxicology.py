from rest_framework import serializers

from ..models import (
    HealthPractitioner,
    Person,
    PersonSummary,
    PersonSymptom,
    PoliceOfficer,
    PoliceReport,
    PostMortemSummary,
    Symptom,
    ToxicologyForensicReport,
    Witness,
)
from .fields import CleanCharField, optional_clean_text, optional_text


class SymptomPayloadSerializer(serializers.Serializer):
    name = CleanCharField(max_length=128)


class SymptomSerializer(serializers.ModelSerializer):
    class Meta:
        model = Symptom
        fields = ['id', 'name', 'created_at', 'updated_at']


class PostMortemSummaryPayloadSerializer(serializers.Serializer):
    description = CleanCharField()


class PostMortemSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = PostMortemSummary
        fields = ['id', 'description', 'created_at', 'updated_at']


# ---------------------------------------------------------------------
# Nested report payload
# ---------------------------------------------------------------------
class PersonSymptomPayloadSerializer(serializers.Serializer):
    symptom_id = serializers.PrimaryKeyRelatedField(queryset=Symptom.objects.all(), source='symptom')
    state = optional_text(64)

    def validate(self, attrs):
        if 'symptom' not in attrs:
            raise serializers.ValidationError({'symptom_id': 'This field is required.'})
        return attrs


class PersonSummaryPayloadSerializer(serializers.Serializer):
    post_mortem_summary_id = serializers.PrimaryKeyRelatedField(
        queryset=PostMortemSummary.objects.all(), source='post_mortem_summary'
    )
    state = optional_text(64)

    def validate(self, attrs):
        if 'post_mortem_summary' not in attrs:
            raise serializers.ValidationError({'post_mortem_summary_id': 'This field is required.'})
        return attrs


class PersonPayloadSerializer(serializers.Serializer):
    name = CleanCharField(max_length=255)
    occupation = optional_clean_text(128)
    habits = serializers.ListField(child=serializers.CharField(max_length=128), required=False)
    approximate_age = serializers.IntegerField(min_value=0, max_value=150, required=False, allow_null=True)
    gender = optional_text(16)
    category = serializers.ChoiceField(choices=Person.CATEGORY_CHOICES, required=False, allow_blank=True)
    date_hour_of_post_mortem = serializers.DateTimeField(required=False, allow_null=True)
    person_symptoms = PersonSymptomPayloadSerializer(many=True, required=False)
    person_summaries = PersonSummaryPayloadSerializer(many=True, required=False)


class PoliceReportPayloadSerializer(serializers.Serializer):
    officer_id = serializers.PrimaryKeyRelatedField(queryset=PoliceOfficer.objects.all(), source='officer')
    date = serializers.DateField(required=False, allow_null=True)
    is_person_poisoned = serializers.BooleanField(required=False)
    is_suicide_or_accident = serializers.BooleanField(required=False)
    is_deceased_on_treatment = serializers.BooleanField(required=False)
    treatment_details = optional_clean_text()


class ToxicologyReportPayloadSerializer(serializers.Serializer):
    """Report with its person and police report submitted in one body."""
    person = PersonPayloadSerializer()
    police_report = PoliceReportPayloadSerializer()
    witness_id = serializers.PrimaryKeyRelatedField(
        queryset=Witness.objects.all(), source='witness', required=False, allow_null=True
    )
    practitioner_id = serializers.PrimaryKeyRelatedField(
        queryset=HealthPractitioner.objects.all(), source='practitioner'
    )
    date_onset = serializers.DateField(required=False, allow_null=True)
    date_hour_of_death = serializers.DateTimeField(required=False, allow_null=True)
    date_hour_of_burial = serializers.DateTimeField(required=False, allow_null=True)
    date_hour_of_exhumation = serializers.DateTimeField(required=False, allow_null=True)
    specimen_sealed_by = optional_clean_text(128)
    witnessed_by = optional_clean_text(128)
    handed_over_to = optional_clean_text(128)


# ---------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------
class PersonSymptomSerializer(serializers.ModelSerializer):
    symptom_id = serializers.IntegerField(read_only=True)
    symptom_name = serializers.CharField(source='symptom.name', read_only=True)

    class Meta:
        model = PersonSymptom
        fields = ['id', 'symptom_id', 'symptom_name', 'state']


class PersonSummarySerializer(serializers.ModelSerializer):
    post_mortem_summary_id = serializers.IntegerField(read_only=True)
    description = serializers.CharField(source='post_mortem_summary.description', read_only=True)

    class Meta:
        model = PersonSummary
        fields = ['id', 'post_mortem_summary_id', 'description', 'state']


class PersonSerializer(serializers.ModelSerializer):
    person_symptoms = PersonSymptomSerializer(many=True, read_only=True)
    summaries = PersonSummarySerializer(many=True, read_only=True)

    class Meta:
        model = Person
        fields = [
            'id', 'name', 'occupation', 'habits', 'approximate_age', 'gender', 'category',
            'date_hour_of_post_mortem', 'person_symptoms', 'summaries',
        ]


class PoliceReportSerializer(serializers.ModelSerializer):
    officer_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = PoliceReport
        fields = [
            'id', 'officer_id', 'date', 'is_person_poisoned', 'is_suicide_or_accident',
            'is_deceased_on_treatment', 'treatment_details',
        ]


class ToxicologyReportSerializer(serializers.ModelSerializer):
    person = PersonSerializer(read_only=True)
    police_report = PoliceReportSerializer(read_only=True)
    witness_id = serializers.IntegerField(read_only=True)
    practitioner_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = ToxicologyForensicReport
        fields = [
            'id', 'person', 'police_report', 'witness_id', 'practitioner_id', 'date_onset',
            'date_hour_of_death', 'date_hour_of_burial', 'date_hour_of_exhumation',
            'specimen_sealed_by', 'witnessed_by', 'handed_over_to', 'created_at', 'updated_at',
        ]
