from rest_framework import serializers

from ..models import PoliceOfficer, PolicePost, PoliceRole
from .fields import CleanCharField, optional_clean_text, optional_text


class PolicePostPayloadSerializer(serializers.Serializer):
    name = CleanCharField(max_length=255)
    location = optional_clean_text(255)
    contact = optional_text(64)


class PolicePostSerializer(serializers.ModelSerializer):
    class Meta:
        model = PolicePost
        fields = ['id', 'name', 'location', 'contact', 'created_at', 'updated_at']


class PoliceRolePayloadSerializer(serializers.Serializer):
    name = CleanCharField(max_length=100)


class PoliceRoleSerializer(serializers.ModelSerializer):
    class Meta:
        model = PoliceRole
        fields = ['id', 'name', 'created_at', 'updated_at']


class RoleBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = PoliceRole
        fields = ['id', 'name']


class PoliceOfficerPayloadSerializer(serializers.Serializer):
    """Officer account fields.

    Uniqueness of ``username``/``email`` is left to the database so a
    clash surfaces as a 409 rather than a field error.
    """
    first_name = CleanCharField(max_length=150)
    last_name = CleanCharField(max_length=150)
    rank = optional_text(64)
    badge_no = optional_text(64)
    phone = optional_text(32)
    username = serializers.RegexField(r'^[\w.@+-]+$', max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, max_length=128, write_only=True, trim_whitespace=False)
    post_id = serializers.PrimaryKeyRelatedField(
        queryset=PolicePost.objects.all(), source='post', required=False, allow_null=True
    )
    role_ids = serializers.PrimaryKeyRelatedField(queryset=PoliceRole.objects.all(), many=True, required=False)


class PoliceOfficerSerializer(serializers.ModelSerializer):
    post_id = serializers.IntegerField(read_only=True)
    roles = RoleBriefSerializer(many=True, read_only=True)

    class Meta:
        model = PoliceOfficer
        fields = [
            'id', 'first_name', 'last_name', 'rank', 'badge_no', 'phone', 'username', 'email',
            'post_id', 'roles', 'created_at', 'updated_at',
        ]
