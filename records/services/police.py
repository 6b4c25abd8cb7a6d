from django.contrib.auth.hashers import make_password

from ..models import PoliceOfficer, PolicePost, PoliceRole
from ..serializers.police import (
    PoliceOfficerPayloadSerializer,
    PoliceOfficerSerializer,
    PolicePostPayloadSerializer,
    PolicePostSerializer,
    PoliceRolePayloadSerializer,
    PoliceRoleSerializer,
)
from .access import RecordAccess
from .filters import Contains, IntegerExact


class PolicePostAccess(RecordAccess):
    model = PolicePost
    label = 'Police post'
    payload_serializer_class = PolicePostPayloadSerializer
    output_serializer_class = PolicePostSerializer
    filters = (
        Contains('name'),
        Contains('location'),
    )


class PoliceRoleAccess(RecordAccess):
    model = PoliceRole
    label = 'Police role'
    payload_serializer_class = PoliceRolePayloadSerializer
    output_serializer_class = PoliceRoleSerializer
    filters = (Contains('name'),)
    conflict_message = 'A role with this name already exists'


class PoliceOfficerAccess(RecordAccess):
    """Officer accounts; passwords are hashed on create and update."""
    model = PoliceOfficer
    label = 'Police officer'
    payload_serializer_class = PoliceOfficerPayloadSerializer
    output_serializer_class = PoliceOfficerSerializer
    associations = {'role_ids': 'roles'}
    filters = (
        Contains('first_name'),
        Contains('last_name'),
        Contains('badge_no'),
        Contains('username'),
        IntegerExact('post_id'),
    )
    conflict_message = 'An officer with this username or email already exists'

    def get_queryset(self):
        return super().get_queryset().prefetch_related('roles')

    def perform_create(self, fields):
        return PoliceOfficer.objects.create_user(**fields)

    def prepare_update(self, fields):
        if 'password' in fields:
            fields['password'] = make_password(fields['password'])
        return fields


posts = PolicePostAccess()
roles = PoliceRoleAccess()
officers = PoliceOfficerAccess()
