"""
Authentication endpoints.

Officers log in with their username or email and receive a JWT pair;
refresh tokens rotate on use and the previous one is blacklisted.
Kept apart from :mod:`records.authentication` so DRF can import the
authentication class without pulling in views.
"""
from __future__ import annotations

import logging

from django.db.models import Q
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.throttling import AnonRateThrottle
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework_simplejwt.serializers import TokenRefreshSerializer
from rest_framework_simplejwt.tokens import RefreshToken

from .authentication import claims_for
from .exceptions import InvalidInput
from .models import PoliceOfficer
from .serializers.auth import LoginSerializer, RefreshSerializer
from .services.partial import validate_payload
from .tokens import issue_pair
from .views.base import success

logger = logging.getLogger(__name__)


class LoginRateThrottle(AnonRateThrottle):
    scope = 'login'


def find_officer(identifier: str) -> PoliceOfficer | None:
    return (
        PoliceOfficer.objects.filter(Q(username=identifier) | Q(email=identifier))
        .prefetch_related('roles')
        .first()
    )


@api_view(['POST'])
@permission_classes([AllowAny])
@throttle_classes([LoginRateThrottle])
def login_view(request):
    """Exchange ``identifier`` + ``password`` for access and refresh tokens."""
    vd = validate_payload(LoginSerializer, request.data)
    identifier = vd['identifier'].strip()

    officer = find_officer(identifier)
    if officer is None or not officer.is_active or not officer.check_password(vd['password']):
        logger.warning("failed login for %r from %s", identifier, request.META.get('REMOTE_ADDR'))
        raise AuthenticationFailed('Invalid credentials')

    logger.info("officer id=%s logged in", officer.pk)
    return success('Login successful', issue_pair(officer))


@api_view(['POST'])
@permission_classes([AllowAny])
def refresh_view(request):
    """Return a new token pair; the submitted refresh token is blacklisted."""
    vd = validate_payload(RefreshSerializer, request.data)
    serializer = TokenRefreshSerializer(data={'refresh': vd['refresh_token']})
    try:
        serializer.is_valid(raise_exception=True)
    except TokenError as e:
        raise InvalidToken(e.args[0])
    data = serializer.validated_data
    return success('Token refreshed', {
        'access_token': data['access'],
        'refresh_token': data.get('refresh', vd['refresh_token']),
    })


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout_view(request):
    """Blacklist one of the caller's refresh tokens."""
    vd = validate_payload(RefreshSerializer, request.data)
    try:
        token = RefreshToken(vd['refresh_token'])
        if str(token.get('user_id')) != str(request.user.pk):
            raise InvalidInput('Refresh token does not belong to the current officer')
        token.blacklist()
    except TokenError as e:
        raise InvalidInput(str(e))
    return success('Logged out', None)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def me_view(request):
    return success('Authenticated officer', claims_for(request))
