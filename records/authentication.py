"""
Bearer JWT authentication for the API.

Subclasses simplejwt's ``JWTAuthentication`` so the project settings
have a stable import path, and exposes the decoded claims of the
current request through :func:`claims_for`.
"""
from __future__ import annotations

from rest_framework_simplejwt.authentication import JWTAuthentication


class OfficerJWTAuthentication(JWTAuthentication):
    """Accepts ``Authorization: Bearer <access token>``."""

    www_authenticate_realm = 'gbvmis'


def claims_for(request) -> dict:
    token = getattr(request, 'auth', None)
    if token is None:
        return {}
    return {
        'user_id': request.user.pk,
        'email': token.get('email', ''),
        'roles': token.get('roles', []),
    }
