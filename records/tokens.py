"""JWT pair issuance for police officers."""
from __future__ import annotations

from rest_framework_simplejwt.tokens import RefreshToken


class OfficerRefreshToken(RefreshToken):
    """Refresh token carrying ``email`` and ``roles`` claims.

    Claims added here are copied onto the derived access token.
    """

    @classmethod
    def for_user(cls, user):
        token = super().for_user(user)
        token['email'] = user.email
        token['roles'] = user.role_names()
        return token


def issue_pair(officer) -> dict[str, str]:
    refresh = OfficerRefreshToken.for_user(officer)
    return {'access_token': str(refresh.access_token), 'refresh_token': str(refresh)}
