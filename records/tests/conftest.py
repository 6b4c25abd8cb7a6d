import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from records.models import PoliceOfficer, PoliceRole
from records.tokens import issue_pair

PASSWORD = 'Secret123'


@pytest.fixture(autouse=True)
def _reset_throttles():
    # throttle counters live in the locmem cache and would leak across tests
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def officer(db):
    role = PoliceRole.objects.create(name='Admin')
    o = PoliceOfficer.objects.create_user(
        username='jdoe', email='jdoe@example.com', password=PASSWORD, first_name='John', last_name='Doe'
    )
    o.roles.add(role)
    return o


@pytest.fixture
def api(officer):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_pair(officer)['access_token']}")
    return client
