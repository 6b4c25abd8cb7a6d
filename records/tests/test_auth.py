import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from records.models import PoliceOfficer

from .conftest import PASSWORD

pytestmark = pytest.mark.django_db


def login(client, identifier, password=PASSWORD):
    return client.post(reverse('login_view'), {'identifier': identifier, 'password': password}, format='json')


def test_login_with_username_returns_token_pair(officer):
    r = login(APIClient(), 'jdoe')
    assert r.status_code == 200
    assert r.data['status'] == 'success'
    assert r.data['data']['access_token']
    assert r.data['data']['refresh_token']


def test_login_with_email(officer):
    r = login(APIClient(), 'jdoe@example.com')
    assert r.status_code == 200


def test_login_with_wrong_password_is_401(officer):
    r = login(APIClient(), 'jdoe', 'nope-nope')
    assert r.status_code == 401
    assert r.data['status'] == 'error'
    assert r.data['message'] == 'Invalid credentials'


def test_login_requires_identifier(officer):
    r = APIClient().post(reverse('login_view'), {'password': PASSWORD}, format='json')
    assert r.status_code == 400
    assert 'identifier' in r.data['data']


def test_protected_route_without_token_is_401():
    r = APIClient().get('/api/victims')
    assert r.status_code == 401
    assert r.data['status'] == 'error'


def test_protected_route_with_garbage_token_is_401():
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION='Bearer not-a-jwt')
    assert client.get('/api/victims').status_code == 401


def test_me_exposes_claims(officer):
    client = APIClient()
    access = login(client, 'jdoe').data['data']['access_token']
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {access}')
    r = client.get(reverse('me_view'))
    assert r.status_code == 200
    assert r.data['data'] == {'user_id': officer.id, 'email': 'jdoe@example.com', 'roles': ['Admin']}


def test_refresh_rotates_and_blacklists_previous(officer):
    client = APIClient()
    refresh = login(client, 'jdoe').data['data']['refresh_token']

    r = client.post(reverse('refresh_view'), {'refresh_token': refresh}, format='json')
    assert r.status_code == 200
    new_pair = r.data['data']
    assert new_pair['access_token'] and new_pair['refresh_token'] != refresh

    again = client.post(reverse('refresh_view'), {'refresh_token': refresh}, format='json')
    assert again.status_code == 401

    client.credentials(HTTP_AUTHORIZATION=f"Bearer {new_pair['access_token']}")
    assert client.get('/api/victims').status_code == 200


def test_refresh_rejects_garbage():
    r = APIClient().post(reverse('refresh_view'), {'refresh_token': 'abc'}, format='json')
    assert r.status_code == 401


def test_logout_blacklists_refresh_token(officer):
    client = APIClient()
    pair = login(client, 'jdoe').data['data']
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {pair['access_token']}")

    r = client.post(reverse('logout_view'), {'refresh_token': pair['refresh_token']}, format='json')
    assert r.status_code == 200

    r = client.post(reverse('refresh_view'), {'refresh_token': pair['refresh_token']}, format='json')
    assert r.status_code == 401


def test_email_login_matches_exact_address(officer):
    other = PoliceOfficer.objects.create_user(
        username='jdoe2', email='JDoe@example.com', password='Other1234'
    )
    client = APIClient()
    assert login(client, 'JDoe@example.com', 'Other1234').status_code == 200
    assert login(client, 'jdoe@example.com').status_code == 200

    access = login(client, 'JDoe@example.com', 'Other1234').data['data']['access_token']
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {access}')
    assert client.get(reverse('me_view')).data['data']['user_id'] == other.id
