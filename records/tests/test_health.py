import pytest

pytestmark = pytest.mark.django_db


def test_healthz_reports_database(client):
    r = client.get('/healthz')
    assert r.status_code == 200
    assert r.json() == {'status': 'success', 'message': 'ok', 'data': {'db': True}}


def test_unknown_route_uses_error_envelope(client):
    r = client.get('/api/no-such-thing/at/all')
    assert r.status_code == 404
    body = r.json()
    assert body['status'] == 'error'
    assert 'not found' in body['message']
