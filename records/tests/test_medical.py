import pytest

from records.models import Case, Examination, HealthFacility, HealthPractitioner, Victim

pytestmark = pytest.mark.django_db


@pytest.fixture
def facility(db):
    return HealthFacility.objects.create(name='Mulago Hospital', location='Kampala')


@pytest.fixture
def practitioner(facility):
    return HealthPractitioner.objects.create(
        first_name='Ruth', last_name='Nambi', profession='Police surgeon', facility=facility
    )


@pytest.fixture
def exam_refs(facility, practitioner):
    victim = Victim.objects.create(first_name='Jane', last_name='Doe', created_by='admin')
    case = Case.objects.create(case_number='CR-77', title='Defilement')
    return {
        'victim_id': victim.id,
        'case_id': case.id,
        'facility_id': facility.id,
        'practitioner_id': practitioner.id,
    }


def test_examination_requires_all_links(api, exam_refs):
    payload = dict(exam_refs, exam_date='2024-04-02')
    del payload['practitioner_id']
    del payload['case_id']
    r = api.post('/api/examination', payload, format='json')
    assert r.status_code == 400
    assert set(r.data['data']) == {'practitioner_id', 'case_id'}
    assert Examination.objects.count() == 0


def test_examination_output_embeds_linked_records(api, exam_refs):
    r = api.post(
        '/api/examination',
        dict(exam_refs, exam_date='2024-04-02', findings='Bruising', consent_given=True),
        format='json',
    )
    assert r.status_code == 201, r.data
    data = r.data['data']
    assert data['victim']['first_name'] == 'Jane'
    assert data['case']['case_number'] == 'CR-77'
    assert data['facility']['name'] == 'Mulago Hospital'
    assert data['practitioner']['profession'] == 'Police surgeon'
    assert data['consent_given'] is True


def test_explicit_false_is_written(api, exam_refs):
    r = api.post('/api/examination', dict(exam_refs, exam_date='2024-04-02', consent_given=True), format='json')
    pk = r.data['data']['id']

    r = api.put(f'/api/examination/{pk}', {'consent_given': False}, format='json')
    assert r.status_code == 200
    assert r.data['data']['consent_given'] is False
    assert r.data['data']['exam_date'] == '2024-04-02'


def test_search_examinations_by_facility_and_date(api, exam_refs):
    other = HealthFacility.objects.create(name='Nsambya Hospital')
    api.post('/api/examination', dict(exam_refs, exam_date='2024-04-02'), format='json')
    api.post('/api/examination', dict(exam_refs, exam_date='2024-05-10', facility_id=other.id), format='json')

    r = api.get('/api/examinations/search', {'facility_id': exam_refs['facility_id']})
    assert [e['exam_date'] for e in r.data['data']] == ['2024-04-02']

    r = api.get('/api/examinations/search', {'min_exam_date': '2024-05-01'})
    assert [e['facility_id'] for e in r.data['data']] == [other.id]


def test_practitioner_search_by_facility(api, facility, practitioner):
    HealthPractitioner.objects.create(first_name='Paul', last_name='Mugisha')
    r = api.get('/api/health-practitioners/search', {'facility_id': facility.id})
    assert [p['id'] for p in r.data['data']] == [practitioner.id]

    r = api.get('/api/health-practitioners/search', {'profession': 'surgeon'})
    assert r.data['pagination']['total_items'] == 1


def test_facility_crud(api):
    r = api.post('/api/health-facility', {'name': 'Kiruddu Hospital', 'location': 'Makindye'}, format='json')
    assert r.status_code == 201
    pk = r.data['data']['id']
    r = api.put(f'/api/health-facility/{pk}', {'contact': '0800100066'}, format='json')
    assert r.data['data']['contact'] == '0800100066'
    assert r.data['data']['name'] == 'Kiruddu Hospital'
    assert api.delete(f'/api/health-facility/{pk}').status_code == 200
    assert api.get('/api/health-facilities').data['data'] == []
