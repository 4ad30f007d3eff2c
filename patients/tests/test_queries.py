from datetime import date, time

import pytest
from django.core.cache import cache

from patients.models import Patient
from patients.services import queries

pytestmark = pytest.mark.django_db


def make_patient(**overrides):
    data = {
        'patient_name': 'John Doe',
        'doctor_name': 'Dr. Smith',
        'date': date(2026, 1, 25),
        'time': time(14, 30),
    }
    data.update(overrides)
    return Patient.objects.create(**data)


def test_cache_miss_loads_from_database_and_fills_cache():
    p = make_patient()
    assert cache.get(queries.PATIENT_LIST_CACHE_KEY) is None

    result = queries.list_patients()

    assert [r['id'] for r in result] == [p.id]
    assert cache.get(queries.PATIENT_LIST_CACHE_KEY) == result


def test_cache_hit_skips_database(django_assert_num_queries):
    make_patient()
    first = queries.list_patients()

    with django_assert_num_queries(0):
        second = queries.list_patients()
    assert second == first


def test_cached_list_is_served_until_invalidated():
    make_patient(patient_name='Alice')
    queries.list_patients()
    # written behind the services' back, so the cache does not know yet
    make_patient(patient_name='Bob')
    assert [r['patient_name'] for r in queries.list_patients()] == ['Alice']

    queries.invalidate_patient_list()

    assert [r['patient_name'] for r in queries.list_patients()] == ['Alice', 'Bob']


def test_empty_list_is_cached():
    assert queries.list_patients() == []
    assert cache.get(queries.PATIENT_LIST_CACHE_KEY) == []


def test_cache_entry_uses_configured_ttl(settings, monkeypatch):
    settings.PATIENT_LIST_CACHE_TTL = 5
    calls = []
    monkeypatch.setattr(queries.cache, 'set', lambda key, value, timeout: calls.append((key, timeout)))

    queries.list_patients()

    assert calls == [(queries.PATIENT_LIST_CACHE_KEY, 5)]


def test_serialize_patient_wire_format():
    p = make_patient(time=time(9, 5, 7), status=Patient.STATUS_COMPLETED)
    data = queries.serialize_patient(p)
    assert data['date'] == '2026-01-25'
    assert data['time'] == '09:05:07'
    assert data['status'] == 'Completed'
    assert set(data) == {
        'id', 'patient_name', 'doctor_name', 'date', 'time', 'status', 'createdAt', 'updatedAt',
    }


def test_list_is_ordered_by_id():
    ids = [make_patient(patient_name=n).id for n in ('C', 'A', 'B')]
    assert [r['id'] for r in queries.list_patients()] == sorted(ids)
