from io import StringIO

import pytest
from django.core.cache import cache
from django.core.management import call_command
from rest_framework.test import APIClient

from patients.models import Patient, User
from patients.services.queries import PATIENT_LIST_CACHE_KEY

pytestmark = pytest.mark.django_db


def test_burst_throttle_returns_429(settings):
    settings.API_BURST_RATE = '3/min'
    client = APIClient()
    client.force_authenticate(user=User.objects.create_user(username='nurse', password='P@ssw0rd1'))

    codes = [client.get('/api/patients').status_code for _ in range(4)]

    assert codes == [200, 200, 200, 429]


def test_throttle_off_when_rate_unset():
    client = APIClient()
    client.force_authenticate(user=User.objects.create_user(username='nurse', password='P@ssw0rd1'))
    assert all(client.get('/api/patients').status_code == 200 for _ in range(10))


def test_unhandled_error_is_wrapped(monkeypatch):
    from patients.services import queries

    def broken():
        raise RuntimeError('db exploded')

    monkeypatch.setattr(queries, 'list_patients', broken)
    client = APIClient()
    client.force_authenticate(user=User.objects.create_user(username='nurse', password='P@ssw0rd1'))

    r = client.get('/api/patients')

    assert r.status_code == 500
    assert r.data['ok'] is False
    assert r.data['error']['code'] == 'server_error'


def test_ensure_default_admin_is_idempotent():
    out = StringIO()
    call_command('ensure_default_admin', stdout=out)
    call_command('ensure_default_admin', stdout=out)

    admins = User.objects.filter(username='admin')
    assert admins.count() == 1
    assert admins.get().role == 'admin'
    assert admins.get().check_password('password123')


def test_ensure_default_admin_promotes_and_resets():
    User.objects.create_user(username='chief', password='old-pass-1', role='user')

    call_command('ensure_default_admin', '--username', 'chief', '--password', 'n3w-Pass!', '--reset-password',
                 stdout=StringIO())

    chief = User.objects.get(username='chief')
    assert chief.role == 'admin'
    assert chief.check_password('n3w-Pass!')


def test_warm_patient_cache():
    Patient.objects.create(patient_name='A', doctor_name='B', date='2026-01-01', time='08:00')
    out = StringIO()

    call_command('warm_patient_cache', stdout=out)

    cached = cache.get(PATIENT_LIST_CACHE_KEY)
    assert [p['patient_name'] for p in cached] == ['A']
    assert 'Cached 1 patients' in out.getvalue()
