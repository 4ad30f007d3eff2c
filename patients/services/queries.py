"""
Read side of the patient records.

The full patient list is served through a read-through cache entry that
lives for ``PATIENT_LIST_CACHE_TTL`` seconds or until the next write
(see :mod:`patients.services.commands`).
"""
from __future__ import annotations

import logging

from django.conf import settings
from django.core.cache import cache

from patients.models import Patient

logger = logging.getLogger(__name__)

PATIENT_LIST_CACHE_KEY = 'patients:all'


def serialize_patient(patient: Patient) -> dict:
    return {
        'id': patient.id,
        'patient_name': patient.patient_name,
        'doctor_name': patient.doctor_name,
        'date': patient.date.isoformat() if patient.date else None,
        'time': patient.time.strftime('%H:%M:%S') if patient.time else None,
        'status': patient.status,
        'createdAt': patient.created_at.isoformat() if patient.created_at else None,
        'updatedAt': patient.updated_at.isoformat() if patient.updated_at else None,
    }


def load_patients() -> list[dict]:
    """Read every patient straight from the database."""
    return [serialize_patient(p) for p in Patient.objects.order_by('id')]


def list_patients() -> list[dict]:
    cached = cache.get(PATIENT_LIST_CACHE_KEY)
    if cached is not None:
        logger.info("patient list cache hit (%d records)", len(cached))
        return cached

    logger.info("patient list cache miss, loading from database")
    patients = load_patients()
    cache.set(PATIENT_LIST_CACHE_KEY, patients, settings.PATIENT_LIST_CACHE_TTL)
    return patients


def invalidate_patient_list() -> None:
    cache.delete(PATIENT_LIST_CACHE_KEY)
    logger.info("patient list cache invalidated")
