"""
Write side of the patient records.

Each command runs in its own transaction.  Any exception rolls the
transaction back and propagates to the caller.  The cached patient list
is dropped from an ``on_commit`` hook, so it only happens once the
outermost transaction commits a change.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from django.db import transaction

from patients.models import Patient
from patients.services.queries import invalidate_patient_list, serialize_patient

logger = logging.getLogger(__name__)

WRITABLE_FIELDS = ('patient_name', 'doctor_name', 'date', 'time', 'status')


def _writable(data: Mapping[str, Any]) -> dict:
    return {k: data[k] for k in WRITABLE_FIELDS if k in data}


def create_patient(data: Mapping[str, Any]) -> dict:
    try:
        with transaction.atomic():
            patient = Patient.objects.create(**_writable(data))
            transaction.on_commit(invalidate_patient_list)
    except Exception:
        logger.warning("create_patient rolled back", exc_info=True)
        raise
    logger.info("patient %s created", patient.id)
    return serialize_patient(patient)


def update_patient(pk: int, data: Mapping[str, Any]) -> Optional[dict]:
    """Apply the supplied fields to patient ``pk``.

    Returns ``None`` when no such patient exists; nothing is written and the
    cache is left alone in that case.
    """
    try:
        with transaction.atomic():
            patient = Patient.objects.select_for_update().filter(pk=pk).first()
            if patient is None:
                return None
            fields = _writable(data)
            for field, value in fields.items():
                setattr(patient, field, value)
            patient.save()
            patient.refresh_from_db()
            transaction.on_commit(invalidate_patient_list)
    except Exception:
        logger.warning("update_patient(%s) rolled back", pk, exc_info=True)
        raise
    logger.info("patient %s updated (%s)", pk, ', '.join(sorted(fields)) or 'no fields')
    return serialize_patient(patient)


def delete_patient(pk: int) -> bool:
    try:
        with transaction.atomic():
            deleted, _ = Patient.objects.filter(pk=pk).delete()
            if deleted:
                transaction.on_commit(invalidate_patient_list)
    except Exception:
        logger.warning("delete_patient(%s) rolled back", pk, exc_info=True)
        raise
    if not deleted:
        return False
    logger.info("patient %s deleted", pk)
    return True
