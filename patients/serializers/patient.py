import html

import bleach
from rest_framework import serializers

from patients.models import Patient


class PatientWriteSerializer(serializers.Serializer):
    patient_name = serializers.CharField(max_length=255)
    doctor_name = serializers.CharField(max_length=255)
    date = serializers.DateField()
    time = serializers.TimeField(input_formats=['%H:%M:%S', '%H:%M'])
    status = serializers.ChoiceField(choices=[c[0] for c in Patient.STATUS_CHOICES], required=False)

    def _clean_text(self, v, label):
        # bleach entity-escapes the text it keeps; names are stored as plain text
        v = html.unescape(bleach.clean((v or '').strip(), tags=set(), strip=True)).strip()
        if not v:
            raise serializers.ValidationError(f'{label} is required')
        return v

    def validate_patient_name(self, v):
        return self._clean_text(v, 'patient_name')

    def validate_doctor_name(self, v):
        return self._clean_text(v, 'doctor_name')
