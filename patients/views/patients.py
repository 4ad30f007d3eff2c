"""
Patient appointment endpoints.

Reads go through :mod:`patients.services.queries` and writes through
:mod:`patients.services.commands`; the views themselves only validate input
and map results to HTTP responses.  Any authenticated staff account may
use them.
"""
from __future__ import annotations

from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from patients.serializers.patient import PatientWriteSerializer
from patients.services import commands, queries

NOT_FOUND = {'ok': False, 'message': 'Patient not found'}

patient_schema = openapi.Schema(
    type=openapi.TYPE_OBJECT,
    properties={
        'id': openapi.Schema(type=openapi.TYPE_INTEGER),
        'patient_name': openapi.Schema(type=openapi.TYPE_STRING),
        'doctor_name': openapi.Schema(type=openapi.TYPE_STRING),
        'date': openapi.Schema(type=openapi.TYPE_STRING, format=openapi.FORMAT_DATE),
        'time': openapi.Schema(type=openapi.TYPE_STRING, example='14:30:00'),
        'status': openapi.Schema(type=openapi.TYPE_STRING, enum=['Pending', 'Completed', 'Cancelled']),
        'createdAt': openapi.Schema(type=openapi.TYPE_STRING, format=openapi.FORMAT_DATETIME),
        'updatedAt': openapi.Schema(type=openapi.TYPE_STRING, format=openapi.FORMAT_DATETIME),
    },
)


@swagger_auto_schema(
    method='get',
    operation_summary='Returns the list of all patients',
    responses={200: openapi.Schema(type=openapi.TYPE_ARRAY, items=patient_schema)},
)
@swagger_auto_schema(
    method='post',
    operation_summary='Create a new patient appointment',
    request_body=PatientWriteSerializer,
    responses={201: patient_schema, 400: 'Bad request'},
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def patient_list(request):
    if request.method == 'GET':
        return Response(queries.list_patients())
    s = PatientWriteSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    patient = commands.create_patient(s.validated_data)
    return Response(patient, status=status.HTTP_201_CREATED)


@swagger_auto_schema(
    method='put',
    operation_summary='Update a patient appointment',
    request_body=PatientWriteSerializer,
    responses={200: patient_schema, 400: 'Bad request', 404: 'Patient not found'},
)
@swagger_auto_schema(
    method='delete',
    operation_summary='Remove a patient appointment',
    responses={200: 'The patient was deleted', 404: 'Patient not found'},
)
@api_view(['PUT', 'DELETE'])
@permission_classes([IsAuthenticated])
def patient_detail(request, pk: int):
    if request.method == 'PUT':
        # only the supplied fields change
        s = PatientWriteSerializer(data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        patient = commands.update_patient(pk, s.validated_data)
        if patient is None:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(patient)
    # DELETE
    if not commands.delete_patient(pk):
        return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
    return Response({'message': 'Patient deleted'})
