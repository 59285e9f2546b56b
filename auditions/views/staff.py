"""
Staff audition API (Admin only).
Endpoints:
- GET    /api/audition-dates?programYearId=        Dates of a program year, each with ordered slots
- POST   /api/audition-dates                       Create date + slots
- GET    /api/audition-dates/{id}                  One date with slots
- DELETE /api/audition-dates/{id}                  Delete slots, then date
- GET    /api/audition-slots?auditionDateId=       Ordered slots of one date
- PUT    /api/audition-slots/{slotId}/status       Review status
- PUT    /api/audition-slots/{slotId}/notes        Review notes
  (also nested as /api/audition-dates/{id}/slots/{slotId}/status|notes)
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import IsAdmin
from auditions import services
from auditions.serializers import (
    AuditionDateSerializer,
    AuditionSlotSerializer,
    CreateAuditionDateSerializer,
    SlotNotesSerializer,
    SlotStatusSerializer,
)
from core.utils import organization_id_for, parse_int_param, parse_uuid_param


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsAdmin])
def audition_dates_view(request):
    org_id = organization_id_for(request.user)

    if request.method == 'GET':
        program_year_id = parse_int_param(request.query_params.get('programYearId'), 'programYearId')
        dates = services.list_audition_dates(program_year_id, org_id)
        return Response(AuditionDateSerializer(dates, many=True).data)

    serializer = CreateAuditionDateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    audition_date = services.create_audition_date(
        org_id,
        program_year_id=data['programYearId'],
        date=data['date'],
        start_time=data['startTime'],
        end_time=data['endTime'],
        block_length_minutes=data['blockLengthMinutes'],
    )
    response = Response(AuditionDateSerializer(audition_date).data, status=status.HTTP_201_CREATED)
    response['Location'] = f'/api/audition-dates/{audition_date.id}'
    return response


@api_view(['GET', 'DELETE'])
@permission_classes([IsAuthenticated, IsAdmin])
def audition_date_detail_view(request, pk):
    org_id = organization_id_for(request.user)

    if request.method == 'GET':
        audition_date = services.get_audition_date(pk, org_id)
        return Response(AuditionDateSerializer(audition_date).data)

    services.delete_audition_date(pk, org_id)
    return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdmin])
def audition_slots_view(request):
    audition_date_id = parse_uuid_param(request.query_params.get('auditionDateId'), 'auditionDateId')
    slots = services.list_slots(audition_date_id, organization_id_for(request.user))
    return Response(AuditionSlotSerializer(slots, many=True).data)


@api_view(['PUT', 'PATCH'])
@permission_classes([IsAuthenticated, IsAdmin])
def slot_status_view(request, slot_id, audition_date_id=None):
    serializer = SlotStatusSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    slot = services.update_slot_status(
        slot_id,
        organization_id_for(request.user),
        serializer.validated_data['status'],
        audition_date_id=audition_date_id,
    )
    return Response(AuditionSlotSerializer(slot).data)


@api_view(['PUT', 'PATCH'])
@permission_classes([IsAuthenticated, IsAdmin])
def slot_notes_view(request, slot_id, audition_date_id=None):
    serializer = SlotNotesSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    slot = services.update_slot_notes(
        slot_id,
        organization_id_for(request.user),
        serializer.validated_data.get('notes'),
        audition_date_id=audition_date_id,
    )
    return Response(AuditionSlotSerializer(slot).data)
