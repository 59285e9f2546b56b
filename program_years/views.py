"""
Program years API.
Reads are open to any member of the organization; writes are Admin only.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import IsAdmin, IsOrganizationMember
from core.exceptions import ForbiddenError
from core.utils import organization_id_for
from program_years import services
from program_years.serializers import ProgramYearSerializer, ProgramYearWriteSerializer


def _write_args(request):
    serializer = ProgramYearWriteSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    return {'name': data['name'], 'start_date': data['startDate'], 'end_date': data['endDate']}


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsOrganizationMember])
def program_years_view(request):
    """
    GET  /api/program-years
    POST /api/program-years  {name, startDate, endDate}  (Admin)
    """
    org_id = organization_id_for(request.user)
    if request.method == 'GET':
        return Response(ProgramYearSerializer(services.list_program_years(org_id), many=True).data)

    if not IsAdmin().has_permission(request, None):
        raise ForbiddenError('Admin access required')
    year = services.create_program_year(org_id, **_write_args(request))
    return Response(ProgramYearSerializer(year).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated, IsOrganizationMember])
def program_year_detail_view(request, pk):
    """
    GET /api/program-years/{id}
    PUT /api/program-years/{id}  (Admin)
    """
    org_id = organization_id_for(request.user)
    if request.method == 'GET':
        return Response(ProgramYearSerializer(services.get_program_year(pk, org_id)).data)

    if not IsAdmin().has_permission(request, None):
        raise ForbiddenError('Admin access required')
    year = services.update_program_year(pk, org_id, **_write_args(request))
    return Response(ProgramYearSerializer(year).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdmin])
def program_year_archive_view(request, pk):
    """POST /api/program-years/{id}/archive"""
    year = services.archive_program_year(pk, organization_id_for(request.user))
    return Response(ProgramYearSerializer(year).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdmin])
def program_year_activate_view(request, pk):
    """POST /api/program-years/{id}/activate"""
    year = services.activate_program_year(pk, organization_id_for(request.user))
    return Response(ProgramYearSerializer(year).data)
