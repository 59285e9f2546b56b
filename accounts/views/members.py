"""
Members management API - Admin only.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts import services
from accounts.permissions import IsAdmin
from accounts.serializers import MemberSerializer, MemberWriteSerializer
from core.utils import organization_id_for


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsAdmin])
def members_list_or_create_view(request):
    """
    GET  /api/members?search=
    POST /api/members  {firstName, lastName, email, role, password?}
    """
    org_id = organization_id_for(request.user)
    if request.method == 'GET':
        members = services.list_members(org_id, request.query_params.get('search'))
        return Response(MemberSerializer(members, many=True).data)

    serializer = MemberWriteSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    member = services.create_member(
        org_id,
        first_name=data['firstName'],
        last_name=data['lastName'],
        email=data['email'],
        role=data['role'],
        password=data.get('password') or None,
    )
    return Response(MemberSerializer(member).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated, IsAdmin])
def member_detail_view(request, pk):
    """
    GET /api/members/{id}
    PUT /api/members/{id}  {firstName, lastName, email, role, isActive, notificationsEnabled?}
    """
    org_id = organization_id_for(request.user)
    if request.method == 'GET':
        return Response(MemberSerializer(services.get_member(pk, org_id)).data)

    serializer = MemberWriteSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    member = services.update_member(
        pk,
        org_id,
        first_name=data['firstName'],
        last_name=data['lastName'],
        email=data['email'],
        role=data['role'],
        is_active=data['isActive'],
        notifications_enabled=data.get('notificationsEnabled'),
    )
    return Response(MemberSerializer(member).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdmin])
def member_deactivate_view(request, pk):
    """POST /api/members/{id}/deactivate"""
    member = services.deactivate_member(pk, organization_id_for(request.user))
    return Response(MemberSerializer(member).data)
