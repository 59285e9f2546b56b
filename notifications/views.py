"""
Notification views for admins.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import IsAdmin
from core.utils import organization_id_for, parse_uuid_param
from notifications import services
from notifications.serializers import AuditionAnnouncementSerializer, RecipientSerializer


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdmin])
def audition_recipients_view(request):
    """
    GET /api/notifications/audition-recipients?auditionDateId=
    Members who would receive an announcement for the date.
    """
    audition_date_id = parse_uuid_param(request.query_params.get('auditionDateId'), 'auditionDateId')
    recipients = services.get_audition_recipients(audition_date_id, organization_id_for(request.user))
    return Response(RecipientSerializer(recipients, many=True).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdmin])
def audition_announcement_view(request):
    """
    POST /api/notifications/audition-announcement
    Body: {auditionDateId, subject, body}
    """
    serializer = AuditionAnnouncementSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    sent = services.send_audition_announcement(
        data['auditionDateId'],
        organization_id_for(request.user),
        data['subject'],
        data['body'],
    )
    return Response({'sent': sent})
