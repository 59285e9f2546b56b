"""
Public audition sign-up API. No session: the tenant comes from the date/slot.
"""
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from auditions import services
from auditions.serializers import AuditionSlotSerializer, PublicAuditionDateSerializer, SignUpSerializer


@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def public_audition_date_view(request, audition_date_id):
    """
    GET /api/public/auditions/{auditionDateId}
    Date metadata plus {id, slotTime, isAvailable} per slot.
    """
    audition_date = services.get_public_audition_date(audition_date_id)
    return Response(PublicAuditionDateSerializer(audition_date).data)


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def public_signup_view(request, slot_id):
    """
    POST /api/public/auditions/{slotId}/signup
    Body: {firstName, lastName, email}
    200 slot | 404 unknown slot | 422 taken/unavailable | 400 bad email
    """
    serializer = SignUpSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    slot = services.sign_up(slot_id, data['firstName'], data['lastName'], data['email'])
    return Response(AuditionSlotSerializer(slot).data)
