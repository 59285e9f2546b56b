"""
Authentication views
"""
import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken

from accounts.serializers import ChangePasswordSerializer, LoginSerializer, MeSerializer
from core.exceptions import ValidationError

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([AllowAny])
def login_view(request):
    """
    POST /api/auth/login
    Login with email and password
    Returns: {accessToken, refreshToken, user}

    Status codes:
    - 200: Success
    - 400: Invalid request format (missing fields, invalid email format)
    - 401: Invalid credentials or inactive account
    """
    serializer = LoginSerializer(data=request.data, context={'request': request})
    serializer.is_valid(raise_exception=True)

    member = serializer.validated_data['member']
    refresh = RefreshToken.for_user(member)
    logger.info('Login: member=%s org=%s', member.id, member.organization_id)

    return Response({
        'accessToken': str(refresh.access_token),
        'refreshToken': str(refresh),
        'user': MeSerializer(member).data,
    }, status=status.HTTP_200_OK)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout_view(request):
    """
    POST /api/auth/logout
    Tokens are stateless; the client discards them.
    """
    return Response({'detail': 'Successfully logged out.'}, status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def me_view(request):
    """
    GET /api/auth/me
    Current member info (session validation for the admin console).
    """
    return Response(MeSerializer(request.user).data, status=status.HTTP_200_OK)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def change_password_view(request):
    """
    POST /api/auth/change-password
    Body: { currentPassword, newPassword }
    """
    serializer = ChangePasswordSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    member = request.user
    if not member.check_password(serializer.validated_data['currentPassword']):
        raise ValidationError.for_field('currentPassword', 'Current password is incorrect')

    member.set_password(serializer.validated_data['newPassword'])
    member.save(update_fields=['password'])
    return Response({'detail': 'Password changed successfully'}, status=status.HTTP_200_OK)
