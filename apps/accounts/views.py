import logging

from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema

from .serializers import (
    UserSerializer,
    AuthStartSerializer,
    SendOtpSerializer,
    VerifyOtpSerializer,
    PaymentMethodSerializer,
    LogoutSerializer,
)
from .services import (
    start_auth,
    send_otp,
    verify_otp,
    issue_session_tokens,
    add_payment_method,
    AuthStartError,
    InvalidPhoneError,
    OtpError,
    InvalidCardError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class UserResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    user = UserSerializer()


class SessionResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    user = UserSerializer()
    sessionToken = serializers.CharField()
    tokens = TokensResponseSerializer()


class SuccessResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()


class ErrorResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    error = serializers.CharField()


def error_response(message, http_status=status.HTTP_400_BAD_REQUEST):
    return Response({'success': False, 'error': message}, status=http_status)


@extend_schema(
    request=AuthStartSerializer,
    responses={200: UserResponseSerializer, 201: UserResponseSerializer, 400: ErrorResponseSerializer},
    description="Create or fetch a user by phone or email to begin phone verification.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def start(request):
    """Start the auth flow."""
    serializer = AuthStartSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user, created = start_auth(**serializer.validated_data)
    except (AuthStartError, InvalidPhoneError) as e:
        return error_response(str(e))

    return Response(
        {'success': True, 'user': UserSerializer(user).data},
        status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
    )


@extend_schema(
    request=SendOtpSerializer,
    responses={200: SuccessResponseSerializer, 400: ErrorResponseSerializer},
    description="Send a one-time verification code to a phone number.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def send_code(request):
    """Send an OTP code."""
    serializer = SendOtpSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid phone number')

    try:
        send_otp(phone=serializer.validated_data['phone'])
    except InvalidPhoneError as e:
        return error_response(str(e))

    return Response({'success': True})


@extend_schema(
    request=VerifyOtpSerializer,
    responses={200: SessionResponseSerializer, 400: ErrorResponseSerializer},
    description="Verify a phone code and receive a session token.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def verify_code(request):
    """Verify an OTP code and open a session."""
    serializer = VerifyOtpSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = verify_otp(
            phone=serializer.validated_data['phone'],
            code=serializer.validated_data['code'],
        )
    except (OtpError, InvalidPhoneError) as e:
        return error_response(str(e))

    tokens = issue_session_tokens(user)
    return Response({
        'success': True,
        'user': UserSerializer(user).data,
        'sessionToken': tokens['access'],
        'tokens': tokens,
    })


@extend_schema(
    responses={200: UserResponseSerializer},
    description="Return the user behind the presented session token.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def session(request):
    """Verify the current session."""
    return Response({'success': True, 'user': UserSerializer(request.user).data})


@extend_schema(
    request=LogoutSerializer,
    responses={200: SuccessResponseSerializer, 400: ErrorResponseSerializer},
    description="End the session. The client discards its tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    """Logout; validates the refresh token if one is sent."""
    serializer = LogoutSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    refresh_token = serializer.validated_data.get('refresh')
    if refresh_token:
        try:
            RefreshToken(refresh_token)
        except TokenError:
            return error_response('Invalid token')

    logger.info("User %s logged out", request.user.id)
    return Response({'success': True})


@extend_schema(
    request=PaymentMethodSerializer,
    responses={200: UserResponseSerializer, 400: ErrorResponseSerializer},
    description="Register a (mock) payment card for the current user.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def payment_method(request):
    """Add a payment method."""
    serializer = PaymentMethodSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('All card fields are required')

    try:
        user = add_payment_method(user_id=request.user.id, card=serializer.validated_data)
    except InvalidCardError as e:
        return error_response(str(e))
    except UserNotFoundError as e:
        return error_response(str(e), status.HTTP_404_NOT_FOUND)

    return Response({'success': True, 'user': UserSerializer(user).data})
