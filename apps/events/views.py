from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.tokens.responses import insufficient_tokens_response
from apps.tokens.services import InsufficientTokensError, UserNotFoundError, get_balance

from .serializers import CheckInInputSerializer, CheckInSerializer, CheckInResponseSerializer
from .services import check_in as check_in_service, EventNotFoundError, AlreadyCheckedInError


@extend_schema(
    request=CheckInInputSerializer,
    responses={201: CheckInResponseSerializer},
    description="Check in to an event by its QR code. Costs one token.",
    tags=['events'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def check_in(request):
    """Check the current user in to an event."""
    serializer = CheckInInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        record = check_in_service(
            qr_code=serializer.validated_data['qr_code'],
            user_id=request.user.id
        )
    except InsufficientTokensError as e:
        return insufficient_tokens_response(e)
    except (EventNotFoundError, UserNotFoundError) as e:
        return Response({'success': False, 'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except AlreadyCheckedInError as e:
        return Response({'success': False, 'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'success': True,
        'eventName': record.event.name,
        'tokens': get_balance(user_id=request.user.id),
        'checkIn': CheckInSerializer(record).data,
    }, status=status.HTTP_201_CREATED)
