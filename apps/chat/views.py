from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.tokens.responses import insufficient_tokens_response
from apps.tokens.services import InsufficientTokensError, UserNotFoundError

from .serializers import ParseMessageSerializer, DrinkIntentSerializer
from .services import parse_message, UnrecognizedDrinkError


@extend_schema(
    request=ParseMessageSerializer,
    responses={200: DrinkIntentSerializer},
    description="Extract a drink and its options from a chat message.",
    tags=['chat'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def parse(request):
    """Parse a chat message into a drink order."""
    serializer = ParseMessageSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        intent = parse_message(
            text=serializer.validated_data['message'],
            user_id=request.user.id
        )
    except InsufficientTokensError as e:
        return insufficient_tokens_response(e)
    except UnrecognizedDrinkError as e:
        return Response({'success': False, 'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except UserNotFoundError as e:
        return Response({'success': False, 'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response({
        'success': True,
        'drink': intent.drink,
        'options': intent.options,
    })
