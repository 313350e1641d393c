from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    PurchaseTokensInputSerializer,
    TokenPackageSerializer,
    TokenPurchaseSerializer,
)
from .services import (
    get_balance,
    purchase_tokens,
    list_packages,
    list_purchases,
    UserNotFoundError,
    InvalidPackageError,
)


# Response serializers for API documentation
class BalanceResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    tokens = drf_serializers.IntegerField()


class PurchaseResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    purchase = TokenPurchaseSerializer()
    tokens = drf_serializers.IntegerField()


class HistoryResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    purchases = TokenPurchaseSerializer(many=True)


class PackagesResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    packages = TokenPackageSerializer(many=True)


class ErrorResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    error = drf_serializers.CharField()


@extend_schema(
    responses={200: BalanceResponseSerializer, 404: ErrorResponseSerializer},
    description="Get the current user's token balance.",
    tags=['tokens'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def balance(request):
    """Get token balance."""
    try:
        tokens = get_balance(user_id=request.user.id)
    except UserNotFoundError as e:
        return Response({'success': False, 'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response({'success': True, 'tokens': tokens})


@extend_schema(
    responses={200: PackagesResponseSerializer},
    description="List the fixed token packages.",
    tags=['tokens'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def packages(request):
    """List token packages."""
    serializer = TokenPackageSerializer(list_packages(), many=True)
    return Response({'success': True, 'packages': serializer.data})


@extend_schema(
    request=PurchaseTokensInputSerializer,
    responses={
        201: PurchaseResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Buy a token package. Bonus tokens are credited on top.",
    tags=['tokens'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def purchase(request):
    """
    Buy a token package.

    POST /api/tokens/purchase/
    Body: {"package_id": "500"}
    """
    input_serializer = PurchaseTokensInputSerializer(data=request.data)
    input_serializer.is_valid(raise_exception=True)

    try:
        token_purchase = purchase_tokens(
            user_id=request.user.id,
            package_id=input_serializer.validated_data['package_id']
        )
    except InvalidPackageError as e:
        return Response({'success': False, 'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except UserNotFoundError as e:
        return Response({'success': False, 'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response({
        'success': True,
        'purchase': TokenPurchaseSerializer(token_purchase).data,
        'tokens': get_balance(user_id=request.user.id),
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: HistoryResponseSerializer},
    description="Get the current user's token purchases, newest first.",
    tags=['tokens'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def history(request):
    """Get purchase history."""
    try:
        purchases = list_purchases(user_id=request.user.id)
    except UserNotFoundError as e:
        return Response({'success': False, 'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    # Newest first for display
    serializer = TokenPurchaseSerializer(purchases.order_by('-created_at'), many=True)
    return Response({'success': True, 'purchases': serializer.data})
