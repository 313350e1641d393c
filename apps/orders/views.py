import logging

from rest_framework import viewsets, status, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsBarman
from apps.tokens.responses import insufficient_tokens_response
from apps.tokens.services import InsufficientTokensError, UserNotFoundError

from .models import Order, OrderStatus
from .permissions import IsOrderOwnerOrBarman
from .serializers import (
    OrderSerializer,
    OrderCreateSerializer,
    OrderFilterSerializer,
    OrderStatusUpdateSerializer,
    VerifyPickupSerializer,
)
from .services import (
    create_order,
    transition_order,
    list_orders,
    verify_pickup_code,
    OrderNotFoundError,
    InvalidTransitionError,
    CodeMismatchError,
    OrderNotReadyError,
    PickupCodeExhaustedError,
)

logger = logging.getLogger(__name__)


# Response serializers for API documentation
class OrderResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    order = OrderSerializer()


class OrderListResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    orders = OrderSerializer(many=True)


class ErrorResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()
    error = drf_serializers.CharField()
    insufficientTokens = drf_serializers.BooleanField(required=False)


def error_response(message, http_status=status.HTTP_400_BAD_REQUEST):
    return Response({'success': False, 'error': message}, status=http_status)


class OrderViewSet(viewsets.GenericViewSet):
    """
    ViewSet for drink orders.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Orders, filterable by status (clients see only their own)
    create: Place an order (costs one token)
    retrieve: Get a specific order
    update_status: Move an order through its lifecycle
    verify_pickup: Check a customer's pickup code (barman only)
    """

    queryset = Order.objects.select_related('user')
    serializer_class = OrderSerializer
    permission_classes = [IsAuthenticated, IsOrderOwnerOrBarman]

    def get_permissions(self):
        """Set permissions based on action."""
        if self.action == 'verify_pickup':
            return [IsAuthenticated(), IsBarman()]
        return super().get_permissions()

    @extend_schema(
        parameters=[OrderFilterSerializer],
        responses={200: OrderListResponseSerializer},
        tags=['orders'],
    )
    def list(self, request):
        """List orders."""
        statuses = []
        for value in request.query_params.getlist('status'):
            statuses.extend(s for s in value.split(',') if s)

        filter_data = {'status': statuses}
        if request.query_params.get('user'):
            filter_data['user'] = request.query_params['user']

        filter_serializer = OrderFilterSerializer(data=filter_data)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if request.user.is_barman:
            user_id = params.get('user')
        else:
            user_id = request.user.id

        orders = list_orders(statuses=params.get('status'), user_id=user_id)
        return Response({
            'success': True,
            'orders': OrderSerializer(orders, many=True).data,
        })

    @extend_schema(
        request=OrderCreateSerializer,
        responses={
            201: OrderResponseSerializer,
            400: ErrorResponseSerializer,
            402: ErrorResponseSerializer,
        },
        tags=['orders'],
    )
    def create(self, request):
        """Place an order, paying one token."""
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            order = create_order(user_id=request.user.id, **serializer.to_order_kwargs())
        except InsufficientTokensError as e:
            return insufficient_tokens_response(e)
        except UserNotFoundError as e:
            return error_response(str(e), status.HTTP_404_NOT_FOUND)
        except PickupCodeExhaustedError as e:
            logger.error("Order creation failed for user %s: %s", request.user.id, e)
            return error_response(
                'Could not place the order, please try again',
                status.HTTP_503_SERVICE_UNAVAILABLE
            )

        return Response(
            {'success': True, 'order': OrderSerializer(order).data},
            status=status.HTTP_201_CREATED
        )

    @extend_schema(responses={200: OrderResponseSerializer}, tags=['orders'])
    def retrieve(self, request, pk=None):
        """Get an order."""
        order = self.get_object()
        return Response({'success': True, 'order': OrderSerializer(order).data})

    @extend_schema(
        request=OrderStatusUpdateSerializer,
        responses={
            200: OrderResponseSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['orders'],
    )
    @action(detail=True, methods=['post'], url_path='status', url_name='status')
    def update_status(self, request, pk=None):
        """
        Change order status.

        POST /api/orders/{id}/status/
        Body: {"status": "preparing"}

        Barmen may make any legal move; clients may only cancel their own
        orders.
        """
        order = self.get_object()

        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        to_status = serializer.validated_data['status']

        if not request.user.is_barman and to_status != OrderStatus.CANCELLED:
            return error_response(
                'Only barman accounts can change order status',
                status.HTTP_403_FORBIDDEN
            )

        try:
            order = transition_order(order_id=order.id, to_status=to_status)
        except OrderNotFoundError as e:
            return error_response(str(e), status.HTTP_404_NOT_FOUND)
        except InvalidTransitionError as e:
            return error_response(str(e))

        return Response({'success': True, 'order': OrderSerializer(order).data})

    @extend_schema(
        request=VerifyPickupSerializer,
        responses={
            200: OrderResponseSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['orders'],
    )
    @action(detail=False, methods=['post'], url_path='verify-pickup')
    def verify_pickup(self, request):
        """
        Verify a pickup code.

        POST /api/orders/verify-pickup/
        Body: {"code": "A1B2C3", "order_id": "optional"}

        Does not change the order; follow up with a move to ``picked``.
        """
        serializer = VerifyPickupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            order = verify_pickup_code(
                code=serializer.validated_data['code'],
                order_id=serializer.validated_data.get('order_id'),
            )
        except OrderNotFoundError as e:
            return error_response(str(e), status.HTTP_404_NOT_FOUND)
        except (CodeMismatchError, OrderNotReadyError) as e:
            return error_response(str(e))

        return Response({'success': True, 'order': OrderSerializer(order).data})
