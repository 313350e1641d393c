from rest_framework import serializers
from .models import Order, OrderStatus, DrinkSize, DrinkStrength


# =============================================================================
# Input Serializers
# =============================================================================

class OrderOptionsSerializer(serializers.Serializer):
    """
    Closed options record for a drink.

    Fields:
        size (str): small, medium or large (default medium)
        ice (bool): Serve with ice (default true)
        strength (str): Optional light, normal or strong
        extras (list[str]): Optional extra requests
    """

    size = serializers.ChoiceField(choices=DrinkSize.choices, default=DrinkSize.MEDIUM)
    ice = serializers.BooleanField(default=True)
    strength = serializers.ChoiceField(
        choices=DrinkStrength.choices,
        required=False,
        allow_null=True,
        default=None
    )
    extras = serializers.ListField(
        child=serializers.CharField(max_length=50),
        required=False,
        default=list,
        max_length=10
    )


class OrderCreateSerializer(serializers.Serializer):
    """Validate input for placing an order."""

    drink = serializers.CharField(max_length=100)
    options = OrderOptionsSerializer(required=False)

    def validate_drink(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Drink is required')
        return value

    def to_order_kwargs(self):
        """Keyword arguments for ``create_order`` with defaults filled in."""
        options = self.validated_data.get('options')
        if options is None:
            options = OrderOptionsSerializer(data={})
            options.is_valid(raise_exception=True)
            options = options.validated_data
        return {
            'drink': self.validated_data['drink'],
            'size': options['size'],
            'ice': options['ice'],
            'strength': options.get('strength'),
            'extras': options.get('extras') or [],
        }


class OrderFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for order listing.

    Query Parameters:
        status (list[str]): Statuses to include (repeat or comma-separate)
        user (UUID): Filter by owner (barmen only)
    """

    status = serializers.ListField(
        child=serializers.ChoiceField(choices=OrderStatus.choices),
        required=False
    )
    user = serializers.UUIDField(required=False)


class OrderStatusUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=OrderStatus.choices)


class VerifyPickupSerializer(serializers.Serializer):
    """
    Validate input for pickup code verification.

    Fields:
        code (str): Code presented by the customer
        order_id (UUID): Optional order to check the code against
    """

    code = serializers.CharField(max_length=16, trim_whitespace=True)
    order_id = serializers.UUIDField(required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class OrderSerializer(serializers.ModelSerializer):
    """Serializer for orders."""

    userId = serializers.UUIDField(source='user_id', read_only=True)
    customerName = serializers.SerializerMethodField()
    options = serializers.SerializerMethodField()
    pickupCode = serializers.CharField(source='pickup_code', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Order
        fields = [
            'id',
            'userId',
            'customerName',
            'drink',
            'options',
            'status',
            'pickupCode',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields

    def get_customerName(self, obj):
        return obj.user.get_display_name()

    def get_options(self, obj):
        return obj.options
