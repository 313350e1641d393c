from rest_framework import serializers
from .models import TokenPurchase


class PurchaseTokensInputSerializer(serializers.Serializer):
    """
    Validate input for buying a token package.

    Fields:
        package_id (str): Id from the fixed package list
    """

    package_id = serializers.CharField(max_length=20)


class TokenPackageSerializer(serializers.Serializer):
    id = serializers.CharField()
    tokens = serializers.IntegerField()
    price = serializers.IntegerField()
    bonusTokens = serializers.IntegerField(source='bonus_tokens')


class TokenPurchaseSerializer(serializers.ModelSerializer):
    """Serializer for token purchase ledger entries."""

    userId = serializers.UUIDField(source='user_id', read_only=True)
    packageId = serializers.CharField(source='package_id', read_only=True)
    bonusTokens = serializers.IntegerField(source='bonus_tokens', read_only=True)
    timestamp = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = TokenPurchase
        fields = [
            'id',
            'userId',
            'packageId',
            'amount',
            'price',
            'bonusTokens',
            'currency',
            'timestamp',
        ]
        read_only_fields = fields
