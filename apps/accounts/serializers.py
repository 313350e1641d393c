from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """User profile as returned by auth endpoints."""

    paymentVerified = serializers.BooleanField(source='payment_verified', read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'name',
            'email',
            'phone',
            'verified',
            'role',
            'paymentVerified',
            'tokens',
            'created_at',
        ]
        read_only_fields = fields


class AuthStartSerializer(serializers.Serializer):
    """Identity details for starting the auth flow."""

    name = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    email = serializers.EmailField(required=False, allow_null=True, default=None)
    phone = serializers.CharField(max_length=20, required=False, allow_null=True, default=None)

    def validate(self, attrs):
        if not attrs.get('email') and not attrs.get('phone'):
            raise serializers.ValidationError('Phone or email is required')
        return attrs


class SendOtpSerializer(serializers.Serializer):
    phone = serializers.CharField(min_length=9, max_length=20)


class VerifyOtpSerializer(serializers.Serializer):
    phone = serializers.CharField(min_length=9, max_length=20)
    code = serializers.RegexField(r'^\d{4}$', error_messages={'invalid': 'Code must be 4 digits'})


class PaymentMethodSerializer(serializers.Serializer):
    """Mock card details; never persisted."""

    number = serializers.CharField(max_length=32)
    name = serializers.CharField(max_length=100)
    cvv = serializers.CharField(max_length=4)
    expiry = serializers.CharField(max_length=7)


class LogoutSerializer(serializers.Serializer):
    refresh = serializers.CharField(required=False, help_text="Refresh token of the session")
