import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, OtpCode, UserRole


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a verified client with a phone number."""
    return User.objects.create_user(
        email='ana@example.com',
        name='Ana Client',
        phone='0722123456',
        verified=True,
    )


@pytest.fixture
def barman(db):
    """Create and return a barman."""
    return User.objects.create_user(
        email='barman@spontan.app',
        name='Alex Barman',
        phone='0700000000',
        role=UserRole.BARMAN,
        verified=True,
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return API client authenticated as the client user."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def otp_code(db):
    """A live code for an unregistered phone."""
    return OtpCode.objects.create(
        phone='0733987654',
        code='4321',
        expires_at=timezone.now() + timedelta(minutes=5),
    )


@pytest.fixture
def expired_otp_code(db):
    """An expired code for the client user's phone."""
    return OtpCode.objects.create(
        phone='0722123456',
        code='1234',
        expires_at=timezone.now() - timedelta(seconds=1),
    )


@pytest.fixture
def card():
    """Complete mock card details."""
    return {
        'number': '4111111111111111',
        'name': 'ANA CLIENT',
        'cvv': '123',
        'expiry': '12/29',
    }
