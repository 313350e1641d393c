import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.events.models import Event


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def customer(db):
    """Create and return a client holding 2 tokens."""
    return User.objects.create_user(
        email='ana@example.com',
        name='Ana Client',
        phone='0722123456',
        tokens=2,
    )


@pytest.fixture
def broke_customer(db):
    """Create and return a client with no tokens."""
    return User.objects.create_user(
        email='broke@example.com',
        name='Broke Client',
        phone='0733123456',
    )


@pytest.fixture
def customer_client(customer):
    """Return API client authenticated as the customer."""
    client = APIClient()
    refresh = RefreshToken.for_user(customer)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def event(db):
    """Create and return an active event."""
    return Event.objects.create(
        name='Summer Vibes Party @ Club Spontan',
        qr_code='EVT-SUMMER-VIBES',
    )


@pytest.fixture
def inactive_event(db):
    """Create and return an event that is no longer open."""
    return Event.objects.create(
        name='Last Season Closing',
        qr_code='EVT-CLOSED',
        is_active=False,
    )
