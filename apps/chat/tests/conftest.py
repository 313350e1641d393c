import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


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
    return _client_for(customer)


@pytest.fixture
def broke_client(broke_customer):
    return _client_for(broke_customer)
