import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a client with an empty balance."""
    return User.objects.create_user(
        email='ana@example.com',
        name='Ana Client',
        phone='0722123456',
        verified=True,
    )


@pytest.fixture
def funded_user(db):
    """Create and return a client holding 3 tokens."""
    return User.objects.create_user(
        email='bogdan@example.com',
        name='Bogdan Client',
        phone='0733123456',
        verified=True,
        tokens=3,
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return API client authenticated as the empty-balance user."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
