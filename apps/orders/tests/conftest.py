import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.orders.models import Order, OrderStatus


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def customer(db):
    """Create and return a client holding 5 tokens."""
    return User.objects.create_user(
        email='ana@example.com',
        name='Ana Client',
        phone='0722123456',
        verified=True,
        tokens=5,
    )


@pytest.fixture
def broke_customer(db):
    """Create and return a client with no tokens."""
    return User.objects.create_user(
        email='broke@example.com',
        name='Broke Client',
        phone='0733123456',
        verified=True,
    )


@pytest.fixture
def other_customer(db):
    """Create and return another client holding 5 tokens."""
    return User.objects.create_user(
        email='dan@example.com',
        name='Dan Client',
        phone='0744123456',
        verified=True,
        tokens=5,
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
def customer_client(customer):
    """Return API client authenticated as the customer."""
    return _client_for(customer)


@pytest.fixture
def broke_client(broke_customer):
    """Return API client authenticated as the customer with no tokens."""
    return _client_for(broke_customer)


@pytest.fixture
def other_client(other_customer):
    """Return API client authenticated as the other customer."""
    return _client_for(other_customer)


@pytest.fixture
def barman_client(barman):
    """Return API client authenticated as the barman."""
    return _client_for(barman)


def _make_order(user, status, pickup_code, drink='Mojito'):
    return Order.objects.create(
        user=user,
        drink=drink,
        status=status,
        pickup_code=pickup_code,
    )


@pytest.fixture
def pending_order(customer):
    """A pending order owned by the customer."""
    return _make_order(customer, OrderStatus.PENDING, 'PEND01')


@pytest.fixture
def preparing_order(customer):
    """An order being prepared."""
    return _make_order(customer, OrderStatus.PREPARING, 'PREP01', drink='Gin Tonic')


@pytest.fixture
def ready_order(customer):
    """An order waiting at the bar."""
    return _make_order(customer, OrderStatus.READY, 'READY1', drink='Cuba Libre')


@pytest.fixture
def picked_order(customer):
    """A handed-over order."""
    return _make_order(customer, OrderStatus.PICKED, 'DONE01', drink='Bere')


@pytest.fixture
def other_pending_order(other_customer):
    """A pending order owned by another customer."""
    return _make_order(other_customer, OrderStatus.PENDING, 'OTHER1', drink='Vin')
