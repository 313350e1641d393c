import pytest
from django.conf import settings
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User, OtpCode


# =============================================================================
# Auth Start Tests
# =============================================================================

@pytest.mark.django_db
class TestAuthStart:
    """Tests for POST /api/auth/start/"""

    def test_start_creates_user(self, api_client):
        url = reverse('accounts:start')
        response = api_client.post(url, {'name': 'Ion', 'phone': '0744555666'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['success'] is True
        assert response.data['user']['phone'] == '0744555666'
        assert response.data['user']['tokens'] == 0
        assert User.objects.filter(phone='0744555666').exists()

    def test_start_existing_user(self, api_client, user):
        url = reverse('accounts:start')
        response = api_client.post(url, {'phone': user.phone}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user']['id'] == str(user.id)

    def test_start_without_identity(self, api_client):
        url = reverse('accounts:start')
        response = api_client.post(url, {'name': 'Nobody'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False


# =============================================================================
# OTP Tests
# =============================================================================

@pytest.mark.django_db
class TestOtp:
    """Tests for /api/auth/otp/send/ and /api/auth/otp/verify/"""

    def test_send_code(self, api_client):
        url = reverse('accounts:send-otp')
        response = api_client.post(url, {'phone': '0733987654'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'success': True}
        assert OtpCode.objects.filter(phone='0733987654').exists()

    def test_send_code_short_phone(self, api_client):
        url = reverse('accounts:send-otp')
        response = api_client.post(url, {'phone': '0722'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Invalid phone number'

    def test_verify_code_returns_session(self, api_client, otp_code):
        url = reverse('accounts:verify-otp')
        response = api_client.post(url, {'phone': otp_code.phone, 'code': '4321'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['user']['verified'] is True
        assert response.data['sessionToken'] == response.data['tokens']['access']

    def test_verify_wrong_code(self, api_client, otp_code):
        url = reverse('accounts:verify-otp')
        response = api_client.post(url, {'phone': otp_code.phone, 'code': '1111'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Incorrect code'

    def test_verify_expired_code(self, api_client, expired_otp_code):
        url = reverse('accounts:verify-otp')
        response = api_client.post(
            url, {'phone': expired_otp_code.phone, 'code': '1234'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'expired' in response.data['error']

    def test_verify_malformed_code(self, api_client, otp_code):
        url = reverse('accounts:verify-otp')
        response = api_client.post(url, {'phone': otp_code.phone, 'code': '12'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'code' in response.data['errors']

    def test_full_flow_session_token_authenticates(self, api_client):
        api_client.post(reverse('accounts:send-otp'), {'phone': '0744555666'}, format='json')
        code = OtpCode.objects.get(phone='0744555666').code

        response = api_client.post(
            reverse('accounts:verify-otp'), {'phone': '0744555666', 'code': code}, format='json'
        )
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['sessionToken']}")
        session = api_client.get(reverse('accounts:session'))

        assert session.status_code == status.HTTP_200_OK
        assert session.data['user']['phone'] == '0744555666'


# =============================================================================
# Session Tests
# =============================================================================

@pytest.mark.django_db
class TestSession:

    def test_session_authenticated(self, authenticated_client, user):
        response = authenticated_client.get(reverse('accounts:session'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user']['id'] == str(user.id)

    def test_session_unauthenticated(self, api_client):
        response = api_client.get(reverse('accounts:session'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['success'] is False

    def test_logout(self, authenticated_client):
        response = authenticated_client.post(reverse('accounts:logout'), {}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True

    def test_logout_invalid_refresh(self, authenticated_client):
        response = authenticated_client.post(
            reverse('accounts:logout'), {'refresh': 'not-a-token'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# Payment Method Tests
# =============================================================================

@pytest.mark.django_db
class TestPaymentMethod:

    def test_add_payment_method(self, authenticated_client, user, card):
        response = authenticated_client.post(reverse('accounts:payment-method'), card, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user']['paymentVerified'] is True
        user.refresh_from_db()
        assert user.payment_verified is True

    def test_incomplete_card(self, authenticated_client, card):
        del card['expiry']
        response = authenticated_client.post(reverse('accounts:payment-method'), card, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'All card fields are required'


@pytest.mark.django_db
def test_health_check(api_client):
    response = api_client.get(reverse('health-check'))

    assert response.status_code == status.HTTP_200_OK
    assert response.data['success'] is True


@pytest.mark.django_db
def test_plain_http_is_served_without_redirect(api_client):
    assert settings.SECURE_SSL_REDIRECT is False

    response = api_client.get(reverse('tokens:packages'), secure=False)

    # Unauthenticated, so 401 rather than a 301 to https
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
