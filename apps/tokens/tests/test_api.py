import pytest
from django.urls import reverse
from rest_framework import status
from apps.tokens.models import TokenPurchase
from apps.tokens.services import credit


@pytest.mark.django_db
class TestBalance:
    """Tests for GET /api/tokens/"""

    def test_balance(self, authenticated_client):
        response = authenticated_client.get(reverse('tokens:balance'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'success': True, 'tokens': 0}

    def test_balance_unauthenticated(self, api_client):
        response = api_client.get(reverse('tokens:balance'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestPackages:
    """Tests for GET /api/tokens/packages/"""

    def test_list_packages(self, authenticated_client):
        response = authenticated_client.get(reverse('tokens:packages'))

        assert response.status_code == status.HTTP_200_OK
        packages = response.data['packages']
        assert [p['id'] for p in packages] == ['50', '100', '300', '500']
        assert packages[-1]['bonusTokens'] == 25


@pytest.mark.django_db
class TestPurchase:
    """Tests for POST /api/tokens/purchase/"""

    def test_purchase_package(self, authenticated_client, user):
        response = authenticated_client.post(
            reverse('tokens:purchase'), {'package_id': '500'}, format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['success'] is True
        assert response.data['tokens'] == 525
        assert response.data['purchase']['bonusTokens'] == 25
        assert response.data['purchase']['userId'] == str(user.id)

    def test_purchase_unknown_package(self, authenticated_client, user):
        response = authenticated_client.post(
            reverse('tokens:purchase'), {'package_id': '42'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False
        user.refresh_from_db()
        assert user.tokens == 0
        assert not TokenPurchase.objects.exists()

    def test_purchase_missing_package(self, authenticated_client):
        response = authenticated_client.post(reverse('tokens:purchase'), {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'package_id' in response.data['errors']


@pytest.mark.django_db
class TestHistory:
    """Tests for GET /api/tokens/history/"""

    def test_history_only_own_purchases(self, authenticated_client, user, funded_user):
        credit(user_id=user.id, package_id='50')
        credit(user_id=funded_user.id, package_id='100')

        response = authenticated_client.get(reverse('tokens:history'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['purchases']) == 1
        assert response.data['purchases'][0]['packageId'] == '50'

    def test_empty_history(self, authenticated_client):
        response = authenticated_client.get(reverse('tokens:history'))

        assert response.data == {'success': True, 'purchases': []}
