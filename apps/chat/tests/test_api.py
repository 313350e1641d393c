import pytest
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestParseEndpoint:
    """Tests for POST /api/chat/parse/"""

    def test_parse(self, customer_client):
        response = customer_client.post(
            reverse('chat:parse'),
            {'message': 'Aș dori un mojito mare fără gheață'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {
            'success': True,
            'drink': 'Mojito',
            'options': {'size': 'large', 'ice': False},
        }

    def test_unrecognized(self, customer_client):
        response = customer_client.post(
            reverse('chat:parse'), {'message': 'ceva nedefinit'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False

    def test_no_tokens(self, broke_client):
        response = broke_client.post(
            reverse('chat:parse'), {'message': 'un mojito'}, format='json'
        )

        assert response.status_code == status.HTTP_402_PAYMENT_REQUIRED
        assert response.data['insufficientTokens'] is True

    def test_missing_message(self, customer_client):
        response = customer_client.post(reverse('chat:parse'), {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
