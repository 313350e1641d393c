import pytest
from uuid import uuid4

from apps.chat.services import parse_message, UnrecognizedDrinkError
from apps.tokens.services import InsufficientTokensError, UserNotFoundError


@pytest.mark.django_db
class TestParseMessage:
    """Tests for the balance-gated parse_message service."""

    def test_parse_does_not_debit(self, customer):
        intent = parse_message(text="un mojito mare", user_id=customer.id)

        assert intent.drink == 'Mojito'
        assert intent.size == 'large'
        customer.refresh_from_db()
        assert customer.tokens == 2

    def test_empty_balance_checked_before_parsing(self, broke_customer):
        with pytest.raises(InsufficientTokensError) as exc_info:
            parse_message(text="ceva nedefinit", user_id=broke_customer.id)

        assert exc_info.value.balance == 0

    def test_unknown_drink(self, customer):
        with pytest.raises(UnrecognizedDrinkError):
            parse_message(text="ceva nedefinit", user_id=customer.id)

    def test_unknown_user(self, db):
        with pytest.raises(UserNotFoundError):
            parse_message(text="un mojito", user_id=uuid4())
