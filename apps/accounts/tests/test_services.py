"""
Service layer unit tests for accounts app.

Tests cover:
- Auth start lookup and creation
- OTP issuing, expiry and verification
- Mock payment method registration
"""

import pytest
from uuid import uuid4

from apps.accounts.models import User, OtpCode, UserRole
from apps.accounts.services import (
    start_auth,
    send_otp,
    verify_otp,
    normalize_phone,
    issue_session_tokens,
    add_payment_method,
)
from apps.accounts.services.exceptions import (
    AuthStartError,
    InvalidPhoneError,
    OtpNotRequestedError,
    OtpExpiredError,
    OtpMismatchError,
    OtpError,
    UserNotFoundError,
    InvalidCardError,
)


class TestNormalizePhone:

    def test_strips_separators(self):
        assert normalize_phone('0722 123 456') == '0722123456'
        assert normalize_phone('0722-123-456') == '0722123456'

    def test_keeps_leading_plus(self):
        assert normalize_phone('+40 722 123 456') == '+40722123456'

    def test_short_phone_rejected(self):
        with pytest.raises(InvalidPhoneError):
            normalize_phone('07221234')

    def test_empty_phone_rejected(self):
        with pytest.raises(InvalidPhoneError):
            normalize_phone('')


@pytest.mark.django_db
class TestStartAuth:

    def test_creates_client_user(self):
        user, created = start_auth(name='Ion', phone='0744555666')

        assert created is True
        assert user.phone == '0744555666'
        assert user.role == UserRole.CLIENT
        assert user.tokens == 0
        assert user.verified is False
        assert not user.has_usable_password()

    def test_fetches_existing_user_by_phone(self, user):
        found, created = start_auth(phone='0722 123 456')

        assert created is False
        assert found.id == user.id

    def test_fetches_existing_user_by_email(self, user):
        found, created = start_auth(email='ANA@example.com')

        assert created is False
        assert found.id == user.id

    def test_attaches_phone_to_email_user(self, db):
        existing = User.objects.create_user(email='nophone@example.com')

        found, created = start_auth(email='nophone@example.com', phone='0755111222')

        assert created is False
        assert found.id == existing.id
        existing.refresh_from_db()
        assert existing.phone == '0755111222'

    def test_requires_phone_or_email(self, db):
        with pytest.raises(AuthStartError):
            start_auth(name='Nobody')


@pytest.mark.django_db
class TestOtp:

    def test_send_otp_stores_four_digit_code(self):
        otp = send_otp(phone='0733987654')

        assert len(otp.code) == 4
        assert otp.code.isdigit()
        assert 1000 <= int(otp.code) <= 9999
        assert OtpCode.objects.filter(phone='0733987654').count() == 1

    def test_send_otp_replaces_previous_code(self, otp_code):
        send_otp(phone=otp_code.phone)

        assert OtpCode.objects.filter(phone=otp_code.phone).count() == 1

    def test_send_otp_short_phone_rejected(self, db):
        with pytest.raises(InvalidPhoneError):
            send_otp(phone='12345')
        assert not OtpCode.objects.exists()

    def test_verify_creates_verified_client(self, otp_code):
        user = verify_otp(phone=otp_code.phone, code='4321')

        assert user.verified is True
        assert user.role == UserRole.CLIENT
        assert user.phone == otp_code.phone
        assert not OtpCode.objects.filter(phone=otp_code.phone).exists()

    def test_verify_marks_existing_user_verified(self, db):
        existing = User.objects.create_user(phone='0733987654')
        otp = send_otp(phone='0733987654')

        user = verify_otp(phone='0733987654', code=otp.code)

        assert user.id == existing.id
        assert user.verified is True

    def test_verify_without_code_requested(self, db):
        with pytest.raises(OtpNotRequestedError):
            verify_otp(phone='0733987654', code='1234')

    def test_verify_expired_code(self, expired_otp_code):
        with pytest.raises(OtpExpiredError):
            verify_otp(phone=expired_otp_code.phone, code='1234')

    def test_verify_wrong_code_keeps_code(self, otp_code):
        with pytest.raises(OtpMismatchError):
            verify_otp(phone=otp_code.phone, code='0000')

        assert OtpCode.objects.filter(phone=otp_code.phone).exists()
        assert not User.objects.filter(phone=otp_code.phone).exists()

    def test_otp_errors_share_base(self):
        assert issubclass(OtpNotRequestedError, OtpError)
        assert issubclass(OtpExpiredError, OtpError)
        assert issubclass(OtpMismatchError, OtpError)

    def test_issue_session_tokens(self, user):
        tokens = issue_session_tokens(user)

        assert set(tokens) == {'refresh', 'access'}


@pytest.mark.django_db
class TestPaymentMethod:

    def test_complete_card_verifies_payment(self, user, card):
        updated = add_payment_method(user_id=user.id, card=card)

        assert updated.payment_verified is True

    def test_missing_field_rejected(self, user, card):
        card['cvv'] = ''

        with pytest.raises(InvalidCardError):
            add_payment_method(user_id=user.id, card=card)

        user.refresh_from_db()
        assert user.payment_verified is False

    def test_unknown_user(self, db, card):
        with pytest.raises(UserNotFoundError):
            add_payment_method(user_id=uuid4(), card=card)
