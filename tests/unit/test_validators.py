"""
Unit tests for classifieds.domain.validators
"""
import pytest

from classifieds.domain.validators import check_password, check_phone_format, check_username


class TestCheckPassword:
    """Tests for check_password"""

    def test_short_password_rejected(self):
        assert check_password("short") is False

    def test_eight_characters_accepted(self):
        assert check_password("12345678") is True

    def test_long_password_accepted(self):
        assert check_password("longenough1") is True

    def test_whitespace_only_rejected(self):
        assert check_password("          ") is False

    def test_empty_rejected(self):
        assert check_password("") is False

    def test_inner_spaces_allowed(self):
        assert check_password("pass word 1") is True


class TestCheckPhoneFormat:
    """Tests for check_phone_format"""

    @pytest.mark.parametrize(
        "phone",
        [
            "+7(912)345-67-89",
            "+7 (912)345-67-89",
            "+7(912) 345-67-89",
            "+7 (912) 345-67-89",
        ],
    )
    def test_valid_formats(self, phone):
        assert check_phone_format(phone) is True

    @pytest.mark.parametrize(
        "phone",
        [
            "89123456789",
            "+79123456789",
            "+8(912)345-67-89",
            "+7(912)345-6789",
            "+7(912)345-67-89 ",
            "",
            "+7(\u0669\u0661\u0662)345-67-89",
            "+7(912)\u0663\u0664\u0665-67-89",
            "+7\u00a0(912)345-67-89",
            "+7(912)\u00a0345-67-89",
        ],
    )
    def test_invalid_formats(self, phone):
        assert check_phone_format(phone) is False


class TestCheckUsername:
    """Tests for check_username"""

    def test_simple_email_accepted(self):
        assert check_username("ivan@example.com") is True

    def test_plus_and_underscore_accepted(self):
        assert check_username("ivan.p+ads_1@mail-host.ru") is True

    def test_missing_at_rejected(self):
        assert check_username("ivan.example.com") is False

    def test_missing_host_rejected(self):
        assert check_username("ivan@") is False

    def test_two_at_signs_rejected(self):
        assert check_username("a@b@c") is False

    def test_space_rejected(self):
        assert check_username("ivan petrov@example.com") is False

    def test_non_ascii_letters_rejected(self):
        assert check_username("\u0438\u0432\u0430\u043d@example.com") is False
