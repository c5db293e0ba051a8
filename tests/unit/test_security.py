"""
Unit tests for classifieds.core.security
"""
import pytest
from classifieds.core.security import (
    PasswordEncoder,
    hash_password,
    verify_password,
    create_jwt_token,
    decode_jwt_token,
)


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self):
        result = hash_password("mypassword")
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_password("same")
        h2 = hash_password("same")
        assert h1 != h2

    def test_hash_not_equal_to_plain(self):
        result = hash_password("secret123")
        assert result != "secret123"


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self):
        hashed = hash_password("correct")
        assert verify_password("correct", hashed) is True

    def test_wrong_password_returns_false(self):
        hashed = hash_password("correct")
        assert verify_password("wrong", hashed) is False

    def test_non_bcrypt_hash_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestPasswordEncoder:
    """Tests for PasswordEncoder"""

    def test_encode_then_matches(self):
        encoder = PasswordEncoder()
        encoded = encoder.encode("password123")
        assert encoded != "password123"
        assert encoder.matches("password123", encoded) is True
        assert encoder.matches("password124", encoded) is False


class TestJwtToken:
    """Tests for create_jwt_token and decode_jwt_token"""

    def test_create_and_decode(self, mock_settings):
        payload = {"sub": "42", "username": "test@example.com"}
        token = create_jwt_token(payload)
        decoded = decode_jwt_token(token)
        assert decoded["sub"] == "42"
        assert decoded["username"] == "test@example.com"
        assert "iat" in decoded
        assert "exp" in decoded

    def test_decode_invalid_token_raises(self, mock_settings):
        with pytest.raises(ValueError) as exc_info:
            decode_jwt_token("invalid.jwt.token")
        assert "Invalid token" in str(exc_info.value)

    def test_decode_tampered_token_raises(self, mock_settings):
        token = create_jwt_token({"sub": "1"})
        tampered = token[:-5] + "xxxxx"
        with pytest.raises(ValueError):
            decode_jwt_token(tampered)

    def test_expired_token_raises(self, mock_settings):
        mock_settings.access_token_expire_minutes = -1
        token = create_jwt_token({"sub": "1"})
        with pytest.raises(ValueError, match="Invalid token"):
            decode_jwt_token(token)


class TestLongPasswords:
    """Passwords beyond bcrypt's 72-byte input limit"""

    def test_80_character_password_hashes_and_verifies(self):
        hashed = hash_password("p" * 80)
        assert verify_password("p" * 80, hashed) is True

    def test_shared_72_byte_prefix_does_not_match(self):
        hashed = hash_password("p" * 72 + "tail-one")
        assert verify_password("p" * 72 + "tail-two", hashed) is False

    def test_multibyte_password(self):
        password = "пароль" * 20
        hashed = hash_password(password)
        assert verify_password(password, hashed) is True
