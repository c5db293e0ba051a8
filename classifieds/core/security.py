# Standard library imports
import base64
import hashlib
import time
from typing import Any, Dict

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings

BCRYPT_ROUNDS = 12


def _bcrypt_input(plain_password: str) -> bytes:
    """
    SHA-256 digest of the password, base64 encoded (44 bytes).

    bcrypt only accepts 72 bytes of input, while passwords have no upper
    length limit; hashing and verification both go through this step.
    """
    digest = hashlib.sha256(plain_password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash, of any length

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(_bcrypt_input(plain_password), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hash produced by hash_password

    Returns:
        True if passwords match, False otherwise (including malformed hashes)
    """
    try:
        return bcrypt.checkpw(_bcrypt_input(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


class PasswordEncoder:
    """One-way password encoder injected into the user workflows"""

    def encode(self, raw_password: str) -> str:
        return hash_password(raw_password)

    def matches(self, raw_password: str, encoded_password: str) -> bool:
        return verify_password(raw_password, encoded_password)


def create_jwt_token(payload: Dict[str, Any]) -> str:
    """
    Create a signed access token for an authenticated user

    Args:
        payload: Token claims; "sub" carries the user ID as a string

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    issued_at = int(time.time())

    return jwt.encode(
        {
            **payload,
            "iat": issued_at,
            "exp": issued_at + settings.access_token_expire_minutes * 60,
        },
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate an access token

    Raises:
        ValueError: If the token is malformed, expired or badly signed
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except InvalidTokenError as e:
        raise ValueError(f"Invalid token: {str(e)}")
