"""
Field validation predicates for user input.

Each function only reports whether the value satisfies its rule; none of
them raise. Callers decide whether a failed check aborts the operation.
"""
# Standard library imports
import logging
import re

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8

# ASCII only: \d and \s would otherwise accept any Unicode digit or space
PHONE_PATTERN = re.compile(r"\+7\s?\(\d{3}\)\s?\d{3}-\d{2}-\d{2}", re.ASCII)
USERNAME_PATTERN = re.compile(r"[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+", re.ASCII)


def check_password(password: str) -> bool:
    """
    Check password strength.

    Args:
        password: Raw password

    Returns:
        True if the password is at least 8 characters long and not blank
    """
    if password is not None and len(password) >= MIN_PASSWORD_LENGTH and not password.isspace():
        logger.info("Password meets the requirements")
        return True
    logger.info(
        "Password does not meet the requirements: it must be at least "
        f"{MIN_PASSWORD_LENGTH} characters long and not consist of whitespace only"
    )
    return False


def check_phone_format(phone: str) -> bool:
    """
    Check that a phone number has the form +7(XXX)XXX-XX-XX.

    Args:
        phone: Phone number as entered by the user

    Returns:
        True if the whole string matches the pattern
    """
    if phone is not None and PHONE_PATTERN.fullmatch(phone):
        logger.info("Phone number format is valid")
        return True
    logger.info("Phone number must be in the format +7(XXX)XXX-XX-XX")
    return False


def check_username(username: str) -> bool:
    """Check that a username looks like an e-mail address (user@host)."""
    if username is not None and USERNAME_PATTERN.fullmatch(username):
        logger.info("Username format is valid")
        return True
    logger.info("Username must be an e-mail address in the format user@example.com")
    return False
