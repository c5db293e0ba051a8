"""
Domain exception hierarchy.

Use cases raise these; API controllers translate them into HTTP status codes.
"""


class RecordNotFoundError(ValueError):
    """Raised when a requested user, ad, comment or stored file does not exist."""
    pass


class InvalidArgumentError(ValueError):
    """Raised when a request field fails validation and the operation is aborted."""
    pass


class AccessDeniedError(Exception):
    """Raised when the current user may not modify another user's record."""
    pass


class AuthenticationError(Exception):
    """Raised when a bearer token does not identify an existing user."""
    pass
