"""Validation utilities for SigninID SDK."""

from __future__ import annotations

from ..constants import SECRET_KEY_ENV_VAR, SECRET_KEY_PREFIX
from ..errors import AuthenticationError


def validate_secret_key(secret_key: str | None) -> str:
    """Validate secret key presence and format.

    Args:
        secret_key: The secret key to validate.

    Returns:
        The validated secret key.

    Raises:
        AuthenticationError: If the key is missing or does not start with
            the live key prefix.
    """
    if not secret_key:
        raise AuthenticationError(
            "Secret key is required. Provide it in options or set "
            f"{SECRET_KEY_ENV_VAR} environment variable."
        )
    if not secret_key.startswith(SECRET_KEY_PREFIX):
        raise AuthenticationError(
            f"Invalid secret key format. Secret key must start with '{SECRET_KEY_PREFIX}'"
        )
    return secret_key


def validate_timeout(timeout: float) -> None:
    """Validate a request timeout in milliseconds.

    Raises:
        ValueError: If the timeout is not a positive number.
    """
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
        raise ValueError(f"Timeout must be a number of milliseconds, got {timeout!r}")
    if timeout <= 0:
        raise ValueError(f"Timeout must be positive, got {timeout}")


def validate_email_id(email_id: str) -> None:
    """Validate email ID before it is placed in a request path.

    Args:
        email_id: The email ID to validate.

    Raises:
        ValueError: If the email ID is empty.
    """
    if not email_id:
        raise ValueError("Email ID cannot be empty")
