"""Configuration resolution for SigninID SDK."""

from __future__ import annotations

import os
from collections.abc import Mapping

from .constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS, SECRET_KEY_ENV_VAR
from .types import ClientConfig
from .utils.validation import validate_secret_key, validate_timeout


def resolve_config(
    secret_key: str | None = None,
    *,
    base_url: str | None = None,
    timeout: float | None = None,
    env: Mapping[str, str] | None = None,
) -> ClientConfig:
    """Resolve client configuration.

    Explicit arguments win over the environment. The environment is read
    once, here.

    Args:
        secret_key: Secret key. Falls back to ``SIGNINID_SECRET_KEY``.
        base_url: Base URL for the API server.
        timeout: HTTP request timeout in milliseconds.
        env: Environment mapping to read from. Defaults to ``os.environ``.

    Returns:
        A validated, immutable ClientConfig.

    Raises:
        AuthenticationError: If no secret key is available or it is malformed.
        ValueError: If the timeout is not positive.
    """
    if env is None:
        env = os.environ

    resolved_key = secret_key if secret_key is not None else env.get(SECRET_KEY_ENV_VAR)
    resolved_key = validate_secret_key(resolved_key)

    resolved_timeout = DEFAULT_TIMEOUT_MS if timeout is None else timeout
    validate_timeout(resolved_timeout)

    return ClientConfig(
        secret_key=resolved_key,
        base_url=base_url or DEFAULT_BASE_URL,
        timeout=resolved_timeout,
    )
