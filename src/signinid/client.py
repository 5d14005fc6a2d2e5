"""SigninIDClient - Main entry point for SigninID SDK."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from .config import resolve_config
from .http import BaseApiClient
from .resources import InboxResource, SentResource
from .types import ClientConfig


class SigninIDClient:
    """Main client for interacting with the SigninID API.

    The secret key is resolved once, at construction, from the argument or
    the ``SIGNINID_SECRET_KEY`` environment variable. Construction performs
    no network I/O.

    Example:
        ```python
        async with SigninIDClient(secret_key="sk_live_...") as client:
            email = await client.inbox.latest()
            if email is not None:
                print(f"OTP: {email.detected_otp}")
        ```

    Attributes:
        inbox: Inbox email operations.
        sent: Sent email operations.
    """

    def __init__(
        self,
        secret_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        env: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the SigninID client.

        Args:
            secret_key: Secret key (``sk_live_...``). Falls back to the
                ``SIGNINID_SECRET_KEY`` environment variable.
            base_url: Base URL for the API server.
            timeout: HTTP request timeout in milliseconds (default: 30000).
            env: Environment mapping used for fallbacks instead of ``os.environ``.
            transport: Optional httpx transport, mainly for tests.

        Raises:
            AuthenticationError: If the secret key is missing or malformed.
            ValueError: If the timeout is not positive.
        """
        self._config = resolve_config(secret_key, base_url=base_url, timeout=timeout, env=env)
        self._api_client = BaseApiClient(self._config, transport=transport)
        self.inbox = InboxResource(self._api_client)
        self.sent = SentResource(self._api_client)

    @property
    def config(self) -> ClientConfig:
        """The resolved, immutable client configuration."""
        return self._config

    async def __aenter__(self) -> SigninIDClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the client and release the HTTP connection pool."""
        await self._api_client.close()
