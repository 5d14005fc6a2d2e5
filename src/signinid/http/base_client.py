"""Base HTTP client for SigninID SDK."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from ..constants import USER_AGENT
from ..errors import (
    AuthenticationError,
    ErrorCode,
    NetworkError,
    RateLimitError,
    SigninIDError,
    TimeoutError,
    ValidationError,
)
from ..types import ClientConfig

logger = logging.getLogger("signinid")

_DEFAULT_ERROR_MESSAGE = "An unknown error occurred"


def encode_path_segment(value: str) -> str:
    """URL-encode a path segment for use in API URLs.

    Args:
        value: The value to encode.

    Returns:
        URL-encoded string safe for use in URL paths.
    """
    return quote(value, safe="")


def build_query(params: Mapping[str, Any] | None) -> dict[str, str] | None:
    """Stringify query parameters, dropping the ones set to None.

    Args:
        params: Raw query parameters.

    Returns:
        The query mapping, or None when nothing is left to send.
    """
    if not params:
        return None
    query: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            query[key] = "true" if value else "false"
        elif isinstance(value, float) and value.is_integer():
            query[key] = str(int(value))
        else:
            query[key] = str(value)
    return query or None


def _parse_retry_after(details: Any) -> float | None:
    if not isinstance(details, dict) or "retry_after" not in details:
        return None
    value = details["retry_after"]
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class BaseApiClient:
    """HTTP request executor for the SigninID API.

    Issues a single authenticated GET per call and maps failures to the
    SDK error hierarchy. No retries are performed.

    Attributes:
        config: Client configuration.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the base API client.

        Args:
            config: Client configuration with secret key and settings.
            transport: Optional httpx transport, mainly for tests.
        """
        self.config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client.

        Returns:
            The HTTP client instance.
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                headers={
                    "Authorization": f"Bearer {self.config.secret_key}",
                    "Content-Type": "application/json",
                    "User-Agent": USER_AGENT,
                },
                timeout=httpx.Timeout(self.config.timeout / 1000),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        allow_null: bool = True,
    ) -> Any:
        """Make a GET request and decode its JSON body.

        Args:
            path: API path, appended to the configured base URL.
            params: Query parameters. None values are skipped.
            allow_null: Whether a body other than a JSON object is acceptable.
                Endpoints returning "none found" as JSON ``null`` leave it on.

        Returns:
            The decoded JSON body. JSON ``null`` is returned as None.

        Raises:
            AuthenticationError: On 401.
            ValidationError: On 400.
            RateLimitError: On 429.
            SigninIDError: On any other error status, or a body that is not a JSON
                object when ``allow_null`` is off.
            TimeoutError: If the configured timeout elapses.
            NetworkError: On connection failures or an undecodable body.
        """
        client = await self._get_client()
        query = build_query(params)
        logger.debug("GET %s params=%s", path, query)

        try:
            response = await asyncio.wait_for(
                client.get(path, params=query),
                timeout=self.config.timeout / 1000,
            )
        except SigninIDError:
            raise
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise TimeoutError() from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(str(e) or "Network error occurred") from e

        logger.debug("GET %s -> %d", path, response.status_code)

        if not response.is_success:
            self._handle_error_response(response)

        try:
            body = response.json()
        except ValueError as e:
            raise NetworkError(f"Invalid JSON response: {e}") from e

        if not allow_null and not isinstance(body, dict):
            raise SigninIDError(
                ErrorCode.UNKNOWN_ERROR, "Unexpected empty response", response.status_code
            )
        return body

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Handle HTTP error responses.

        Args:
            response: The HTTP response.

        Raises:
            AuthenticationError: On 401.
            ValidationError: On 400, with the server details.
            RateLimitError: On 429, with ``details.retry_after`` when present.
            SigninIDError: For other statuses, with the server code and message.
        """
        try:
            body = response.json()
        except ValueError:
            body = None

        error = body.get("error") if isinstance(body, dict) else None
        if not isinstance(error, dict):
            error = {}

        code = error.get("code")
        if code is None:
            code = ErrorCode.UNKNOWN_ERROR
        message = error.get("message")
        if message is None:
            message = _DEFAULT_ERROR_MESSAGE
        details = error.get("details")

        if response.status_code == 401:
            raise AuthenticationError(message)
        if response.status_code == 400:
            raise ValidationError(message, details)
        if response.status_code == 429:
            raise RateLimitError(message, _parse_retry_after(details))

        raise SigninIDError(code, message, response.status_code)
