"""Sent resource for SigninID SDK."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..constants import SENT_PATH
from ..http import encode_path_segment
from ..types import LatestEmailParams, ListEmailsParams, ListIdsResponse, SentEmail
from ..utils.validation import validate_email_id

if TYPE_CHECKING:
    from ..http import BaseApiClient


class SentResource:
    """Sent email operations."""

    def __init__(self, api_client: BaseApiClient) -> None:
        self._api_client = api_client

    async def latest(self, params: LatestEmailParams | None = None) -> SentEmail | None:
        """Get the most recent sent email.

        Args:
            params: Optional recipient filter. ``after`` is not supported by
                the sent endpoint and is not sent.

        Returns:
            The latest matching sent email, or None if there is none.
        """
        query = {"to": params.to} if params is not None else None
        data = await self._api_client.request(f"{SENT_PATH}/latest", query)
        return SentEmail.from_dict(data) if data is not None else None

    async def get(self, email_id: str) -> SentEmail:
        """Get a single sent email by ID.

        Args:
            email_id: The email ID.

        Returns:
            The sent email.
        """
        validate_email_id(email_id)
        data = await self._api_client.request(
            f"{SENT_PATH}/{encode_path_segment(email_id)}", allow_null=False
        )
        return SentEmail.from_dict(data)

    async def list(self, params: ListEmailsParams | None = None) -> ListIdsResponse:
        """List sent email IDs with pagination.

        Args:
            params: Filters and pagination. Ranges are checked by the server.

        Returns:
            Email IDs with pagination info.
        """
        query = params.to_query() if params is not None else None
        data = await self._api_client.request(SENT_PATH, query, allow_null=False)
        return ListIdsResponse.from_dict(data)
