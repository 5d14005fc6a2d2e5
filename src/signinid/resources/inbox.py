"""Inbox resource for SigninID SDK."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from ..constants import INBOX_PATH
from ..http import encode_path_segment
from ..types import (
    InboxEmail,
    LatestEmailParams,
    ListEmailsParams,
    ListIdsResponse,
    WaitForNewOptions,
)
from ..utils import (
    format_iso_timestamp,
    parse_iso_timestamp,
    serialize_timestamp,
    sleep,
    utc_now,
)
from ..utils.validation import validate_email_id

if TYPE_CHECKING:
    from ..http import BaseApiClient

logger = logging.getLogger("signinid")


class InboxResource:
    """Inbox email operations.

    Example:
        ```python
        email = await client.inbox.wait_for_new(WaitForNewOptions(to="user@test.com"))
        if email is not None:
            print(email.detected_otp)
        ```
    """

    def __init__(self, api_client: BaseApiClient) -> None:
        self._api_client = api_client

    async def latest(self, params: LatestEmailParams | None = None) -> InboxEmail | None:
        """Get the most recent inbox email.

        Args:
            params: Optional recipient and ``after`` filters.

        Returns:
            The latest matching email, or None if there is none.
        """
        query: dict[str, Any] | None = None
        if params is not None:
            query = {}
            if params.to:
                query["to"] = params.to
            if params.after:
                query["after"] = serialize_timestamp(params.after)

        data = await self._api_client.request(f"{INBOX_PATH}/latest", query or None)
        return InboxEmail.from_dict(data) if data is not None else None

    async def get(self, email_id: str) -> InboxEmail:
        """Get a single inbox email by ID.

        Args:
            email_id: The email ID.

        Returns:
            The inbox email.

        Raises:
            SigninIDError: If the email does not exist (server 404).
        """
        validate_email_id(email_id)
        data = await self._api_client.request(
            f"{INBOX_PATH}/{encode_path_segment(email_id)}", allow_null=False
        )
        return InboxEmail.from_dict(data)

    async def list(self, params: ListEmailsParams | None = None) -> ListIdsResponse:
        """List inbox email IDs with pagination.

        Args:
            params: Filters and pagination. Ranges are checked by the server.

        Returns:
            Email IDs with pagination info.
        """
        query = params.to_query() if params is not None else None
        data = await self._api_client.request(INBOX_PATH, query, allow_null=False)
        return ListIdsResponse.from_dict(data)

    async def wait_for_new(self, options: WaitForNewOptions | None = None) -> InboxEmail | None:
        """Wait for a new email to arrive.

        Polls ``latest`` with ``after`` set to the moment this call started,
        so emails already in the inbox are never returned. Request errors
        are raised immediately; only "nothing yet" is retried.

        Args:
            options: Recipient filter, timeout and poll interval (milliseconds).

        Returns:
            The new inbox email, or None if the timeout is reached.
        """
        options = options or WaitForNewOptions()
        start_time = format_iso_timestamp(utc_now())
        started_at = parse_iso_timestamp(start_time)
        deadline = time.monotonic() + options.timeout / 1000
        polls = 0

        while time.monotonic() < deadline:
            polls += 1
            email = await self.latest(LatestEmailParams(to=options.to, after=start_time))
            if email is not None:
                if email.received_at is None or email.received_at >= started_at:
                    return email
                logger.debug(
                    "Ignoring email %s received before %s", email.email_id, start_time
                )

            await sleep(options.poll_interval)

        logger.debug("No new email after %d polls since %s", polls, start_time)
        return None
