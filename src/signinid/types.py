"""Type definitions for SigninID SDK."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal

from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_WAIT_TIMEOUT_MS,
)
from .utils import parse_iso_timestamp, serialize_timestamp

# Spam verdict values
SpamVerdict = Literal["PASS", "FAIL", "GRAY"]

# Security verdict values (AWS SES)
SecurityVerdict = Literal["PASS", "FAIL", "GRAY", "PROCESSING_FAILED"]


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for SigninIDClient.

    Attributes:
        secret_key: Secret key for authentication (``sk_live_...``).
        base_url: Base URL for the API server.
        timeout: HTTP request timeout in milliseconds.
    """

    secret_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_MS


@dataclass
class LatestEmailParams:
    """Query parameters for the latest endpoints.

    Attributes:
        to: Filter by recipient email address (partial match).
        after: Only return emails received after this timestamp (ISO 8601 or datetime).
            Only the inbox endpoint supports it.
    """

    to: str | None = None
    after: datetime | str | None = None


@dataclass
class ListEmailsParams:
    """Query parameters for the list endpoints (page-based pagination).

    Ranges are validated by the server, not here.

    Attributes:
        page: Page number (1, 2, 3..., server default: 1).
        per_page: Results per page (1-100, server default: 10).
        from_: Filter by sender email address (partial match). Sent as ``from``.
        to: Filter by recipient email address (partial match).
        subject: Filter by subject (partial match).
        before: Return emails before this date.
        after: Return emails after this date.
    """

    page: int | None = None
    per_page: int | None = None
    from_: str | None = None
    to: str | None = None
    subject: str | None = None
    before: datetime | str | None = None
    after: datetime | str | None = None

    def to_query(self) -> dict[str, Any]:
        """Build the query parameter mapping, with dates serialized."""
        return {
            "page": self.page,
            "per_page": self.per_page,
            "from": self.from_,
            "to": self.to,
            "subject": self.subject,
            "before": serialize_timestamp(self.before),
            "after": serialize_timestamp(self.after),
        }


@dataclass
class WaitForNewOptions:
    """Options for waiting for a new inbox email.

    Attributes:
        to: Filter by recipient email address (partial match).
        timeout: Maximum wait time in milliseconds.
        poll_interval: Delay between polls in milliseconds.
    """

    to: str | None = None
    timeout: float = DEFAULT_WAIT_TIMEOUT_MS
    poll_interval: float = DEFAULT_POLL_INTERVAL_MS


@dataclass(frozen=True)
class SpamRule:
    """A single spam rule hit."""

    name: str
    score: float
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SpamRule:
        return cls(
            name=data["name"],
            score=data["score"],
            description=data.get("description"),
        )


@dataclass(frozen=True)
class SpamRules:
    """Spam rules analysis, split by analyzer.

    Attributes:
        simple: Rules from the built-in heuristics.
        rspamd: Rules reported by Rspamd.
    """

    simple: list[SpamRule] = field(default_factory=list)
    rspamd: list[SpamRule] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SpamRules:
        return cls(
            simple=[SpamRule.from_dict(rule) for rule in data.get("simple") or []],
            rspamd=[SpamRule.from_dict(rule) for rule in data.get("rspamd") or []],
        )


def _parse_optional_timestamp(value: str | None) -> datetime | None:
    return parse_iso_timestamp(value) if value else None


@dataclass(frozen=True)
class InboxEmail:
    """An email received by a SigninID test inbox.

    Returned by ``inbox.latest()``, ``inbox.get()`` and ``inbox.wait_for_new()``.

    Attributes:
        email_id: Unique email identifier.
        from_address: Sender email address.
        from_name: Sender display name.
        to_addresses: Recipient email addresses.
        cc_addresses: CC recipients, if any.
        subject: Email subject line.
        received_at: When the email was received.
        message_id: The Message-ID header.
        has_attachments: Whether the email carries attachments.
        attachment_count: Number of attachments.
        spam_score: Spam score computed by the server.
        spam_verdict: Spam verdict computed by the server.
        spam_rules: Per-rule spam analysis.
        virus_verdict: SES virus scan verdict.
        spf_verdict: SES SPF verdict.
        dkim_verdict: SES DKIM verdict.
        dmarc_verdict: SES DMARC verdict.
        detected_otp: One-time code detected in the body, if any.
        html_body: HTML content.
        text_body: Plain text content.
    """

    email_id: str
    from_address: str
    from_name: str | None
    to_addresses: list[str]
    cc_addresses: list[str] | None
    subject: str | None
    received_at: datetime | None
    message_id: str | None
    has_attachments: bool
    attachment_count: int
    spam_score: float | None
    spam_verdict: SpamVerdict | None
    spam_rules: SpamRules | None
    virus_verdict: SecurityVerdict | None
    spf_verdict: SecurityVerdict | None
    dkim_verdict: SecurityVerdict | None
    dmarc_verdict: SecurityVerdict | None
    detected_otp: str | None
    html_body: str | None = field(repr=False)
    text_body: str | None = field(repr=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InboxEmail:
        """Create an InboxEmail from the server's JSON representation."""
        spam_rules = data.get("spam_rules")
        return cls(
            email_id=data["email_id"],
            from_address=data["from_address"],
            from_name=data.get("from_name"),
            to_addresses=list(data.get("to_addresses") or []),
            cc_addresses=data.get("cc_addresses"),
            subject=data.get("subject"),
            received_at=_parse_optional_timestamp(data.get("received_at")),
            message_id=data.get("message_id"),
            has_attachments=data.get("has_attachments", False),
            attachment_count=data.get("attachment_count", 0),
            spam_score=data.get("spam_score"),
            spam_verdict=data.get("spam_verdict"),
            spam_rules=SpamRules.from_dict(spam_rules) if spam_rules else None,
            virus_verdict=data.get("virus_verdict"),
            spf_verdict=data.get("spf_verdict"),
            dkim_verdict=data.get("dkim_verdict"),
            dmarc_verdict=data.get("dmarc_verdict"),
            detected_otp=data.get("detected_otp"),
            html_body=data.get("html_body"),
            text_body=data.get("text_body"),
        )


@dataclass(frozen=True)
class SentEmail:
    """An email sent through SigninID.

    Returned by ``sent.latest()`` and ``sent.get()``. Sent emails carry no
    SES security verdicts.
    """

    email_id: str
    from_address: str
    from_name: str | None
    to_addresses: list[str]
    cc_addresses: list[str] | None
    bcc_addresses: list[str] | None
    subject: str | None
    sent_at: datetime | None
    message_id: str | None
    has_attachments: bool
    attachment_count: int
    spam_score: float | None
    spam_verdict: SpamVerdict | None
    detected_otp: str | None
    html_body: str | None = field(repr=False)
    text_body: str | None = field(repr=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SentEmail:
        """Create a SentEmail from the server's JSON representation."""
        return cls(
            email_id=data["email_id"],
            from_address=data["from_address"],
            from_name=data.get("from_name"),
            to_addresses=list(data.get("to_addresses") or []),
            cc_addresses=data.get("cc_addresses"),
            bcc_addresses=data.get("bcc_addresses"),
            subject=data.get("subject"),
            sent_at=_parse_optional_timestamp(data.get("sent_at")),
            message_id=data.get("message_id"),
            has_attachments=data.get("has_attachments", False),
            attachment_count=data.get("attachment_count", 0),
            spam_score=data.get("spam_score"),
            spam_verdict=data.get("spam_verdict"),
            detected_otp=data.get("detected_otp"),
            html_body=data.get("html_body"),
            text_body=data.get("text_body"),
        )


@dataclass(frozen=True)
class Pagination:
    """Page-based pagination metadata.

    Attributes:
        page: Current page number.
        per_page: Page size.
        returned: Number of ids in this page.
        has_more: Whether another page exists.
    """

    page: int
    per_page: int
    returned: int
    has_more: bool

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Pagination:
        return cls(
            page=data["page"],
            per_page=data["per_page"],
            returned=data["returned"],
            has_more=data["has_more"],
        )


@dataclass(frozen=True)
class ListIdsResponse:
    """List response returning only email IDs.

    Attributes:
        data: Email IDs, newest first.
        pagination: Pagination metadata for this page.
    """

    data: list[str]
    pagination: Pagination

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListIdsResponse:
        return cls(
            data=list(data.get("data") or []),
            pagination=Pagination.from_dict(data["pagination"]),
        )
