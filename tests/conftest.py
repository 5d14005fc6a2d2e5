"""Shared fixtures for SigninID SDK tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from signinid import SigninIDClient

SECRET_KEY = "sk_live_test_1234567890"
BASE_URL = "https://test.signinid.example"


@pytest.fixture
def inbox_email_data() -> dict[str, Any]:
    """A complete inbox email as returned by the server."""
    return {
        "email_id": "550e8400-e29b-41d4-a716-446655440000",
        "from_address": "noreply@service.com",
        "from_name": "Service",
        "to_addresses": ["user@test.com"],
        "cc_addresses": None,
        "subject": "Your verification code",
        "received_at": "2024-01-15T10:30:05.000Z",
        "message_id": "<abc@service.com>",
        "has_attachments": False,
        "attachment_count": 0,
        "spam_score": 1.5,
        "spam_verdict": "PASS",
        "spam_rules": {
            "simple": [{"name": "HTML_ONLY", "score": 0.5, "description": "HTML only"}],
            "rspamd": [{"name": "MIME_GOOD", "score": -0.1}],
        },
        "virus_verdict": "PASS",
        "spf_verdict": "PASS",
        "dkim_verdict": "GRAY",
        "dmarc_verdict": "FAIL",
        "detected_otp": "123456",
        "html_body": "<p>Your code is 123456</p>",
        "text_body": "Your code is 123456",
    }


@pytest.fixture
def sent_email_data() -> dict[str, Any]:
    """A complete sent email as returned by the server."""
    return {
        "email_id": "sent-001",
        "from_address": "app@example.com",
        "from_name": None,
        "to_addresses": ["customer@example.com"],
        "cc_addresses": ["cc@example.com"],
        "bcc_addresses": ["audit@example.com"],
        "subject": "Welcome",
        "sent_at": "2024-01-15T09:00:00.000Z",
        "message_id": None,
        "has_attachments": True,
        "attachment_count": 2,
        "spam_score": None,
        "spam_verdict": None,
        "detected_otp": None,
        "html_body": None,
        "text_body": "Welcome aboard",
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], Any]) -> None:
        self.requests: list[httpx.Request] = []

        async def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            result = handler(request)
            if hasattr(result, "__await__"):
                result = await result
            return result

        super().__init__(record)


@pytest.fixture
def make_client() -> Callable[..., SigninIDClient]:
    """Build a client whose HTTP traffic goes to a handler function."""

    def factory(
        handler: Callable[[httpx.Request], Any], **kwargs: Any
    ) -> tuple[SigninIDClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = SigninIDClient(
            SECRET_KEY, base_url=BASE_URL, env={}, transport=transport, **kwargs
        )
        return client, transport

    return factory
