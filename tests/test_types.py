"""Tests for record parsing and parameter objects."""

from __future__ import annotations

import dataclasses
from datetime import datetime, timezone

import pytest

from signinid.types import (
    InboxEmail,
    ListEmailsParams,
    ListIdsResponse,
    Pagination,
    SentEmail,
    SpamRule,
    SpamRules,
    WaitForNewOptions,
)


class TestInboxEmail:
    def test_from_dict(self, inbox_email_data) -> None:
        email = InboxEmail.from_dict(inbox_email_data)

        assert email.email_id == "550e8400-e29b-41d4-a716-446655440000"
        assert email.from_name == "Service"
        assert email.to_addresses == ["user@test.com"]
        assert email.cc_addresses is None
        assert email.received_at == datetime(2024, 1, 15, 10, 30, 5, tzinfo=timezone.utc)
        assert email.spam_score == 1.5
        assert email.spam_verdict == "PASS"
        assert email.dkim_verdict == "GRAY"
        assert email.dmarc_verdict == "FAIL"
        assert email.detected_otp == "123456"
        assert email.text_body == "Your code is 123456"

    def test_spam_rules(self, inbox_email_data) -> None:
        rules = InboxEmail.from_dict(inbox_email_data).spam_rules

        assert rules == SpamRules(
            simple=[SpamRule(name="HTML_ONLY", score=0.5, description="HTML only")],
            rspamd=[SpamRule(name="MIME_GOOD", score=-0.1)],
        )

    def test_minimal_payload(self) -> None:
        email = InboxEmail.from_dict(
            {"email_id": "e1", "from_address": "a@b.c", "received_at": "2024-01-01T00:00:00Z"}
        )

        assert email.to_addresses == []
        assert email.has_attachments is False
        assert email.attachment_count == 0
        assert email.spam_rules is None
        assert email.virus_verdict is None
        assert email.detected_otp is None
        assert email.html_body is None

    def test_is_read_only(self, inbox_email_data) -> None:
        email = InboxEmail.from_dict(inbox_email_data)
        with pytest.raises(dataclasses.FrozenInstanceError):
            email.subject = "changed"  # type: ignore[misc]

    def test_bodies_not_in_repr(self, inbox_email_data) -> None:
        assert "Your code is" not in repr(InboxEmail.from_dict(inbox_email_data))


class TestSentEmail:
    def test_from_dict(self, sent_email_data) -> None:
        email = SentEmail.from_dict(sent_email_data)

        assert email.sent_at == datetime(2024, 1, 15, 9, 0, tzinfo=timezone.utc)
        assert email.cc_addresses == ["cc@example.com"]
        assert email.bcc_addresses == ["audit@example.com"]
        assert email.has_attachments is True
        assert email.attachment_count == 2
        assert email.spam_verdict is None

    def test_has_no_security_verdicts(self) -> None:
        names = {f.name for f in dataclasses.fields(SentEmail)}
        assert not names & {"virus_verdict", "spf_verdict", "dkim_verdict", "dmarc_verdict"}


class TestListIdsResponse:
    def test_from_dict(self) -> None:
        response = ListIdsResponse.from_dict(
            {
                "data": ["a", "b"],
                "pagination": {"page": 1, "per_page": 2, "returned": 2, "has_more": True},
            }
        )

        assert response.data == ["a", "b"]
        assert response.pagination == Pagination(page=1, per_page=2, returned=2, has_more=True)

    def test_missing_pagination_raises(self) -> None:
        with pytest.raises(KeyError):
            ListIdsResponse.from_dict({"data": []})


class TestListEmailsParams:
    def test_to_query_maps_from_field(self) -> None:
        query = ListEmailsParams(from_="a@b.c").to_query()
        assert query["from"] == "a@b.c"
        assert "from_" not in query

    def test_to_query_serializes_datetimes(self) -> None:
        query = ListEmailsParams(
            before=datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
            after="2023-12-31T00:00:00Z",
        ).to_query()

        assert query["before"] == "2024-01-01T12:00:00.000Z"
        assert query["after"] == "2023-12-31T00:00:00Z"

    def test_empty_params_are_all_none(self) -> None:
        assert set(ListEmailsParams().to_query().values()) == {None}


class TestWaitForNewOptions:
    def test_defaults(self) -> None:
        options = WaitForNewOptions()
        assert options.to is None
        assert options.timeout == 30_000
        assert options.poll_interval == 1_000
