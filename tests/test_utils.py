"""Tests for utility modules."""

from datetime import datetime, timedelta, timezone

import pytest

from signinid.errors import AuthenticationError
from signinid.utils import (
    format_iso_timestamp,
    parse_iso_timestamp,
    serialize_timestamp,
    utc_now,
)
from signinid.utils.sleep import sleep
from signinid.utils.validation import validate_email_id, validate_secret_key, validate_timeout


class TestSleep:
    """Tests for the sleep utility."""

    @pytest.mark.asyncio
    async def test_sleep_completes(self) -> None:
        await sleep(10)

    @pytest.mark.asyncio
    async def test_sleep_zero_and_negative(self) -> None:
        await sleep(0)
        await sleep(-5)


class TestTimestamps:
    def test_parse_z_suffix(self) -> None:
        assert parse_iso_timestamp("2024-01-15T10:30:00.000Z") == datetime(
            2024, 1, 15, 10, 30, tzinfo=timezone.utc
        )

    def test_parse_offset(self) -> None:
        parsed = parse_iso_timestamp("2024-01-15T11:30:00+01:00")
        assert parsed == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    def test_parse_naive_is_utc(self) -> None:
        assert parse_iso_timestamp("2024-01-15T10:30:00").tzinfo == timezone.utc

    def test_format_millisecond_precision(self) -> None:
        value = datetime(2024, 1, 15, 10, 30, 0, 987_654, tzinfo=timezone.utc)
        assert format_iso_timestamp(value) == "2024-01-15T10:30:00.987Z"

    def test_format_converts_to_utc(self) -> None:
        value = datetime(2024, 1, 15, 5, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert format_iso_timestamp(value) == "2024-01-15T10:30:00.000Z"

    def test_format_naive_is_utc(self) -> None:
        assert format_iso_timestamp(datetime(2024, 1, 15)) == "2024-01-15T00:00:00.000Z"

    def test_format_then_parse(self) -> None:
        value = datetime(2024, 6, 30, 23, 59, 59, 1_000, tzinfo=timezone.utc)
        assert parse_iso_timestamp(format_iso_timestamp(value)) == value

    def test_serialize_passes_strings_through(self) -> None:
        assert serialize_timestamp("yesterday") == "yesterday"
        assert serialize_timestamp(None) is None

    def test_utc_now_is_aware(self) -> None:
        assert utc_now().tzinfo == timezone.utc


class TestValidation:
    def test_valid_secret_key(self) -> None:
        assert validate_secret_key("sk_live_123") == "sk_live_123"

    @pytest.mark.parametrize("key", [None, ""])
    def test_missing_secret_key(self, key) -> None:
        with pytest.raises(AuthenticationError, match="required"):
            validate_secret_key(key)

    def test_bad_prefix(self) -> None:
        with pytest.raises(AuthenticationError, match="Invalid secret key format"):
            validate_secret_key("sk_test_123")

    @pytest.mark.parametrize("timeout", [1, 0.5, 30_000])
    def test_valid_timeout(self, timeout) -> None:
        validate_timeout(timeout)

    @pytest.mark.parametrize("timeout", [0, -1, True, None, "100"])
    def test_invalid_timeout(self, timeout) -> None:
        with pytest.raises(ValueError):
            validate_timeout(timeout)

    def test_empty_email_id(self) -> None:
        with pytest.raises(ValueError, match="Email ID cannot be empty"):
            validate_email_id("")

    def test_email_id_accepts_anything_else(self) -> None:
        validate_email_id("any id/with spaces")
