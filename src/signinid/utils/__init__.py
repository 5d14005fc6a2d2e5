"""Utility functions for SigninID SDK."""

from .datetime_utils import (
    format_iso_timestamp,
    parse_iso_timestamp,
    serialize_timestamp,
    utc_now,
)
from .sleep import sleep

__all__ = [
    "format_iso_timestamp",
    "parse_iso_timestamp",
    "serialize_timestamp",
    "sleep",
    "utc_now",
]
