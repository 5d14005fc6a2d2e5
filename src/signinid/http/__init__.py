"""HTTP client for SigninID SDK."""

from .base_client import BaseApiClient, build_query, encode_path_segment

__all__ = [
    "BaseApiClient",
    "build_query",
    "encode_path_segment",
]
