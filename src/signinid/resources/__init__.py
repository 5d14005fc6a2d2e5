"""Resource accessors for SigninID SDK."""

from .inbox import InboxResource
from .sent import SentResource

__all__ = ["InboxResource", "SentResource"]
