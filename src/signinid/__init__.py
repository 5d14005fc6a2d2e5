"""SigninID Python SDK.

A Python client library for SigninID - hosted email testing with
server-side OTP detection, spam scoring and authentication verdicts.

Example:
    ```python
    import asyncio
    from signinid import SigninIDClient, WaitForNewOptions

    async def main():
        async with SigninIDClient() as client:
            # Trigger your signup flow, then wait for the verification email
            email = await client.inbox.wait_for_new(
                WaitForNewOptions(to="user@test.com", timeout=60_000)
            )
            if email is not None:
                print(f"OTP: {email.detected_otp}")

    asyncio.run(main())
    ```
"""

from .client import SigninIDClient
from .config import resolve_config
from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_WAIT_TIMEOUT_MS,
    SECRET_KEY_ENV_VAR,
    __version__,
)
from .errors import (
    AuthenticationError,
    ErrorCode,
    NetworkError,
    RateLimitError,
    SigninIDError,
    TimeoutError,
    ValidationError,
)
from .resources import InboxResource, SentResource
from .types import (
    ClientConfig,
    InboxEmail,
    LatestEmailParams,
    ListEmailsParams,
    ListIdsResponse,
    Pagination,
    SecurityVerdict,
    SentEmail,
    SpamRule,
    SpamRules,
    SpamVerdict,
    WaitForNewOptions,
)

__all__ = [
    # Main classes
    "SigninIDClient",
    "InboxResource",
    "SentResource",
    # Configuration
    "ClientConfig",
    "resolve_config",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
    "DEFAULT_WAIT_TIMEOUT_MS",
    "DEFAULT_POLL_INTERVAL_MS",
    "SECRET_KEY_ENV_VAR",
    # Parameters
    "LatestEmailParams",
    "ListEmailsParams",
    "WaitForNewOptions",
    # Data types
    "InboxEmail",
    "SentEmail",
    "SpamRule",
    "SpamRules",
    "SpamVerdict",
    "SecurityVerdict",
    "Pagination",
    "ListIdsResponse",
    # Errors
    "SigninIDError",
    "ErrorCode",
    "AuthenticationError",
    "ValidationError",
    "NetworkError",
    "TimeoutError",
    "RateLimitError",
    # Version
    "__version__",
]
