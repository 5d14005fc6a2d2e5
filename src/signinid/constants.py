"""Default configuration constants for SigninID SDK."""

__version__ = "0.1.0"

# API settings
DEFAULT_BASE_URL = "https://app.signinid.com"
SECRET_KEY_ENV_VAR = "SIGNINID_SECRET_KEY"
SECRET_KEY_PREFIX = "sk_live_"

# HTTP settings (milliseconds)
DEFAULT_TIMEOUT_MS = 30_000

# wait_for_new settings (milliseconds)
DEFAULT_WAIT_TIMEOUT_MS = 30_000
DEFAULT_POLL_INTERVAL_MS = 1_000

# API paths
INBOX_PATH = "/api/v1/inbox"
SENT_PATH = "/v1/sent"

# Sent with every request
USER_AGENT = f"signinid-python/{__version__}"
