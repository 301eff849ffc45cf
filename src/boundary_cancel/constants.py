"""Application-wide constants for boundary-cancel.

Constants that define action behavior.
For per-invocation settings, see config.py.
"""

from boundary_cancel import __version__

__all__ = [
    # Application identity
    "APP_NAME",
    "USER_AGENT",
    # HTTP
    "DEFAULT_HTTP_TIMEOUT_SECONDS",
    "MIN_HTTP_TIMEOUT_SECONDS",
    "MAX_HTTP_TIMEOUT_SECONDS",
    "STEP_DELAY_SECONDS",
    # Secret and environment keys
    "USERNAME_SECRET",
    "PASSWORD_SECRET",
    "ADDRESS_ENV",
    "HTTP_TIMEOUT_ENV",
    # Halt
    "UNKNOWN_VALUE",
    # CLI exit codes
    "EXIT_FATAL",
    "EXIT_RETRYABLE",
]

# =============================================================================
# Application identity
# =============================================================================

APP_NAME = "boundary-cancel"

# Sent on every request so controller operators can attribute traffic
USER_AGENT = f"{APP_NAME}/{__version__}"

# =============================================================================
# HTTP
# =============================================================================

DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0
MIN_HTTP_TIMEOUT_SECONDS = 1.0
MAX_HTTP_TIMEOUT_SECONDS = 300.0

# Pause between authenticate/read and read/cancel (rate-limit courtesy only)
STEP_DELAY_SECONDS = 0.1

# =============================================================================
# Secret and environment keys
# =============================================================================

USERNAME_SECRET = "BASIC_USERNAME"
PASSWORD_SECRET = "BASIC_PASSWORD"
ADDRESS_ENV = "ADDRESS"
HTTP_TIMEOUT_ENV = "BOUNDARY_HTTP_TIMEOUT"

# =============================================================================
# Halt
# =============================================================================

UNKNOWN_VALUE = "unknown"

# =============================================================================
# CLI exit codes
# =============================================================================

EXIT_FATAL = 1
EXIT_RETRYABLE = 75  # EX_TEMPFAIL from sysexits.h
