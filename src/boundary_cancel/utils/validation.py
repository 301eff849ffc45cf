"""Validation utilities for boundary-cancel.

Provides reusable checks for invocation parameters and configuration values.
"""

from __future__ import annotations

__all__ = [
    "is_valid_http_url",
    "require_identifier",
    "validate_inputs",
]

from typing import Any, Mapping

from boundary_cancel.exceptions import fatal_error


def is_valid_http_url(url: str) -> bool:
    """Check if URL has valid HTTP or HTTPS scheme.

    Args:
        url: URL string to validate.

    Returns:
        True if URL starts with http:// or https://.
    """
    return url.startswith("http://") or url.startswith("https://")


def require_identifier(params: Mapping[str, Any], name: str) -> str:
    """Return params[name] if it is a non-blank string.

    Raises:
        ActionError: Fatal, naming the offending parameter.
    """
    value = params.get(name)
    if not isinstance(value, str) or not value.strip():
        raise fatal_error(f"Invalid or missing {name} parameter")
    return value


def validate_inputs(params: Mapping[str, Any]) -> tuple[str, str]:
    """Validate the two required identifiers.

    Args:
        params: Invocation parameters from the framework.

    Returns:
        Tuple of (session_id, auth_method_id).

    Raises:
        ActionError: Fatal, if either identifier is absent, not a string, or blank.
    """
    session_id = require_identifier(params, "sessionId")
    auth_method_id = require_identifier(params, "authMethodId")
    return session_id, auth_method_id
