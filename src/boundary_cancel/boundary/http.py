"""Shared HTTP plumbing for Boundary controller calls.

Centralizes headers, timeouts and HTTP status classification so that all
three protocol steps map failures the same way:

- 429 -> retryable (rate limit)
- step-specific statuses (401, 403, 404, 409) -> fatal with a specific message
- >= 500 -> retryable (server error)
- anything else non-2xx -> fatal with status, reason and body
"""

from __future__ import annotations

__all__ = [
    "RATE_LIMIT_MESSAGE",
    "build_client",
    "raise_for_status",
    "read_json",
    "request_headers",
    "resource_url",
]

from typing import Any, Mapping
from urllib.parse import quote

import httpx

from boundary_cancel.constants import DEFAULT_HTTP_TIMEOUT_SECONDS, USER_AGENT
from boundary_cancel.exceptions import fatal_error, retryable_error

RATE_LIMIT_MESSAGE = "Boundary API rate limit exceeded"


def build_client(timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS) -> httpx.AsyncClient:
    """Create the AsyncClient used for one invocation."""
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout))


def request_headers(token: str | None = None) -> dict[str, str]:
    """Headers sent on every controller request.

    Set per request rather than on the client so injected clients carry them too.
    """
    headers = {
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
    }
    if token is not None:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def resource_url(base_url: str, collection: str, resource_id: str, action: str | None = None) -> str:
    """Build {base}/v1/{collection}/{id}[:action] with the id percent-encoded."""
    url = f"{base_url}/v1/{collection}/{quote(resource_id, safe='')}"
    if action:
        url = f"{url}:{action}"
    return url


def raise_for_status(
    response: httpx.Response,
    *,
    operation: str,
    fatal_statuses: Mapping[int, str] | None = None,
) -> None:
    """Classify a non-2xx response and raise the matching ActionError.

    Args:
        response: Controller response.
        operation: Verb phrase for the generic message (e.g. "cancel session").
        fatal_statuses: Step-specific status codes mapped to fatal messages.

    Raises:
        ActionError: Retryable for 429 and 5xx, fatal otherwise.
    """
    if response.is_success:
        return

    status = response.status_code
    if status == 429:
        raise retryable_error(RATE_LIMIT_MESSAGE)
    if fatal_statuses and status in fatal_statuses:
        raise fatal_error(fatal_statuses[status])
    if status >= 500:
        raise retryable_error(f"Boundary API server error: {status}")
    raise fatal_error(f"Failed to {operation}: {status} {response.reason_phrase} - {response.text}")


def read_json(response: httpx.Response, *, operation: str) -> dict[str, Any]:
    """Decode a successful response body as a JSON object.

    Raises:
        ActionError: Fatal, if the body is not a JSON object.
    """
    try:
        data = response.json()
    except ValueError as e:
        raise fatal_error(f"Invalid JSON in {operation} response") from e
    if not isinstance(data, dict):
        raise fatal_error(f"Unexpected {operation} response: expected a JSON object")
    return data
