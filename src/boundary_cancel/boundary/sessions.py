"""Session read and cancel.

Cancel uses optimistic concurrency: the caller reads the session's current
version and passes it back on cancel. The controller rejects a stale version
with 409, which is terminal here (no re-read).
"""

from __future__ import annotations

__all__ = ["cancel_session", "get_session"]

import httpx

from boundary_cancel.boundary.http import raise_for_status, read_json, request_headers, resource_url
from boundary_cancel.exceptions import fatal_error

_EXPIRED_TOKEN = "Invalid or expired authentication token"


async def get_session(
    session_id: str,
    token: str,
    base_url: str,
    *,
    http_client: httpx.AsyncClient,
) -> int:
    """Read a session and return its current version.

    Raises:
        ActionError: Retryable on 429/5xx, fatal on 401/404, other failures,
            or a response without an integer version.
    """
    response = await http_client.get(
        resource_url(base_url, "sessions", session_id),
        headers=request_headers(token),
    )

    raise_for_status(
        response,
        operation="get session",
        fatal_statuses={
            401: _EXPIRED_TOKEN,
            404: f"Session not found: {session_id}",
        },
    )

    version = read_json(response, operation="get session").get("version")
    # bool is an int subclass
    if not isinstance(version, int) or isinstance(version, bool):
        raise fatal_error("No version returned from session")
    return version


async def cancel_session(
    session_id: str,
    version: int,
    token: str,
    base_url: str,
    *,
    http_client: httpx.AsyncClient,
) -> bool:
    """Cancel a session at the given version.

    Returns:
        True once the controller accepts the cancel. The body is not inspected.

    Raises:
        ActionError: Retryable on 429/5xx, fatal on 401/404/409 and other failures.
    """
    response = await http_client.post(
        resource_url(base_url, "sessions", session_id, "cancel"),
        headers=request_headers(token),
        json={"id": session_id, "version": version},
    )

    raise_for_status(
        response,
        operation="cancel session",
        fatal_statuses={
            401: _EXPIRED_TOKEN,
            404: f"Session not found: {session_id}",
            409: f"Session conflict (may already be cancelled or version mismatch): {response.text}",
        },
    )
    return True
