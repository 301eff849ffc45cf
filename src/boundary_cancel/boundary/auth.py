"""Password auth method authentication.

Exchanges a login name and password for a bearer token:

    POST {base}/v1/auth-methods/{auth_method_id}:authenticate
    {"attributes": {"login_name": ..., "password": ...}}

The token lives only for the current invocation and is never stored or logged.
"""

from __future__ import annotations

__all__ = ["authenticate"]

import httpx

from boundary_cancel.boundary.http import raise_for_status, read_json, request_headers, resource_url
from boundary_cancel.exceptions import fatal_error

_INVALID_CREDENTIALS = "Invalid username or password"


async def authenticate(
    auth_method_id: str,
    username: str,
    password: str,
    base_url: str,
    *,
    http_client: httpx.AsyncClient,
) -> str:
    """Authenticate against a password auth method.

    Args:
        auth_method_id: Boundary auth method ID (e.g. "ampw_1234567890").
        username: Login name.
        password: Password.
        base_url: Controller URL without trailing slash.
        http_client: Client to send the request with.

    Returns:
        Bearer token.

    Raises:
        ActionError: Retryable on 429/5xx, fatal on bad credentials,
            other failures, or a response without a token.
    """
    response = await http_client.post(
        resource_url(base_url, "auth-methods", auth_method_id, "authenticate"),
        headers=request_headers(),
        json={"attributes": {"login_name": username, "password": password}},
    )

    raise_for_status(
        response,
        operation="authenticate",
        fatal_statuses={401: _INVALID_CREDENTIALS, 403: _INVALID_CREDENTIALS},
    )

    attributes = read_json(response, operation="authenticate").get("attributes")
    token = attributes.get("token") if isinstance(attributes, dict) else None
    if not token or not isinstance(token, str):
        raise fatal_error("No token returned from authentication")
    return token
