"""Boundary controller API calls used by the cancel action.

- auth: password auth method authentication
- sessions: session read and cancel
- http: shared client, headers, and status classification
"""

from boundary_cancel.boundary.auth import authenticate
from boundary_cancel.boundary.http import build_client
from boundary_cancel.boundary.sessions import cancel_session, get_session

__all__ = [
    "authenticate",
    "build_client",
    "cancel_session",
    "get_session",
]
