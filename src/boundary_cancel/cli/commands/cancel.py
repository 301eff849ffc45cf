"""Cancel command for boundary-cancel CLI."""

from __future__ import annotations

__all__ = ["cancel"]

import asyncio
import json
import sys

import click

from boundary_cancel.action import invoke
from boundary_cancel.config import ActionContext
from boundary_cancel.constants import EXIT_FATAL, EXIT_RETRYABLE, STEP_DELAY_SECONDS
from boundary_cancel.exceptions import ActionError


@click.command()
@click.option("--session-id", required=True, help="Session to cancel (e.g. s_1234567890)")
@click.option("--auth-method-id", required=True, help="Password auth method (e.g. ampw_1234567890)")
@click.option("--address", default=None, help="Controller URL (default: $ADDRESS)")
@click.option("--no-delay", is_flag=True, help="Skip the pause between API calls")
def cancel(session_id: str, auth_method_id: str, address: str | None, no_delay: bool) -> None:
    """Cancel a Boundary session.

    Authenticates with BASIC_USERNAME/BASIC_PASSWORD from the environment,
    reads the session version and cancels the session.

    Exits 75 if the failure is retryable, 1 otherwise.
    """
    params = {"sessionId": session_id, "authMethodId": auth_method_id}
    if address:
        params["address"] = address

    try:
        result = asyncio.run(
            invoke(
                params,
                ActionContext.from_environ(),
                step_delay_seconds=0 if no_delay else STEP_DELAY_SECONDS,
            )
        )
    except ActionError as e:
        kind = "retryable" if e.retryable else "fatal"
        click.echo(f"Error ({kind}): {e.message}", err=True)
        sys.exit(EXIT_RETRYABLE if e.retryable else EXIT_FATAL)

    click.echo(json.dumps(result, indent=2))
