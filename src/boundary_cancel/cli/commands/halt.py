"""Halt command for boundary-cancel CLI."""

from __future__ import annotations

__all__ = ["halt"]

import asyncio
import json

import click

from boundary_cancel import action


@click.command()
@click.option("--session-id", default=None, help="Session being processed")
@click.option("--auth-method-id", default=None, help="Auth method being used")
@click.option("--reason", default=None, help="Why the job is halting")
def halt(session_id: str | None, auth_method_id: str | None, reason: str | None) -> None:
    """Print a halt acknowledgment. Makes no API calls."""
    params = {"sessionId": session_id, "authMethodId": auth_method_id, "reason": reason}
    result = asyncio.run(action.halt(params))
    click.echo(json.dumps(result, indent=2))
