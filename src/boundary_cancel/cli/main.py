"""Main CLI entry point for boundary-cancel.

Commands:
    cancel - Cancel a Boundary session
    halt   - Print a halt acknowledgment

Environment:
    BASIC_USERNAME, BASIC_PASSWORD  Password auth method credentials
    ADDRESS                         Controller URL (or --address)
    BOUNDARY_HTTP_TIMEOUT           Per-request timeout in seconds
"""

from __future__ import annotations

__all__ = ["cli", "main"]

import sys
from pathlib import Path

import click

from boundary_cancel import __version__
from boundary_cancel.constants import APP_NAME
from boundary_cancel.telemetry import configure_system_logger_file

from .commands.cancel import cancel
from .commands.halt import halt


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write warnings and errors as JSONL to this file",
)
@click.pass_context
def cli(ctx: click.Context, version: bool, log_file: Path | None) -> None:
    """boundary-cancel: Cancel HashiCorp Boundary sessions."""
    if version:
        click.echo(f"{APP_NAME} {__version__}")
        sys.exit(0)
    if log_file is not None:
        configure_system_logger_file(log_file)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(cancel)
cli.add_command(halt)


def main() -> None:
    """CLI entry point."""
    cli()
