"""Command-line interface for boundary-cancel.

Runs the cancel and halt handlers outside the job framework, reading secrets
from the process environment.
"""

from .main import cli, main

__all__ = ["cli", "main"]
