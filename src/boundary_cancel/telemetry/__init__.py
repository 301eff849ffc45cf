"""Operational logging for boundary-cancel."""

from boundary_cancel.telemetry.system_logger import (
    configure_system_logger_file,
    get_system_logger,
)

__all__ = [
    "configure_system_logger_file",
    "get_system_logger",
]
