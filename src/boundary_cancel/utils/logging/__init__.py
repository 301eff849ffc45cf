"""Logging utilities.

- iso_formatter: ISO 8601 timestamps and JSONL log formatting

Import directly from submodules:
    from boundary_cancel.utils.logging.iso_formatter import ISO8601Formatter
"""

__all__: list[str] = []  # Direct submodule imports required (see docstring)
