"""Text output for simulation snapshots."""

from three_body.io.console import (
    format_vector,
    format_body,
    format_snapshot,
    format_diagnostics_header,
    format_diagnostics_row,
)

__all__ = [
    "format_vector",
    "format_body",
    "format_snapshot",
    "format_diagnostics_header",
    "format_diagnostics_row",
]
