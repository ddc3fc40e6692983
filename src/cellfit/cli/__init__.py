"""Command-line interface for cellfit."""

from .parser import apply_cli_settings, create_cli_parser, has_operation
from .runner import render_file_preview, run_cli_command

__all__ = [
    "create_cli_parser",
    "apply_cli_settings",
    "has_operation",
    "render_file_preview",
    "run_cli_command",
]
