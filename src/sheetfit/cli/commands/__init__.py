"""CLI command implementations for sheetfit.

This package contains subcommands for the sheetfit CLI, including:
- validate: Validate a job file
- quote, history, analyze: Quote pricing and history review
"""

from sheetfit.cli.commands.quotes import analyze_command, history_command, quote_command
from sheetfit.cli.commands.validate import display_config_error, validate_command

__all__ = [
    "analyze_command",
    "display_config_error",
    "history_command",
    "quote_command",
    "validate_command",
]
