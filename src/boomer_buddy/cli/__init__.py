"""CLI command implementations for Boomer Buddy."""

from boomer_buddy.cli.commands import (
    assess_command,
    list_rulesets_command,
    quick_check_command,
    read_input_text,
    scrub_command,
)
from boomer_buddy.cli.errors import CLIError, cli_error_handler

__all__ = [
    "CLIError",
    "assess_command",
    "cli_error_handler",
    "list_rulesets_command",
    "quick_check_command",
    "read_input_text",
    "scrub_command",
]
