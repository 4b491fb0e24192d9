"""CLI error handling for Boomer Buddy."""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import override

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from boomer_buddy.errors import (
    InputTooLargeError,
    InvalidInputError,
    RulesetError,
    SensitiveDataBlockedError,
)

logger = logging.getLogger(__name__)
console = Console()

# Checked in order; the first matching type supplies the hint.
_HINTS: tuple[tuple[type[Exception], str], ...] = (
    (
        InputTooLargeError,
        "Shorten the message or raise BOOMER_BUDDY_MAX_INPUT_CHARS.",
    ),
    (InvalidInputError, "Only plain UTF-8 text can be checked."),
    (
        SensitiveDataBlockedError,
        "Remove social security and card numbers before sharing this message.",
    ),
    (RulesetError, "Run 'boomer-buddy ls-rulesets' to see what is installed."),
)


class CLIError(Exception):
    """Exception raised by CLI commands for problems with their arguments."""

    def __init__(
        self,
        message: str,
        command: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialise CLI error with context.

        Args:
            message: Human-readable error message describing what went wrong
            command: Name of the CLI command that failed (e.g., "assess")
            original_error: The underlying exception that caused this CLI error

        """
        super().__init__(message)
        self.command = command
        self.original_error = original_error

    @override
    def __str__(self) -> str:
        """Return formatted error message with CLI context."""
        base_message = super().__str__()
        if self.command:
            return f"CLI command '{self.command}' failed: {base_message}"
        return base_message

    @property
    def hint(self) -> str | None:
        """Suggestion for the user based on the underlying error, if any."""
        cause = self.original_error
        if cause is None:
            return None
        for error_type, hint in _HINTS:
            if isinstance(cause, error_type):
                return hint
        return None


def _render(error: CLIError, title: str) -> None:
    body = f"[red]{escape(str(error))}[/red]"
    if error.hint:
        body += f"\n\n[yellow]{escape(error.hint)}[/yellow]"
    console.print(Panel(body, title=f"❌ {title}", border_style="red"))


@contextmanager
def cli_error_handler(command: str, title: str) -> Generator[None]:
    """Render any failure as a Rich error panel and exit with code 1.

    Library errors are wrapped in CLIError so the panel names the command
    and, for known error types, suggests a fix.

    Args:
        command: CLI command name for error context.
        title: Panel title for the error display.

    """
    try:
        yield
    except CLIError as e:
        if e.command is None:
            e.command = command
        logger.debug("%s: %s", title, e)
        _render(e, title)
        raise typer.Exit(1) from e
    except Exception as e:
        cli_error = CLIError(str(e), command=command, original_error=e)
        logger.debug("%s: %s", title, cli_error)
        _render(cli_error, title)
        raise typer.Exit(1) from cli_error
