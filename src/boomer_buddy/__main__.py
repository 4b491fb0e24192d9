"""Main entry point for the Boomer Buddy command-line interface.

Commands:
- assess: Full scam-risk assessment with recommendations
- quick-check: Fast safe/suspicious/dangerous verdict
- scrub: Remove personal data from text
- ls-rulesets: List registered rulesets
"""

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from boomer_buddy.cli import (
    assess_command,
    list_rulesets_command,
    quick_check_command,
    scrub_command,
)

# Load environment variables from .env file if it exists
_ = load_dotenv()

app = typer.Typer(name="boomer-buddy", no_args_is_help=True)

TextArgument = Annotated[
    str | None,
    typer.Argument(help="Text to check. Omit to use --file or read stdin"),
]
FileOption = Annotated[
    Path | None,
    typer.Option(
        "--file",
        "-f",
        help="Read the text from a file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        case_sensitive=False,
    ),
]


@app.command()
def assess(
    text: TextArgument = None,
    file: FileOption = None,
    caller: Annotated[
        str | None,
        typer.Option(
            "--caller",
            help="Phone number the message or call came from",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the assessment as JSON",
            rich_help_panel="Output",
        ),
    ] = False,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Assess a message for scam risk.

    Example:
        boomer-buddy assess "Your account is suspended, verify now" --caller 8005550199

    """
    assess_command(text, file, caller, as_json, log_level)


@app.command(name="quick-check")
def quick_check(
    text: TextArgument = None,
    file: FileOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Give a fast safe / suspicious / dangerous verdict."""
    quick_check_command(text, file, log_level)


@app.command()
def scrub(
    text: TextArgument = None,
    file: FileOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Remove personal data (emails, phone numbers, addresses) from text."""
    scrub_command(text, file, log_level)


@app.command(name="ls-rulesets")
def list_available_rulesets(log_level: LogLevelOption = "WARNING") -> None:
    """List available (built-in & registered) rulesets."""
    list_rulesets_command(log_level)


if __name__ == "__main__":
    app()
