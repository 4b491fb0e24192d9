"""CLI command implementations for Boomer Buddy."""

import json
import logging
import sys
from pathlib import Path

import typer

from boomer_buddy.cli.errors import CLIError, cli_error_handler
from boomer_buddy.cli.formatting import OutputFormatter
from boomer_buddy.logging import setup_logging
from boomer_buddy.privacy import PiiScrubber
from boomer_buddy.risk import RiskScorer, RiskScorerConfig
from boomer_buddy.rulesets import RulesetRegistry

logger = logging.getLogger(__name__)


def _discover_rulesets() -> None:
    """Register rulesets published by installed packages."""
    RulesetRegistry().discover_from_entry_points()


def read_input_text(text: str | None, file: Path | None) -> str | bytes:
    """Resolve the text to check from an argument, a file, or stdin.

    File and stdin contents are returned as bytes so UTF-8 validation happens
    in the scorer like any other input.

    Raises:
        CLIError: If both an argument and a file are given, the file cannot
            be read, or no text is available

    """
    if text is not None and file is not None:
        raise CLIError("Give the text as an argument or with --file, not both")

    if file is not None:
        try:
            return file.read_bytes()
        except OSError as e:
            raise CLIError(f"Cannot read {file}: {e}", original_error=e) from e

    if text is not None:
        return text

    if sys.stdin.isatty():
        raise CLIError("No text given. Pass TEXT, use --file, or pipe text on stdin")
    return sys.stdin.buffer.read()


def assess_command(
    text: str | None,
    file: Path | None,
    caller: str | None,
    as_json: bool,
    log_level: str = "INFO",
) -> None:
    """CLI command implementation for a full risk assessment.

    Args:
        text: Message text, or None to read --file or stdin
        file: File holding the message text
        caller: Optional caller phone number
        as_json: Print the camelCase JSON assessment instead of a report
        log_level: Logging level

    """
    setup_logging(level=log_level)
    with cli_error_handler("assess", "Assessment failed"):
        _discover_rulesets()
        content = read_input_text(text, file)
        scorer = RiskScorer(RiskScorerConfig.from_properties({}))
        assessment = scorer.assess(content, caller_number=caller)
        logger.info(
            "Assessment complete: %s (%d%%)",
            assessment.overall_risk.value,
            assessment.confidence,
        )

        if as_json:
            typer.echo(json.dumps(assessment.to_json_dict(), indent=2))
        else:
            OutputFormatter().format_assessment(assessment)


def quick_check_command(
    text: str | None, file: Path | None, log_level: str = "INFO"
) -> None:
    """CLI command implementation for the quick check.

    Args:
        text: Message text, or None to read --file or stdin
        file: File holding the message text
        log_level: Logging level

    """
    setup_logging(level=log_level)
    with cli_error_handler("quick-check", "Quick check failed"):
        _discover_rulesets()
        content = read_input_text(text, file)
        scorer = RiskScorer(RiskScorerConfig.from_properties({}))
        OutputFormatter().format_verdict(scorer.quick_check(content))


def scrub_command(text: str | None, file: Path | None, log_level: str = "INFO") -> None:
    """CLI command implementation for PII scrubbing.

    Args:
        text: Text to scrub, or None to read --file or stdin
        file: File holding the text
        log_level: Logging level

    """
    setup_logging(level=log_level)
    with cli_error_handler("scrub", "Scrubbing failed"):
        content = read_input_text(text, file)
        scrubber = PiiScrubber(
            max_input_chars=RiskScorerConfig.from_properties({}).max_input_chars
        )
        OutputFormatter().format_scrub_result(scrubber.scrub_text(content))


def list_rulesets_command(log_level: str = "INFO") -> None:
    """CLI command implementation for listing rulesets.

    Args:
        log_level: Logging level

    """
    setup_logging(level=log_level)
    with cli_error_handler("ls-rulesets", "Failed to list rulesets"):
        _discover_rulesets()
        rulesets = RulesetRegistry().list_registered()
        logger.info("Found %d available rulesets", len(rulesets))
        OutputFormatter().format_ruleset_list(rulesets)
