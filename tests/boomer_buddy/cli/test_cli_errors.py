"""Tests for CLI error wrapping and hints."""

import pytest
import typer

from boomer_buddy.cli import CLIError, cli_error_handler
from boomer_buddy.errors import (
    InputTooLargeError,
    InvalidInputError,
    RulesetNotFoundError,
    SensitiveDataBlockedError,
)


class TestCLIError:
    """Test CLIError formatting and hints."""

    def test_str_names_the_command(self) -> None:
        """The command name prefixes the message."""
        error = CLIError("file missing", command="assess")

        assert str(error) == "CLI command 'assess' failed: file missing"

    def test_str_without_command_is_the_message(self) -> None:
        """Without a command the message is unchanged."""
        assert str(CLIError("file missing")) == "file missing"

    @pytest.mark.parametrize(
        ("cause", "expected"),
        [
            (InputTooLargeError(30_000, 20_000), "BOOMER_BUDDY_MAX_INPUT_CHARS"),
            (InvalidInputError("binary content"), "UTF-8"),
            (SensitiveDataBlockedError("ssn"), "social security"),
            (RulesetNotFoundError("missing"), "ls-rulesets"),
        ],
    )
    def test_known_library_errors_carry_a_hint(
        self, cause: Exception, expected: str
    ) -> None:
        """Input, sensitive-data and ruleset errors suggest a fix."""
        error = CLIError(str(cause), original_error=cause)

        assert error.hint is not None
        assert expected in error.hint

    def test_unknown_errors_have_no_hint(self) -> None:
        """Errors outside the library get no hint."""
        cause = OSError("disk on fire")

        assert CLIError(str(cause), original_error=cause).hint is None
        assert CLIError("no cause").hint is None


class TestCliErrorHandler:
    """Test the cli_error_handler context manager."""

    def test_passes_through_on_success(self) -> None:
        """A block that succeeds is not affected."""
        with cli_error_handler("assess", "Assessment failed"):
            value = 1

        assert value == 1

    def test_library_error_is_wrapped_and_exits(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Library errors become a CLIError panel and exit code 1."""
        cause = InvalidInputError("Input contains binary content")

        with pytest.raises(typer.Exit) as exc_info:
            with cli_error_handler("assess", "Assessment failed"):
                raise cause

        assert exc_info.value.exit_code == 1
        wrapped = exc_info.value.__cause__
        assert isinstance(wrapped, CLIError)
        assert wrapped.command == "assess"
        assert wrapped.original_error is cause
        assert "Only plain UTF-8 text" in capsys.readouterr().out

    def test_cli_error_gains_the_command_name(self) -> None:
        """A CLIError raised without a command is given the handler's."""
        with pytest.raises(typer.Exit) as exc_info:
            with cli_error_handler("scrub", "Scrubbing failed"):
                raise CLIError("bad arguments")

        wrapped = exc_info.value.__cause__
        assert isinstance(wrapped, CLIError)
        assert wrapped.command == "scrub"

    def test_markup_in_messages_is_not_interpreted(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Square brackets in messages are printed literally."""
        with pytest.raises(typer.Exit):
            with cli_error_handler("assess", "Assessment failed"):
                raise ValueError("[bold]not markup[/bold]")

        assert "[bold]not markup[/bold]" in capsys.readouterr().out
