"""Tests for logging configuration."""

import logging
from pathlib import Path

import pytest

from boomer_buddy.logging import (
    DEFAULT_CONFIG_PATH,
    LoggingError,
    load_config,
    setup_logging,
)

CONSOLE_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
BASIC_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _formats(logger: logging.Logger) -> list[str | None]:
    return [
        handler.formatter._fmt if handler.formatter else None
        for handler in logger.handlers
    ]


class TestLoadConfig:
    """Test load_config."""

    def test_loads_bundled_config(self) -> None:
        """The bundled YAML is a dictConfig mapping."""
        config = load_config(DEFAULT_CONFIG_PATH)

        assert config["version"] == 1
        assert "boomer_buddy" in config["loggers"]

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """An unreadable file raises LoggingError."""
        with pytest.raises(LoggingError, match="Failed to read"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        """Malformed YAML raises LoggingError."""
        config_path = tmp_path / "logging.yaml"
        config_path.write_text("version: [1\n", encoding="utf-8")

        with pytest.raises(LoggingError, match="Failed to parse"):
            load_config(config_path)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        """A YAML document that is not a mapping raises LoggingError."""
        config_path = tmp_path / "logging.yaml"
        config_path.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(LoggingError, match="Invalid configuration format"):
            load_config(config_path)


class TestSetupLogging:
    """Test setup_logging."""

    def test_configures_console_handler_from_file(self) -> None:
        """The bundled config installs its stderr console handler on the root."""
        setup_logging()

        assert _formats(logging.getLogger()) == [CONSOLE_FORMAT]

    def test_level_override_applies_to_package_logger(self) -> None:
        """--log-level style overrides reach the package logger."""
        setup_logging(level="debug")

        assert logging.getLogger("boomer_buddy").level == logging.DEBUG
        assert logging.getLogger().level == logging.DEBUG

    def test_invalid_level_falls_back_to_basic_logging(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """An unknown level falls back to basic logging with a warning."""
        setup_logging(level="VERBOSE")

        assert _formats(logging.getLogger()) == [BASIC_FORMAT]
        assert "Failed to configure logging from file" in capsys.readouterr().err

    def test_broken_config_file_falls_back(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A config file that cannot be parsed falls back to basic logging."""
        config_path = tmp_path / "logging.yaml"
        config_path.write_text("version: [1\n", encoding="utf-8")

        setup_logging(config_path=config_path)

        assert "using basic console logging at INFO level" in capsys.readouterr().err

    def test_force_basic_skips_config_file(self) -> None:
        """force_basic configures plain stream logging at the given level."""
        setup_logging(level="ERROR", force_basic=True)

        root = logging.getLogger()
        assert root.level == logging.ERROR
        assert _formats(root) == [BASIC_FORMAT]
