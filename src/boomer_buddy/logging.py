"""Python-standard logging configuration for Boomer Buddy.

Logging is configured with logging.config.dictConfig() from a YAML file
bundled at boomer_buddy/config/logging.yaml.
"""

import logging
import logging.config
import sys
from pathlib import Path
from typing import Any, cast

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config" / "logging.yaml"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingError(Exception):
    """Exception raised for logging configuration errors."""

    pass


def load_config(config_path: Path) -> dict[str, Any]:
    """Load logging configuration from a YAML file.

    Raises:
        LoggingError: If configuration cannot be read or parsed

    """
    try:
        with config_path.open(encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LoggingError(f"Failed to parse YAML config {config_path}: {e}") from e
    except OSError as e:
        raise LoggingError(f"Failed to read config file {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise LoggingError(f"Invalid configuration format in {config_path}")

    return cast(dict[str, Any], config)


def _apply_level_override(config: dict[str, Any], level: str) -> None:
    """Set every logger to ``level`` and lower handler levels that would filter it."""
    level = level.upper()
    if level not in _LEVELS:
        raise LoggingError(f"Invalid log level: {level}")
    numeric_level = cast(int, getattr(logging, level))

    for logger_config in config.get("loggers", {}).values():
        logger_config["level"] = level

    if "root" in config:
        config["root"]["level"] = level

    for handler_config in config.get("handlers", {}).values():
        if isinstance(handler_config, dict) and "level" in handler_config:
            handler_level = str(handler_config["level"]).upper()
            current = getattr(logging, handler_level, logging.INFO)
            if numeric_level < current:
                handler_config["level"] = level


def setup_logging(
    config_path: Path | str | None = None,
    level: str | None = None,
    force_basic: bool = False,
) -> None:
    """Configure logging using Python standard dictConfig.

    Any failure to load or apply the file falls back to basic console
    logging on stderr, with a warning.

    Args:
        config_path: Path to logging configuration file; the bundled
            config/logging.yaml when omitted
        level: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        force_basic: Skip the config file and use basic console logging

    """
    if force_basic:
        _setup_basic_logging(level or "INFO")
        return

    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    try:
        config = load_config(path)
        if level:
            _apply_level_override(config, level)
        logging.config.dictConfig(config)
        logging.getLogger(__name__).debug("Logging configured from: %s", path)
    except (LoggingError, ImportError, KeyError, TypeError, ValueError) as e:
        fallback_level = level or "INFO"
        _setup_basic_logging(fallback_level)
        logging.getLogger(__name__).warning(
            "Failed to configure logging from file (%s), "
            "using basic console logging at %s level",
            e,
            fallback_level,
        )


def _setup_basic_logging(level: str) -> None:
    """Set up basic console logging as fallback."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
