"""
Configuration system for ff-loggy.

Supports environment variables, config files, and programmatic configuration.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .backend import Backend
from .base import Logger
from .combined import new_combined_handler
from .console import ConsoleOptions, new_console_handler
from .handlers import HandlerOptions
from .levels import parse_level

logger = logging.getLogger(__name__)

_FORMATS = ("text", "json")

_DEFAULT_CONFIG: dict[str, Any] = {
    "level": "INFO",
    "format": "text",
    "to_stdout": False,
    "add_source": False,
    "colors": True,
}

# Global configuration
_GLOBAL_CONFIG: dict[str, Any] = dict(_DEFAULT_CONFIG)


def configure_logging(
    level: str | None = None,
    format: str | None = None,
    to_stdout: bool | None = None,
    add_source: bool | None = None,
    colors: bool | None = None,
    config_file: str | Path | None = None,
    use_env: bool = True,
) -> None:
    """
    Configure global logging settings.

    Precedence, lowest to highest: defaults, config file, environment,
    explicit arguments.

    Args:
        level: Minimum log level (DEBUG, INFO, WARN, ERROR)
        format: Output format (text, json)
        to_stdout: Write console output to stdout instead of stderr
        add_source: Whether to include the call site
        colors: Whether to color console output by level
        config_file: Path to JSON config file
        use_env: Whether to read from environment variables

    Raises:
        ValueError: If the resulting level or format is invalid
    """
    config = dict(_GLOBAL_CONFIG)

    # Load from config file if provided
    if config_file:
        config_path = Path(config_file)
        if config_path.exists():
            with open(config_path) as f:
                file_config = json.load(f)
            logger.debug("Loaded logging config from %s", config_path)
            config.update(file_config)

    # Load from environment variables if enabled
    if use_env:
        config.update(_load_env_config())

    # Apply explicit arguments (highest priority)
    if level is not None:
        config["level"] = level.upper()
    if format is not None:
        config["format"] = format.lower()
    if to_stdout is not None:
        config["to_stdout"] = to_stdout
    if add_source is not None:
        config["add_source"] = add_source
    if colors is not None:
        config["colors"] = colors

    _validate(config)
    _GLOBAL_CONFIG.clear()
    _GLOBAL_CONFIG.update(config)


def _parse_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


def _load_env_config() -> dict[str, Any]:
    """Load configuration from environment variables."""
    config: dict[str, Any] = {}

    # FF_LOG_LEVEL
    if level := os.getenv("FF_LOG_LEVEL"):
        config["level"] = level.upper()

    # FF_LOG_FORMAT
    if format := os.getenv("FF_LOG_FORMAT"):
        config["format"] = format.lower()

    # FF_LOG_TO_STDOUT
    if to_stdout := os.getenv("FF_LOG_TO_STDOUT"):
        config["to_stdout"] = _parse_bool(to_stdout)

    # FF_LOG_ADD_SOURCE
    if add_source := os.getenv("FF_LOG_ADD_SOURCE"):
        config["add_source"] = _parse_bool(add_source)

    # FF_LOG_COLORS
    if colors := os.getenv("FF_LOG_COLORS"):
        config["colors"] = _parse_bool(colors)

    return config


def _validate(config: dict[str, Any]) -> None:
    parse_level(config["level"])
    if config["format"] not in _FORMATS:
        raise ValueError(f"Unknown log format: {config['format']}")


def get_config() -> dict[str, Any]:
    """Get current global configuration."""
    return _GLOBAL_CONFIG.copy()


def reset_config() -> None:
    """Reset configuration to defaults."""
    _GLOBAL_CONFIG.clear()
    _GLOBAL_CONFIG.update(_DEFAULT_CONFIG)


def console_options_from_config() -> ConsoleOptions:
    """Build ConsoleOptions from the current global configuration."""
    return ConsoleOptions(
        json=_GLOBAL_CONFIG["format"] == "json",
        to_stdout=_GLOBAL_CONFIG["to_stdout"],
        colors=_GLOBAL_CONFIG["colors"],
        handler_options=HandlerOptions(
            level=parse_level(_GLOBAL_CONFIG["level"]),
            add_source=_GLOBAL_CONFIG["add_source"],
        ),
    )


def get_logger(name: str | None = None, *extra_handlers: Backend) -> Logger:
    """
    Get a logger writing to the console according to the global configuration.

    Args:
        name: Logger name, bound as the ``logger`` attribute
        *extra_handlers: Further backends to fan out to after the console

    Returns:
        Logger over the console handler, or over a CombinedHandler when
        extra handlers are given

    Example:
        # Console only, using global config
        logger = get_logger("my_service")

        # Console plus a JSON audit stream
        audit = new_json_handler(audit_file, HandlerOptions(level=Level.WARN))
        logger = get_logger("my_service", audit)
    """
    handler: Backend = new_console_handler(console_options_from_config())
    if extra_handlers:
        handler = new_combined_handler(handler, *extra_handlers)
    return Logger(handler, name=name)
