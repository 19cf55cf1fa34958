"""Logging setup for DateOperations."""

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from date_operations.shared.config.settings import LoggingSettings

ROOT_LOGGER = "date_operations"


def setup_logging(settings: LoggingSettings, level: str | None = None) -> logging.Logger:
    """Configure and return the package logger.

    Calling it again replaces the handlers installed by a previous call,
    so the CLI can reconfigure after parsing --verbose.

    Args:
        settings: Logging settings
        level: Optional level name overriding settings.level

    Returns:
        Configured package logger
    """
    log = logging.getLogger(ROOT_LOGGER)
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()

    log.setLevel((level or settings.level).upper())
    log.propagate = False

    if settings.console_enabled:
        if settings.console_colored:
            console_handler: logging.Handler = RichHandler(
                console=Console(stderr=True), show_path=False
            )
            console_handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
        else:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(logging.Formatter(settings.format))
        log.addHandler(console_handler)

    if settings.file_enabled:
        log_file = Path(settings.file_path)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(settings.format))
        log.addHandler(file_handler)

    if not log.handlers:
        log.addHandler(logging.NullHandler())

    return log


def get_logger(name: str) -> logging.Logger:
    """Get a child of the package logger, e.g. get_logger('cli')."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
