"""
Logging configuration module for the movie battle.

Provides centralized logging setup with colored output using rich.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.INFO) -> None:
    """
    Sets up logging configuration with rich colored output on stderr.

    Args:
        level (int): The logging level to set. Defaults to logging.INFO.

    """
    # Keep log records off stdout, which carries the battle report.
    console = Console(stderr=True, width=120, force_jupyter=False)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(
        logging.Formatter("%(name)s - %(message)s", datefmt="[%X]")
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
    )


def get_logger(name: str) -> logging.Logger:
    """
    Gets a logger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        logging.Logger: The configured logger instance.

    """
    return logging.getLogger(name)


# Default logger for the package.
logger = get_logger("moviebattle")


def format_message(message: str, context: dict[str, Any] | None = None) -> str:
    """
    Appends the context, formatted as key=value pairs, to the message.

    Args:
        message (str): The message.
        context (dict[str, Any] | None): Optional context dictionary.

    Returns:
        str: The message followed by its context in square brackets.

    """
    if not context:
        return message
    context_str = " ".join(f"{k}={v}" for k, v in context.items())
    return f"{message} [{context_str}]"


def log_error(message: str, context: dict[str, Any] | None = None) -> None:
    """Logs an error message with optional context."""
    logger.error(format_message(message, context))


def log_warning(message: str, context: dict[str, Any] | None = None) -> None:
    """Logs a warning message with optional context."""
    logger.warning(format_message(message, context))


def log_info(message: str, context: dict[str, Any] | None = None) -> None:
    """Logs an info message with optional context."""
    logger.info(format_message(message, context))


def log_debug(message: str, context: dict[str, Any] | None = None) -> None:
    """Logs a debug message with optional context."""
    logger.debug(format_message(message, context))
