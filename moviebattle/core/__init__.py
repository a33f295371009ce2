"""
Core system module for the movie battle.

This module contains the shared configuration constants, logging setup and
console display utilities.
"""

from .constants import (
    EntityType,
    MIN_DAMAGE,
)
from .logging import (
    get_logger,
    log_debug,
    log_error,
    log_info,
    log_warning,
    setup_logging,
)
from .utils import (
    cprint,
    crule,
    make_bar,
    truncating_div,
)

__all__ = [
    # Import from constants.py
    "EntityType",
    "MIN_DAMAGE",
    # Import from logging.py
    "get_logger",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
    "setup_logging",
    # Import from utils.py
    "cprint",
    "crule",
    "make_bar",
    "truncating_div",
]
