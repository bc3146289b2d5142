"""
Core system module for the RPG character demo.

This module contains the fundamental components shared by the rest of the
package: constants, exceptions, logging setup and console helpers.
"""

from .constants import (
    DEFAULT_LOG_LEVEL,
    CharacterKind,
    NiceEnum,
    SessionOutcome,
)
from .error_handling import (
    GameException,
    InvalidSelection,
)
from .logging import (
    get_logger,
    setup_logging,
)
from .utils import (
    ccapture,
    cprint,
    get_console,
)

__all__ = [
    # Import from constants.py
    "DEFAULT_LOG_LEVEL",
    "CharacterKind",
    "NiceEnum",
    "SessionOutcome",
    # Import from error_handling.py
    "GameException",
    "InvalidSelection",
    # Import from logging.py
    "get_logger",
    "setup_logging",
    # Import from utils.py
    "ccapture",
    "cprint",
    "get_console",
]
