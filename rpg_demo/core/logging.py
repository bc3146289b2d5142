"""
Logging configuration module for the demo.

Provides centralized logging setup with colored output using rich. Records go
to standard error so that the interactive protocol on standard output stays
readable.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .constants import DEFAULT_LOG_LEVEL


def setup_logging(level: int = DEFAULT_LOG_LEVEL) -> None:
    """
    Sets up logging configuration with rich colored output.

    Args:
        level (int): The logging level to set. Defaults to DEFAULT_LOG_LEVEL.

    """
    # Create a rich console for logging, separate from the game console.
    console = Console(stderr=True, width=120)

    # Configure the rich handler
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )

    # Set up the formatter
    rich_handler.setFormatter(
        logging.Formatter("%(name)s - %(message)s", datefmt="[%X]")
    )

    # Configure the root logger
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
        force=True,
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
