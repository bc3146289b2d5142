"""
User interface module for the RPG character demo.

This module provides the command-line menus and the input reader used by the
interactive session.
"""

from .cli_interface import (
    LineReader,
    PromptToolkitReader,
    show_banner,
    show_error,
    show_menu,
)

__all__ = [
    "LineReader",
    "PromptToolkitReader",
    "show_banner",
    "show_error",
    "show_menu",
]
