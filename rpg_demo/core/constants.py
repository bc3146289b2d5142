"""
Constants and enumerations for the demo.

Defines the character kinds, the menu texts and prompts shown by the console
session, and the default logging level.
"""

import logging
from enum import Enum

# Logging level used by the console entry point.
DEFAULT_LOG_LEVEL = logging.WARNING


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class CharacterKind(NiceEnum):
    """Defines the kind of character the player can choose."""

    KNIGHT = "KNIGHT"
    SORCERER = "SORCERER"

    @property
    def color(self) -> str:
        """Returns the color string associated with this character kind."""
        return {
            CharacterKind.KNIGHT: "bold yellow",
            CharacterKind.SORCERER: "bold magenta",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies character kind color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class SessionOutcome(NiceEnum):
    """Defines how an interactive session ended."""

    COMPLETED = "COMPLETED"
    ABORTED = "ABORTED"
    INTERRUPTED = "INTERRUPTED"

    @property
    def exit_code(self) -> int:
        """Returns the process exit status for this outcome."""
        return 130 if self is SessionOutcome.INTERRUPTED else 0


# =============================================================================
# MENUS
# =============================================================================

CHARACTER_MENU_TITLE = "Choose your character:"
CHARACTER_MENU_OPTIONS = ["1. Knight", "2. Sorcerer"]

STRATEGY_MENU_TITLE = "Choose your attack strategy:"
STRATEGY_MENU_OPTIONS = ["1. Melee Attack", "2. Magic Attack"]

ENHANCER_MENU_TITLE = "Add an attack enhancer:"
ENHANCER_MENU_OPTIONS = [
    "1. Fire Damage",
    "2. Poison Damage",
    "0. None (proceed to combat)",
]

BINARY_CHOICE_PROMPT = "Enter choice (1 or 2): "
ENHANCER_CHOICE_PROMPT = "Enter choice (0, 1, or 2): "

# Enhancer menu entry that ends the loop.
ENHANCER_DONE_CHOICE = "0"

PREPARATION_BANNER = "=== Preparing for Combat ==="
ATTACK_BANNER = "=== Performing Attack ==="
INTERRUPTED_MESSAGE = "Session interrupted."
