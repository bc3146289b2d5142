"""
Attack enhancements: stackable modifiers applied on top of an attack.
"""

from rich.console import Console

from ..core.constants import NiceEnum
from ..core.utils import cprint


class AttackEnhancement(NiceEnum):
    """Defines the modifiers that can be stacked on an attack."""

    FIRE = "FIRE"
    POISON = "POISON"

    @property
    def label(self) -> str:
        """Returns the label used in the attack description."""
        return f"{self.display_name} Damage"

    @property
    def message(self) -> str:
        """Returns the line printed when this enhancement takes effect."""
        return f"Adding {self.name.lower()} damage to the attack!"

    @classmethod
    def from_name(cls, name: str) -> "AttackEnhancement | None":
        """
        Resolves an enhancer identifier, ignoring case.

        Args:
            name (str): The identifier, e.g. "fire" or "Poison".

        Returns:
            AttackEnhancement | None: The enhancement, or None if the name is
            not known.

        """
        return cls.__members__.get(name.upper())

    def execute(self, console: Console | None = None) -> None:
        """
        Applies the additional effect of this enhancement.

        Args:
            console (Console | None): The console to print to.

        """
        cprint(self.message, console=console)
