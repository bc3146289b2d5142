"""
Attack behaviours: the base style an attack is carried out with.
"""

from rich.console import Console

from ..core.constants import NiceEnum
from ..core.utils import cprint


class AttackBehavior(NiceEnum):
    """Defines how an attack is carried out."""

    MELEE = "MELEE"
    MAGIC = "MAGIC"

    @property
    def message(self) -> str:
        """Returns the line printed when an attack of this style happens."""
        return {
            AttackBehavior.MELEE: "Performing melee attack with weapon!",
            AttackBehavior.MAGIC: "Casting a powerful magic spell!",
        }[self]

    def execute(self, console: Console | None = None) -> None:
        """
        Carries out the attack by printing its message.

        Args:
            console (Console | None): The console to print to.

        """
        cprint(self.message, console=console)
