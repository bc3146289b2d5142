"""
Composed attacks: one base behaviour plus a chain of enhancements.
"""

from pydantic import BaseModel, ConfigDict, Field
from rich.console import Console

from .attack_behavior import AttackBehavior
from .attack_enhancement import AttackEnhancement

# Label of the base layer in every description.
BASE_ATTACK_LABEL = "Basic Attack"


class ComposedAttack(BaseModel):
    """
    Represents an attack as a base behaviour with stacked enhancements.

    Enhancements are ordered from the innermost (first added) to the outermost
    (most recently added) and may repeat. The model is frozen: adding an
    enhancement returns a new, longer chain.
    """

    model_config = ConfigDict(frozen=True)

    base: AttackBehavior = Field(
        description="The behaviour the attack is carried out with.",
    )
    enhancements: tuple[AttackEnhancement, ...] = Field(
        default=(),
        description="The enhancements stacked on the base, in the order they were added.",
    )

    @property
    def layers(self) -> int:
        """Returns the number of layers in the chain, base included."""
        return 1 + len(self.enhancements)

    def __len__(self) -> int:
        return self.layers

    def with_enhancement(self, enhancement: AttackEnhancement) -> "ComposedAttack":
        """
        Wraps this chain with one more enhancement.

        Args:
            enhancement (AttackEnhancement): The outermost enhancement to add.

        Returns:
            ComposedAttack: A new chain; this one is left untouched.

        """
        return ComposedAttack(
            base=self.base,
            enhancements=(*self.enhancements, enhancement),
        )

    def describe(self) -> str:
        """
        Describes the attack, base first, then enhancements in add order.

        Returns:
            str: For example "Basic Attack, Fire Damage, Poison Damage".

        """
        return ", ".join(
            [BASE_ATTACK_LABEL, *(enhancement.label for enhancement in self.enhancements)]
        )

    def execute(self, console: Console | None = None) -> None:
        """
        Executes the base behaviour, then every enhancement in add order.

        Args:
            console (Console | None): The console to print to.

        """
        self.base.execute(console)
        for enhancement in self.enhancements:
            enhancement.execute(console)
