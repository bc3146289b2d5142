"""
Character module for the demo.

Defines the Character model: a character kind with its preparation log and the
composed attack it will perform.
"""

from typing import Any

from catchery import log_debug
from pydantic import BaseModel, Field
from rich.console import Console

from ..attacks.attack_behavior import AttackBehavior
from ..attacks.attack_enhancement import AttackEnhancement
from ..attacks.composed_attack import ComposedAttack
from ..core.constants import CharacterKind
from ..core.utils import cprint
from .character_profile import CHARACTER_PROFILES, CharacterProfile


class Character(BaseModel):
    """
    Represents a playable character.

    The preparation sequence is the same for every kind; only the entries it
    logs and the default attack differ, and those come from the kind's
    CharacterProfile.
    """

    kind: CharacterKind = Field(
        description="The kind of character.",
    )
    actions: list[str] = Field(
        default_factory=list,
        description="The log of preparation actions, in the order they happened.",
    )
    attack: ComposedAttack | None = Field(
        default=None,
        description="The configured attack, None until a strategy is set.",
    )

    @property
    def profile(self) -> CharacterProfile:
        return CHARACTER_PROFILES[self.kind]

    @property
    def name(self) -> str:
        return self.profile.name

    @property
    def current_attack(self) -> ComposedAttack:
        """Returns the configured attack, or a bare default one if none is set."""
        if self.attack is None:
            return ComposedAttack(base=self.profile.default_attack)
        return self.attack

    # ===========================================================================
    # PREPARATION
    # ===========================================================================

    def prepare_for_combat(self, console: Console | None = None) -> None:
        """
        Runs the preparation sequence and prints the resulting log.

        The steps are always equip, train, select weapon, then establish the
        default attack. The default attack is only established when no attack
        has been configured, so a strategy chosen beforehand is kept.

        Args:
            console (Console | None): The console to print to.

        """
        profile = self.profile
        self._add_action(profile.equip_action)
        self._add_action(profile.train_action)
        self._add_action(profile.weapon_action)
        if self.attack is None:
            self.set_attack_strategy(profile.default_attack)
        self._log_preparation(console)

    def _add_action(self, action: str) -> None:
        self.actions.append(self.profile.describe_action(action))

    def _log_preparation(self, console: Console | None) -> None:
        cprint(f"Preparation complete for {self.kind.colored_name}:", console=console)
        for action in self.actions:
            cprint(action, console=console)

    # ===========================================================================
    # ATTACKS
    # ===========================================================================

    def set_attack_strategy(self, behavior: AttackBehavior) -> None:
        """
        Replaces the attack with a bare one using the given behaviour.

        Any enhancement stacked so far is discarded.

        Args:
            behavior (AttackBehavior): The new base behaviour.

        """
        self.attack = ComposedAttack(base=behavior)

    def add_attack_enhancer(self, enhancer_type: str) -> None:
        """
        Stacks an enhancement on the current attack.

        Unknown enhancer types are ignored and leave the attack unchanged.

        Args:
            enhancer_type (str): The enhancer identifier, "fire" or "poison"
                (case-insensitive).

        """
        enhancement = AttackEnhancement.from_name(enhancer_type)
        if enhancement is None:
            log_debug(
                f"Ignoring unknown attack enhancer: {enhancer_type}",
                self._log_context(enhancer_type=enhancer_type),
            )
            return
        self.attack = self.current_attack.with_enhancement(enhancement)
        log_debug(
            f"{self.name} attack is now: {self.attack.describe()}",
            self._log_context(enhancer_type=enhancer_type),
        )

    def perform_attack(self, console: Console | None = None) -> None:
        """
        Prints the attack description, then executes the attack.

        Args:
            console (Console | None): The console to print to.

        """
        attack = self.current_attack
        cprint(f"Attack: {attack.describe()}", console=console)
        attack.execute(console)

    def _log_context(self, **extra: Any) -> dict[str, Any]:
        return {"character": self.name, "context": "attack_enhancement", **extra}
