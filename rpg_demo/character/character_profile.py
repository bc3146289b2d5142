"""
Character profiles: the static configuration of each character kind.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..attacks.attack_behavior import AttackBehavior
from ..core.constants import CharacterKind


class CharacterProfile(BaseModel):
    """
    Represents the static configuration of a character kind: what it does in
    each step of the preparation sequence and the attack it defaults to.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description="The display name of the character kind.",
    )
    equip_action: str = Field(
        description="What the character does when equipping armor.",
    )
    train_action: str = Field(
        description="What the character does when training.",
    )
    weapon_action: str = Field(
        description="What the character does when selecting a weapon.",
    )
    default_attack: AttackBehavior = Field(
        description="The attack behaviour established at the end of the preparation.",
    )

    def describe_action(self, action: str) -> str:
        """
        Turns an action phrase into a log entry.

        Args:
            action (str): The action phrase, e.g. "equips plate armor".

        Returns:
            str: The log entry, e.g. "Knight equips plate armor.".

        """
        return f"{self.name} {action}."


CHARACTER_PROFILES: dict[CharacterKind, CharacterProfile] = {
    CharacterKind.KNIGHT: CharacterProfile(
        name="Knight",
        equip_action="equips plate armor",
        train_action="trains in swordsmanship",
        weapon_action="selects a broadsword",
        default_attack=AttackBehavior.MELEE,
    ),
    CharacterKind.SORCERER: CharacterProfile(
        name="Sorcerer",
        equip_action="equips enchanted robes",
        train_action="studies arcane spells",
        weapon_action="selects a magic staff",
        default_attack=AttackBehavior.MAGIC,
    ),
}
