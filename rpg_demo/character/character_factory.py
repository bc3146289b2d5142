"""
Factory turning the player's menu choice into a character.
"""

from ..core.constants import CharacterKind
from ..core.error_handling import InvalidSelection
from .main import Character

# Menu choice for each character kind.
CHARACTER_CHOICES: dict[str, CharacterKind] = {
    "1": CharacterKind.KNIGHT,
    "2": CharacterKind.SORCERER,
}


def create_character(choice: str) -> Character:
    """
    Creates the character matching a menu choice.

    Args:
        choice (str): The raw menu choice, "1" for a Knight or "2" for a
            Sorcerer.

    Returns:
        Character: A new character with an empty action log.

    Raises:
        InvalidSelection: If the choice does not match any character kind.

    """
    kind = CHARACTER_CHOICES.get(choice.lower())
    if kind is None:
        raise InvalidSelection(f"Invalid input: {choice}", choice)
    return Character(kind=kind)
