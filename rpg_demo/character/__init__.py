"""
Character system module for the RPG character demo.

This module handles character creation and behaviour, including the per-kind
profiles, the preparation sequence and attack configuration.
"""

from .character_factory import CHARACTER_CHOICES, create_character
from .character_profile import CHARACTER_PROFILES, CharacterProfile
from .main import Character

__all__ = [
    # Import from character_factory.py
    "CHARACTER_CHOICES",
    "create_character",
    # Import from character_profile.py
    "CHARACTER_PROFILES",
    "CharacterProfile",
    # Import from main.py
    "Character",
]
