"""
Attack system module for the RPG character demo.

This module handles attack behaviours, the enhancements that can be stacked on
them, and the composed attacks characters carry into combat.
"""

from .attack_behavior import AttackBehavior
from .attack_enhancement import AttackEnhancement
from .composed_attack import BASE_ATTACK_LABEL, ComposedAttack

__all__ = [
    # Import from attack_behavior.py
    "AttackBehavior",
    # Import from attack_enhancement.py
    "AttackEnhancement",
    # Import from composed_attack.py
    "BASE_ATTACK_LABEL",
    "ComposedAttack",
]
