"""Enumeration types for the SW5E character manager.

These enums are the vocabulary shared by rule tables, character records
and casting results. Values match the strings used in the published
SW5E data so that rule tables can be parsed without translation.
"""

from __future__ import annotations

from enum import StrEnum


class Ability(StrEnum):
    """The six core abilities."""

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def full_name(self) -> str:
        """Get the full name of the ability.

        Returns:
            Full ability name (e.g., 'Wisdom' for WIS).
        """
        return self.value.capitalize()


class CasterType(StrEnum):
    """The two parallel power systems, plus non-casters.

    Tech powers draw on Intelligence; Force powers draw on Wisdom
    (light side) and Charisma (dark side).
    """

    TECH = "Tech"
    FORCE = "Force"
    NONE = "None"

    @property
    def tweak_prefix(self) -> str:
        """Get the root of the tweak paths for this caster type.

        Returns:
            'techCasting' or 'forceCasting'.
        """
        return f"{self.value.lower()}Casting"


class ForceAlignment(StrEnum):
    """Alignment of a Force power, which selects its casting ability."""

    LIGHT = "Light"
    DARK = "Dark"
    UNIVERSAL = "Universal"
    NONE = "None"


__all__ = [
    "Ability",
    "CasterType",
    "ForceAlignment",
]
