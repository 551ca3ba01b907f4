"""Pydantic V2 schemas for the SW5E character manager.

Submodules:
    enums: Enumeration types (Ability, CasterType, ForceAlignment)
    rules: Static rule data (ClassRule, ArchetypeRule, Power, RuleBook)
    character: The character record (RawCharacter, CharacterClassEntry, ...)
    casting: Casting summaries (TechCasting, ForceCasting, CastingResult)

Example:
    >>> from sw5e_manager.models import CharacterClassEntry, RawCharacter
    >>> hero = RawCharacter(
    ...     name="Kira",
    ...     classes=[CharacterClassEntry(name="Consular", levels=3)],
    ... )
    >>> hero.proficiency_bonus
    2
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from sw5e_manager.models.enums import (
    Ability,
    CasterType,
    ForceAlignment,
)

# =============================================================================
# Rule Data
# =============================================================================
from sw5e_manager.models.rules import (
    ArchetypeRule,
    ClassRule,
    LeveledTableEntry,
    Power,
    RuleBook,
    index_powers,
    parse_table_int,
)

# =============================================================================
# Character Record
# =============================================================================
from sw5e_manager.models.character import (
    AbilityModifiers,
    CharacterArchetype,
    CharacterClassEntry,
    CurrentStats,
    HighLevelCasting,
    RawCharacter,
    Tweak,
    calculate_modifier,
)

# =============================================================================
# Casting Results
# =============================================================================
from sw5e_manager.models.casting import (
    CastingResult,
    ForceCasting,
    TechCasting,
)


__all__ = [
    # Enums
    "Ability",
    "CasterType",
    "ForceAlignment",
    # Rule data
    "ArchetypeRule",
    "ClassRule",
    "LeveledTableEntry",
    "Power",
    "RuleBook",
    "index_powers",
    "parse_table_int",
    # Character record
    "AbilityModifiers",
    "CharacterArchetype",
    "CharacterClassEntry",
    "CurrentStats",
    "HighLevelCasting",
    "RawCharacter",
    "Tweak",
    "calculate_modifier",
    # Casting results
    "CastingResult",
    "ForceCasting",
    "TechCasting",
]
