"""SW5E character manager - casting engine.

Computes a character's Tech and Force casting statistics (point pools,
attack modifiers, save DCs, max power level and known powers) from class
levels, archetype choices, ability modifiers and static rule tables.

Example:
    >>> from sw5e_manager import CastingCalculator, RuleBook, RawCharacter
    >>> calculator = CastingCalculator(RuleBook(classes=classes, powers=powers))
    >>> result = calculator.calculate(hero, modifiers)
    >>> result.model_dump(by_alias=True)["forceCasting"]["maxPoints"]
    23

Modules:
    core: Configuration, logging, constants and exceptions.
    models: Pydantic V2 schemas for rule data, characters and results.
    engine: Casting computations and the CastingCalculator.
"""

from __future__ import annotations

# Core
from sw5e_manager.core.config import Settings, get_settings
from sw5e_manager.core.exceptions import RuleTableError, Sw5eManagerError
from sw5e_manager.core.logging import configure_logging, get_logger

# Models
from sw5e_manager.models import (
    AbilityModifiers,
    ArchetypeRule,
    CasterType,
    CastingResult,
    CharacterArchetype,
    CharacterClassEntry,
    ClassRule,
    ForceCasting,
    Power,
    RawCharacter,
    RuleBook,
    TechCasting,
)

# Engine
from sw5e_manager.engine import (
    CastingCalculator,
    TweakHook,
    apply_tweak,
    generate_casting,
)


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "Sw5eManagerError",
    "RuleTableError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "AbilityModifiers",
    "ArchetypeRule",
    "CasterType",
    "CastingResult",
    "CharacterArchetype",
    "CharacterClassEntry",
    "ClassRule",
    "ForceCasting",
    "Power",
    "RawCharacter",
    "RuleBook",
    "TechCasting",
    # Engine
    "CastingCalculator",
    "TweakHook",
    "apply_tweak",
    "generate_casting",
]
