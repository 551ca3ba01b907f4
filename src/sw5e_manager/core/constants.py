"""Rulebook constants for SW5E casting.

These values are calibration constants of the published multiclassing
rules. They are not tunable game settings; see ``core.config`` for those.
"""

from __future__ import annotations

from fractions import Fraction

# =============================================================================
# Levels
# =============================================================================

MIN_CHARACTER_LEVEL = 1
"""Minimum class level."""

MAX_CHARACTER_LEVEL = 20
"""Maximum class level; also the row read for a class's power potential."""

# =============================================================================
# Casting
# =============================================================================

CASTING_LEVEL_THRESHOLD = 0.6
"""Effective caster level at which a character gains a casting type."""

SAVE_DC_BASE = 8
"""Base of every power save DC (8 + modifier + proficiency)."""

MAX_POWER_LEVEL_DIVISOR = 9
"""Divisor normalising a class's level-20 power tier against the reference table."""

MAX_POWER_LEVEL_COLUMN = "Max Power Level"
"""Column name holding the power tier in class and archetype level tables."""

DEFAULT_REFERENCE_CLASS = "Consular"
"""Full Force caster whose table maps blended levels to power tiers."""

RATIO_DENOMINATOR_LIMIT = 100
"""Largest denominator used when turning float caster ratios into fractions."""

THIRD_CASTER = Fraction(1, 3)
HALF_CASTER = Fraction(1, 2)
TWO_THIRDS_CASTER = Fraction(2, 3)
FULL_CASTER = Fraction(1)


__all__ = [
    "MIN_CHARACTER_LEVEL",
    "MAX_CHARACTER_LEVEL",
    "CASTING_LEVEL_THRESHOLD",
    "SAVE_DC_BASE",
    "MAX_POWER_LEVEL_DIVISOR",
    "MAX_POWER_LEVEL_COLUMN",
    "DEFAULT_REFERENCE_CLASS",
    "RATIO_DENOMINATOR_LIMIT",
    "THIRD_CASTER",
    "HALF_CASTER",
    "TWO_THIRDS_CASTER",
    "FULL_CASTER",
]
