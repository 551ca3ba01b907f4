"""Casting engine for the SW5E character manager.

Submodules:
    resolver: Archetype-over-class caster rule resolution
    special_cases: Named single-class exceptions (Guardian, Sentinel)
    caster_level: Effective caster level per caster type
    power_points: Maximum tech/force point pools
    max_power_level: Highest castable power tier
    powers_known: Known power collection against the catalog
    tweaks: Manual override hook
    casting: Orchestration into a CastingResult

Example:
    >>> from sw5e_manager.engine import CastingCalculator
    >>> calculator = CastingCalculator(rules)
    >>> result = calculator.calculate(hero, modifiers)
    >>> result.has_force_casting
    True
"""

from __future__ import annotations

# =============================================================================
# Rule Resolution
# =============================================================================
from sw5e_manager.engine.resolver import (
    ResolvedCasterRule,
    RuleSource,
    find_archetype_rule,
    find_class_rule,
    resolve_caster_rule,
    to_ratio,
)
from sw5e_manager.engine.special_cases import (
    FIXED_CASTING_LEVELS,
    OWN_TABLE_MAX_POWER_CLASSES,
    FixedCastingLevel,
    fixed_casting_level,
    own_table_class,
)

# =============================================================================
# Computations
# =============================================================================
from sw5e_manager.engine.caster_level import get_casting_level
from sw5e_manager.engine.power_points import (
    POINTS_PER_LEVEL,
    get_power_points,
    points_for_levels,
)
from sw5e_manager.engine.max_power_level import (
    get_blended_level,
    get_max_power_level,
    get_power_potential,
)
from sw5e_manager.engine.powers_known import (
    KnownPowers,
    get_powers_known,
    power_names,
)

# =============================================================================
# Tweaks and Orchestration
# =============================================================================
from sw5e_manager.engine.tweaks import (
    TweakHook,
    apply_tweak,
    get_tweak,
    ignore_tweaks,
)
from sw5e_manager.engine.casting import (
    CastingCalculator,
    generate_casting,
)


__all__ = [
    # Rule resolution
    "ResolvedCasterRule",
    "RuleSource",
    "find_archetype_rule",
    "find_class_rule",
    "resolve_caster_rule",
    "to_ratio",
    "FIXED_CASTING_LEVELS",
    "OWN_TABLE_MAX_POWER_CLASSES",
    "FixedCastingLevel",
    "fixed_casting_level",
    "own_table_class",
    # Computations
    "get_casting_level",
    "POINTS_PER_LEVEL",
    "get_power_points",
    "points_for_levels",
    "get_blended_level",
    "get_max_power_level",
    "get_power_potential",
    "KnownPowers",
    "get_powers_known",
    "power_names",
    # Tweaks and orchestration
    "TweakHook",
    "apply_tweak",
    "get_tweak",
    "ignore_tweaks",
    "CastingCalculator",
    "generate_casting",
]
