"""Maximum tech and force point pools.

Points are the casting ability modifier plus a per-level yield set by the
class's caster ratio. Tech casters get roughly half the force yield at the
same ratio, except for two-thirds casters, who get the same.

    ratio   tech              force
    1/3     ceil(levels / 2)  levels
    1/2     levels            levels * 2
    2/3     levels * 3        levels * 3
    1       levels * 2        levels * 4
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from fractions import Fraction

from sw5e_manager.core.constants import (
    FULL_CASTER,
    HALF_CASTER,
    THIRD_CASTER,
    TWO_THIRDS_CASTER,
)
from sw5e_manager.engine.resolver import resolve_caster_rule
from sw5e_manager.engine.tweaks import TweakHook, apply_tweak
from sw5e_manager.models.character import RawCharacter
from sw5e_manager.models.enums import CasterType
from sw5e_manager.models.rules import ArchetypeRule, ClassRule


POINTS_PER_LEVEL: dict[Fraction, dict[CasterType, Callable[[int], int]]] = {
    THIRD_CASTER: {
        CasterType.TECH: lambda levels: math.ceil(levels / 2),
        CasterType.FORCE: lambda levels: levels,
    },
    HALF_CASTER: {
        CasterType.TECH: lambda levels: levels,
        CasterType.FORCE: lambda levels: levels * 2,
    },
    TWO_THIRDS_CASTER: {
        CasterType.TECH: lambda levels: levels * 3,
        CasterType.FORCE: lambda levels: levels * 3,
    },
    FULL_CASTER: {
        CasterType.TECH: lambda levels: levels * 2,
        CasterType.FORCE: lambda levels: levels * 4,
    },
}
"""Point yield per caster ratio and caster type."""


def points_for_levels(ratio: Fraction, levels: int, caster_type: CasterType) -> int:
    """Points granted by ``levels`` levels of a class at ``ratio``.

    Ratios outside POINTS_PER_LEVEL (including 0) grant nothing.
    """
    yield_for_type = POINTS_PER_LEVEL.get(ratio, {}).get(caster_type)
    return yield_for_type(levels) if yield_for_type else 0


def get_power_points(
    character: RawCharacter,
    class_rules: Sequence[ClassRule],
    archetype_rules: Sequence[ArchetypeRule],
    ability_bonus: int,
    caster_type: CasterType,
    *,
    apply_tweak: TweakHook = apply_tweak,
) -> int:
    """Compute the maximum point pool for a caster type.

    Args:
        character: The character record (class entries and tweaks).
        class_rules: Class rule table.
        archetype_rules: Archetype rule table.
        ability_bonus: Casting ability modifier, the seed of the pool.
        caster_type: Tech or Force.
        apply_tweak: Override hook for the ``<type>Casting.maxPoints`` field.

    Returns:
        Maximum points after tweaks.
    """
    max_points = ability_bonus
    for entry in character.classes:
        resolved = resolve_caster_rule(entry, class_rules, archetype_rules, caster_type)
        max_points += points_for_levels(resolved.ratio, entry.levels, caster_type)
    return apply_tweak(character, f"{caster_type.tweak_prefix}.maxPoints", max_points)


__all__ = [
    "POINTS_PER_LEVEL",
    "points_for_levels",
    "get_power_points",
]
