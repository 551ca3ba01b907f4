"""Highest power tier a character can cast.

Multiclassed characters blend their classes: each class contributes
``levels * potential / 9``, where ``potential`` is the tier that class (or
its archetype) reaches at level 20. The floored sum is then looked up in
the reference class's table (a full Force caster, the Consular). Builds
listed in ``special_cases.OWN_TABLE_MAX_POWER_CLASSES`` read their own
table instead, for Tech as well as Force.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from fractions import Fraction

from sw5e_manager.core.constants import MAX_CHARACTER_LEVEL, MAX_POWER_LEVEL_DIVISOR
from sw5e_manager.core.logging import get_logger
from sw5e_manager.engine.resolver import find_class_rule, resolve_caster_rule
from sw5e_manager.engine.special_cases import own_table_class
from sw5e_manager.engine.tweaks import TweakHook, apply_tweak
from sw5e_manager.models.character import CharacterClassEntry, RawCharacter
from sw5e_manager.models.enums import CasterType
from sw5e_manager.models.rules import ArchetypeRule, ClassRule


logger = get_logger(__name__)


def get_power_potential(
    entry: CharacterClassEntry,
    class_rules: Sequence[ClassRule],
    archetype_rules: Sequence[ArchetypeRule],
    caster_type: CasterType,
) -> int:
    """Power tier a class entry's progression reaches at level 20.

    The archetype's leveled table is used when the archetype has a rule
    for the caster type and defines one; otherwise the class table.

    Raises:
        RuleTableError: If the table lacks a level 20 row.
    """
    resolved = resolve_caster_rule(entry, class_rules, archetype_rules, caster_type)
    archetype_rule = resolved.archetype_rule
    if archetype_rule is not None and archetype_rule.leveled_table is not None:
        return archetype_rule.max_power_level_at(MAX_CHARACTER_LEVEL)
    if resolved.class_rule is not None:
        return resolved.class_rule.max_power_level_at(MAX_CHARACTER_LEVEL)
    return 0


def get_blended_level(
    classes: Sequence[CharacterClassEntry],
    class_rules: Sequence[ClassRule],
    archetype_rules: Sequence[ArchetypeRule],
    caster_type: CasterType,
) -> Fraction:
    """Sum of ``levels * potential / 9`` over all class entries."""
    blended = Fraction(0)
    for entry in classes:
        potential = get_power_potential(entry, class_rules, archetype_rules, caster_type)
        blended += max(Fraction(entry.levels * potential, MAX_POWER_LEVEL_DIVISOR), Fraction(0))
    return blended


def get_max_power_level(
    character: RawCharacter,
    class_rules: Sequence[ClassRule],
    consular: ClassRule | None,
    archetype_rules: Sequence[ArchetypeRule],
    caster_type: CasterType,
    *,
    apply_tweak: TweakHook = apply_tweak,
) -> int:
    """Compute the max power level for a caster type.

    Args:
        character: The character record (class entries and tweaks).
        class_rules: Class rule table.
        consular: Reference class rule mapping blended levels to tiers.
            Without it the blended path yields 0.
        archetype_rules: Archetype rule table.
        caster_type: Tech or Force.
        apply_tweak: Override hook for the ``<type>Casting.maxPowerLevel`` field.

    Returns:
        Max power level after tweaks.

    Raises:
        RuleTableError: If a required level table row is missing.
    """
    max_power = 0
    own_table_entry = own_table_class(character.classes)
    if own_table_entry is not None:
        # The own table applies to both caster types
        class_rule = find_class_rule(
            class_rules, own_table_entry.name, caster_type
        ) or find_class_rule(class_rules, own_table_entry.name, None)
        if class_rule is not None:
            max_power = class_rule.max_power_level_at(own_table_entry.levels)
    else:
        blended = get_blended_level(character.classes, class_rules, archetype_rules, caster_type)
        if consular is not None and blended > 0:
            effective_level = max(1, math.floor(blended))
            max_power = consular.max_power_level_at(effective_level)
        logger.debug(
            "Blended max power level",
            caster_type=caster_type.value,
            blended_level=str(blended),
            max_power_level=max_power,
        )
    return apply_tweak(character, f"{caster_type.tweak_prefix}.maxPowerLevel", max_power)


__all__ = [
    "get_power_potential",
    "get_blended_level",
    "get_max_power_level",
]
