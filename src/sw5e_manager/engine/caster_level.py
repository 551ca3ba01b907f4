"""Effective caster level for multiclassed characters."""

from __future__ import annotations

from collections.abc import Sequence
from fractions import Fraction

from sw5e_manager.engine.resolver import resolve_caster_rule
from sw5e_manager.engine.special_cases import fixed_casting_level
from sw5e_manager.models.character import CharacterClassEntry
from sw5e_manager.models.enums import CasterType
from sw5e_manager.models.rules import ArchetypeRule, ClassRule


def get_casting_level(
    classes: Sequence[CharacterClassEntry],
    class_rules: Sequence[ClassRule],
    archetype_rules: Sequence[ArchetypeRule],
    caster_type: CasterType,
) -> Fraction:
    """Compute the effective caster level for a caster type.

    Each class entry contributes ``levels * ratio``, where the ratio comes
    from the archetype's rule if it has one, else from the class's rule.
    Builds listed in ``special_cases.FIXED_CASTING_LEVELS`` bypass the sum.

    Args:
        classes: The character's class entries.
        class_rules: Class rule table.
        archetype_rules: Archetype rule table.
        caster_type: Tech or Force.

    Returns:
        The effective caster level as an exact fraction.
    """
    fixed = fixed_casting_level(classes, caster_type)
    if fixed is not None:
        return fixed
    return sum(
        (
            entry.levels * resolve_caster_rule(entry, class_rules, archetype_rules, caster_type).ratio
            for entry in classes
        ),
        Fraction(0),
    )


__all__ = ["get_casting_level"]
