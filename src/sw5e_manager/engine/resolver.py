"""Class/archetype rule resolution shared by every casting computation.

A class entry casts according to its archetype's rule when the archetype
has one for the caster type in question; otherwise according to the
class's own rule; otherwise it does not cast that type at all.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from fractions import Fraction

from sw5e_manager.core.constants import RATIO_DENOMINATOR_LIMIT
from sw5e_manager.core.logging import get_logger
from sw5e_manager.models.character import CharacterClassEntry
from sw5e_manager.models.enums import CasterType
from sw5e_manager.models.rules import ArchetypeRule, ClassRule


logger = get_logger(__name__)


class RuleSource(StrEnum):
    """Which table supplied a resolved caster rule."""

    ARCHETYPE = "archetype"
    CLASS = "class"
    NONE = "none"


@dataclass(frozen=True)
class ResolvedCasterRule:
    """Outcome of resolving one class entry for one caster type.

    Attributes:
        source: Table the ratio came from.
        ratio: Exact caster ratio (0 when nothing matched).
        class_rule: The class's rule for the caster type, if any.
        archetype_rule: The archetype's rule for the caster type, if any.
    """

    source: RuleSource
    ratio: Fraction
    class_rule: ClassRule | None = None
    archetype_rule: ArchetypeRule | None = None


def to_ratio(value: float) -> Fraction:
    """Convert a float caster ratio from the rule data into an exact fraction.

    Example:
        >>> to_ratio(1 / 3)
        Fraction(1, 3)
    """
    return Fraction(value).limit_denominator(RATIO_DENOMINATOR_LIMIT)


def find_class_rule(
    class_rules: Sequence[ClassRule],
    class_name: str,
    caster_type: CasterType | None,
) -> ClassRule | None:
    """First class rule with the name; a None caster type matches any."""
    return next(
        (
            rule
            for rule in class_rules
            if rule.name == class_name and caster_type in (None, rule.caster_type)
        ),
        None,
    )


def find_archetype_rule(
    archetype_rules: Sequence[ArchetypeRule],
    archetype_name: str | None,
    caster_type: CasterType,
) -> ArchetypeRule | None:
    if not archetype_name:
        return None
    return next(
        (
            rule
            for rule in archetype_rules
            if rule.name == archetype_name and rule.caster_type == caster_type
        ),
        None,
    )


def resolve_caster_rule(
    entry: CharacterClassEntry,
    class_rules: Sequence[ClassRule],
    archetype_rules: Sequence[ArchetypeRule],
    caster_type: CasterType,
) -> ResolvedCasterRule:
    """Resolve the rule a class entry casts with for a caster type.

    Args:
        entry: The character's class entry.
        class_rules: Class rule table.
        archetype_rules: Archetype rule table.
        caster_type: Tech or Force.

    Returns:
        The archetype's rule if it has one for the caster type, else the
        class's rule, else a zero-ratio result.
    """
    class_rule = find_class_rule(class_rules, entry.name, caster_type)
    archetype_rule = find_archetype_rule(archetype_rules, entry.archetype_name, caster_type)

    if archetype_rule is not None:
        return ResolvedCasterRule(
            source=RuleSource.ARCHETYPE,
            ratio=to_ratio(archetype_rule.caster_ratio),
            class_rule=class_rule,
            archetype_rule=archetype_rule,
        )
    if class_rule is not None:
        return ResolvedCasterRule(
            source=RuleSource.CLASS,
            ratio=to_ratio(class_rule.caster_ratio),
            class_rule=class_rule,
        )

    logger.debug(
        "No caster rule for class entry",
        class_name=entry.name,
        archetype=entry.archetype_name,
        caster_type=caster_type.value,
    )
    return ResolvedCasterRule(source=RuleSource.NONE, ratio=Fraction(0))


__all__ = [
    "RuleSource",
    "ResolvedCasterRule",
    "to_ratio",
    "find_class_rule",
    "find_archetype_rule",
    "resolve_caster_rule",
]
