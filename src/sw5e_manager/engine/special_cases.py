"""Named rulebook exceptions to the multiclass casting rules.

A handful of single-class builds do not follow the general formulas. They
are listed here, and consulted before the general algorithms run.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from fractions import Fraction

from sw5e_manager.models.character import CharacterClassEntry
from sw5e_manager.models.enums import CasterType


@dataclass(frozen=True)
class FixedCastingLevel:
    """A single-class build whose effective caster level is fixed.

    Attributes:
        class_name: The only class on the sheet.
        levels: Levels in that class.
        caster_type: Caster type the fixed level applies to.
        casting_level: Effective caster level to report.
    """

    class_name: str
    levels: int
    caster_type: CasterType
    casting_level: Fraction


FIXED_CASTING_LEVELS: tuple[FixedCastingLevel, ...] = (
    # Guardians cast from level 1 even though half casters normally start later
    FixedCastingLevel("Guardian", 1, CasterType.FORCE, Fraction(1)),
)
"""Single-class builds with a fixed effective caster level."""

OWN_TABLE_MAX_POWER_CLASSES: frozenset[str] = frozenset({"Sentinel"})
"""Classes that read max power level from their own table when single-classed."""


def single_class(classes: Sequence[CharacterClassEntry]) -> CharacterClassEntry | None:
    """Return the only class entry, or None for zero or several classes."""
    return classes[0] if len(classes) == 1 else None


def fixed_casting_level(
    classes: Sequence[CharacterClassEntry],
    caster_type: CasterType,
) -> Fraction | None:
    """Look up a fixed effective caster level for the character's build.

    Returns:
        The fixed level, or None when the general formula applies.
    """
    entry = single_class(classes)
    if entry is None:
        return None
    for exception in FIXED_CASTING_LEVELS:
        if (
            exception.class_name == entry.name
            and exception.levels == entry.levels
            and exception.caster_type == caster_type
        ):
            return exception.casting_level
    return None


def own_table_class(classes: Sequence[CharacterClassEntry]) -> CharacterClassEntry | None:
    """Return the class entry whose own table gives the max power level.

    Returns:
        The single class entry when it is one of OWN_TABLE_MAX_POWER_CLASSES,
        otherwise None.
    """
    entry = single_class(classes)
    if entry is not None and entry.name in OWN_TABLE_MAX_POWER_CLASSES:
        return entry
    return None


__all__ = [
    "FixedCastingLevel",
    "FIXED_CASTING_LEVELS",
    "OWN_TABLE_MAX_POWER_CLASSES",
    "single_class",
    "fixed_casting_level",
    "own_table_class",
]
