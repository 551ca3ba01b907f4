"""Collect the powers a character knows from class, archetype and custom lists."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from sw5e_manager.core.logging import get_logger
from sw5e_manager.models.character import RawCharacter
from sw5e_manager.models.enums import CasterType
from sw5e_manager.models.rules import Power, index_powers


logger = get_logger(__name__)


@dataclass(frozen=True)
class KnownPowers:
    """Resolved powers plus the names the catalog could not resolve.

    Attributes:
        powers: Resolved powers in sheet order, duplicates kept.
        unresolved: Power names missing from the catalog, in sheet order.
    """

    powers: list[Power] = field(default_factory=list)
    unresolved: list[str] = field(default_factory=list)


def power_names(character: RawCharacter, caster_type: CasterType) -> list[str]:
    """List the character's power names for a caster type.

    Order: for each class, the class list then the archetype list; custom
    powers last.
    """
    names: list[str] = []
    for entry in character.classes:
        names.extend(entry.powers_for(caster_type))
        if entry.archetype is not None:
            names.extend(entry.archetype.powers_for(caster_type))
    names.extend(character.custom_powers_for(caster_type))
    return names


def get_powers_known(
    character: RawCharacter,
    powers: Iterable[Power] | Mapping[str, Power],
    caster_type: CasterType,
) -> KnownPowers:
    """Resolve the character's power names against the power catalog.

    Names missing from the catalog are logged and left out of the
    resolved list; they never stop the calculation.

    Args:
        character: The character record.
        powers: Power catalog, as a sequence or a name index.
        caster_type: Tech or Force.

    Returns:
        KnownPowers with the resolved powers and the dropped names.
    """
    catalog = index_powers(powers)
    known = KnownPowers()
    for name in power_names(character, caster_type):
        power = catalog.get(name)
        if power is None:
            logger.warning(
                "Power not found",
                power=name,
                caster_type=caster_type.value,
                character=character.name,
            )
            known.unresolved.append(name)
            continue
        known.powers.append(power)
    return known


__all__ = [
    "KnownPowers",
    "power_names",
    "get_powers_known",
]
