"""Static rule data: classes, archetypes and powers.

Rule tables are loaded and validated elsewhere. The models here only give
them a typed shape and offer the lookups the casting engine needs. Level
tables store the raw strings printed in the rulebook (``"3rd"``, ``"—"``),
so numeric reads go through ``parse_table_int``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from sw5e_manager.core.constants import MAX_POWER_LEVEL_COLUMN
from sw5e_manager.core.exceptions import RuleTableError
from sw5e_manager.models.enums import CasterType, ForceAlignment


_LEADING_INT = re.compile(r"^\s*(-?\d+)")


def parse_table_int(value: str | int | None) -> int:
    """Read the leading integer of a level-table cell.

    Args:
        value: Cell content such as ``"3rd"``, ``"5"`` or ``"—"``.

    Returns:
        The leading integer, or 0 when the cell has none.

    Example:
        >>> parse_table_int("3rd")
        3
        >>> parse_table_int("—")
        0
    """
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0


class _RuleModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class LeveledTableEntry(_RuleModel):
    """One ``{key, value}`` cell of an archetype's leveled table."""

    key: str
    value: str


class ClassRule(_RuleModel):
    """A class row from the rule tables.

    Attributes:
        name: Class name (e.g., 'Consular').
        caster_type: Which power system the class casts with, if any.
        caster_ratio: Casting progression relative to a full caster.
        level_changes: Level (1-20) to the class table's columns.
    """

    name: str = Field(min_length=1)
    caster_type: CasterType = CasterType.NONE
    caster_ratio: Annotated[float, Field(ge=0)] = 0.0
    level_changes: dict[int, dict[str, str]] = Field(default_factory=dict)

    def level_row(self, level: int) -> dict[str, str]:
        """Get the class table row for a level.

        Raises:
            RuleTableError: If the table has no row for the level.
        """
        try:
            return self.level_changes[level]
        except KeyError:
            raise RuleTableError(
                f"Class table for {self.name} has no row for level {level}",
                rule_name=self.name,
                level=level,
            ) from None

    def max_power_level_at(self, level: int) -> int:
        """Read the Max Power Level column at a level.

        Raises:
            RuleTableError: If the row or the column is missing.
        """
        row = self.level_row(level)
        if MAX_POWER_LEVEL_COLUMN not in row:
            raise RuleTableError(
                f"Class table for {self.name} has no {MAX_POWER_LEVEL_COLUMN} column",
                rule_name=self.name,
                level=level,
                column=MAX_POWER_LEVEL_COLUMN,
            )
        return parse_table_int(row[MAX_POWER_LEVEL_COLUMN])


class ArchetypeRule(_RuleModel):
    """An archetype row from the rule tables.

    When an archetype defines a rule for a caster type it replaces the
    class's rule for that caster type. ``leveled_table`` is only present
    for archetypes that carry their own casting progression.
    """

    name: str = Field(min_length=1)
    class_name: str = ""
    caster_type: CasterType = CasterType.NONE
    caster_ratio: Annotated[float, Field(ge=0)] = 0.0
    leveled_table: dict[int, list[LeveledTableEntry]] | None = None

    def max_power_level_at(self, level: int) -> int:
        """Read the Max Power Level entry at a level.

        A row without a Max Power Level entry counts as tier 0.

        Raises:
            RuleTableError: If there is no leveled table or no row for the level.
        """
        if self.leveled_table is None:
            raise RuleTableError(
                f"Archetype {self.name} has no leveled table",
                rule_name=self.name,
                level=level,
            )
        try:
            row = self.leveled_table[level]
        except KeyError:
            raise RuleTableError(
                f"Leveled table for {self.name} has no row for level {level}",
                rule_name=self.name,
                level=level,
            ) from None
        for entry in row:
            if entry.key == MAX_POWER_LEVEL_COLUMN:
                return parse_table_int(entry.value)
        return 0


class Power(_RuleModel):
    """A tech or force power from the power catalog."""

    name: str = Field(min_length=1)
    power_type: CasterType
    level: Annotated[int, Field(ge=0, le=9)] = 0
    force_alignment: ForceAlignment = ForceAlignment.NONE
    casting_period: str = ""
    range: str = ""
    duration: str = ""
    concentration: bool = False
    description: str = ""
    content_source: str = ""


def index_powers(powers: Iterable[Power] | Mapping[str, Power]) -> Mapping[str, Power]:
    """Index a power catalog by name.

    When a name appears more than once the first power wins. An existing
    name index is returned unchanged, without copying.
    """
    if isinstance(powers, Mapping):
        return powers
    index: dict[str, Power] = {}
    for power in powers:
        index.setdefault(power.name, power)
    return index


class RuleBook:
    """Read-only bundle of the rule tables the casting engine consults.

    Example:
        >>> rules = RuleBook(classes=[consular], archetypes=[], powers=[push])
        >>> rules.find_class("Consular", CasterType.FORCE).caster_ratio
        1.0
    """

    def __init__(
        self,
        *,
        classes: Iterable[ClassRule] = (),
        archetypes: Iterable[ArchetypeRule] = (),
        powers: Iterable[Power] = (),
    ) -> None:
        self._classes = tuple(classes)
        self._archetypes = tuple(archetypes)
        self._powers = dict(index_powers(powers))

    @property
    def classes(self) -> tuple[ClassRule, ...]:
        return self._classes

    @property
    def archetypes(self) -> tuple[ArchetypeRule, ...]:
        return self._archetypes

    @property
    def powers(self) -> Mapping[str, Power]:
        return self._powers

    def find_class(self, name: str, caster_type: CasterType | None = None) -> ClassRule | None:
        """Find a class rule by name, optionally restricted to a caster type."""
        return next(
            (
                rule
                for rule in self._classes
                if rule.name == name and (caster_type is None or rule.caster_type == caster_type)
            ),
            None,
        )

    def find_archetype(
        self, name: str, caster_type: CasterType | None = None
    ) -> ArchetypeRule | None:
        """Find an archetype rule by name, optionally restricted to a caster type."""
        return next(
            (
                rule
                for rule in self._archetypes
                if rule.name == name and (caster_type is None or rule.caster_type == caster_type)
            ),
            None,
        )

    def find_power(self, name: str) -> Power | None:
        return self._powers.get(name)


__all__ = [
    "parse_table_int",
    "LeveledTableEntry",
    "ClassRule",
    "ArchetypeRule",
    "Power",
    "index_powers",
    "RuleBook",
]
