"""Pydantic V2 schemas for the character record.

The character record is owned by the surrounding application. This module
describes the parts of it the casting engine reads: class and archetype
selections, custom power lists, spent points and manual tweaks.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from sw5e_manager.core.constants import MAX_CHARACTER_LEVEL, MIN_CHARACTER_LEVEL
from sw5e_manager.models.enums import Ability, CasterType


_CHARACTER_CONFIG = ConfigDict(
    frozen=True,
    extra="ignore",
    populate_by_name=True,
    alias_generator=to_camel,
)


def calculate_modifier(score: int) -> int:
    """Calculate the ability modifier from an ability score.

    Example:
        >>> calculate_modifier(18)
        4
        >>> calculate_modifier(7)
        -2
    """
    return (score - 10) // 2


class CharacterArchetype(BaseModel):
    """The archetype chosen within a class, with the powers it grants."""

    model_config = _CHARACTER_CONFIG

    name: str = Field(min_length=1)
    tech_powers: list[str] | None = None
    force_powers: list[str] | None = None

    def powers_for(self, caster_type: CasterType) -> list[str]:
        """Get the archetype's power names for a caster type."""
        return _powers_for(self.tech_powers, self.force_powers, caster_type)


class CharacterClassEntry(BaseModel):
    """One class on the character sheet.

    Attributes:
        name: Class name (e.g., 'Guardian').
        levels: Levels taken in this class (1-20).
        archetype: Archetype chosen within the class, if any.
        tech_powers: Tech powers learned through this class.
        force_powers: Force powers learned through this class.
    """

    model_config = _CHARACTER_CONFIG

    name: str = Field(min_length=1)
    levels: Annotated[int, Field(ge=MIN_CHARACTER_LEVEL, le=MAX_CHARACTER_LEVEL)]
    archetype: CharacterArchetype | None = None
    tech_powers: list[str] | None = None
    force_powers: list[str] | None = None

    @property
    def archetype_name(self) -> str | None:
        return self.archetype.name if self.archetype else None

    def powers_for(self, caster_type: CasterType) -> list[str]:
        """Get the class's own power names for a caster type."""
        return _powers_for(self.tech_powers, self.force_powers, caster_type)


def _powers_for(
    tech_powers: list[str] | None,
    force_powers: list[str] | None,
    caster_type: CasterType,
) -> list[str]:
    if caster_type == CasterType.TECH:
        return list(tech_powers or [])
    if caster_type == CasterType.FORCE:
        return list(force_powers or [])
    return []


class HighLevelCasting(BaseModel):
    """Which 6th-9th level powers were cast since the last long rest."""

    model_config = _CHARACTER_CONFIG

    level6: bool = False
    level7: bool = False
    level8: bool = False
    level9: bool = False


class CurrentStats(BaseModel):
    """Mutable play state the casting summary echoes back."""

    model_config = _CHARACTER_CONFIG

    tech_points_used: Annotated[int, Field(ge=0)] = 0
    force_points_used: Annotated[int, Field(ge=0)] = 0
    high_level_casting: HighLevelCasting = Field(default_factory=HighLevelCasting)


class Tweak(BaseModel):
    """A manual adjustment to one computed field.

    ``override`` replaces the computed value outright; ``bonus`` is added
    to it. When both are set the override wins.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    override: int | None = None
    bonus: int | None = None


class RawCharacter(BaseModel):
    """The stored character record, as far as casting is concerned.

    Attributes:
        name: Character name.
        classes: Class entries in sheet order (multiclassing supported).
        custom_tech_powers: Tech powers granted outside class lists (feats, etc.).
        custom_force_powers: Force powers granted outside class lists.
        current_stats: Spent points and high-level casting flags.
        tweaks: Nested mapping of manual adjustments, keyed by dotted
            field paths such as ``techCasting.maxPoints``.
    """

    model_config = _CHARACTER_CONFIG

    name: str = ""
    classes: list[CharacterClassEntry] = Field(default_factory=list, max_length=20)
    custom_tech_powers: list[str] = Field(default_factory=list)
    custom_force_powers: list[str] = Field(default_factory=list)
    current_stats: CurrentStats = Field(default_factory=CurrentStats)
    tweaks: dict[str, Any] = Field(default_factory=dict)

    def custom_powers_for(self, caster_type: CasterType) -> list[str]:
        """Get the custom power names for a caster type."""
        return _powers_for(self.custom_tech_powers, self.custom_force_powers, caster_type)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_level(self) -> int:
        """Sum of all class levels."""
        return sum(entry.levels for entry in self.classes)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def proficiency_bonus(self) -> int:
        """Proficiency bonus from total level (2 at level 1, 6 at level 17+)."""
        return (max(self.total_level, 1) - 1) // 4 + 2


class AbilityModifiers(BaseModel):
    """Ability score modifiers supplied by the character sheet."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    strength: int = 0
    dexterity: int = 0
    constitution: int = 0
    intelligence: int = 0
    wisdom: int = 0
    charisma: int = 0

    def modifier(self, ability: Ability) -> int:
        """Get the modifier for an ability."""
        return getattr(self, ability.value)

    @classmethod
    def from_scores(cls, scores: dict[str, int]) -> AbilityModifiers:
        """Build modifiers from raw ability scores.

        Args:
            scores: Ability name (e.g., 'wisdom') to score.

        Example:
            >>> AbilityModifiers.from_scores({"wisdom": 16}).wisdom
            3
        """
        return cls(**{Ability(name.lower()).value: calculate_modifier(score) for name, score in scores.items()})


__all__ = [
    "calculate_modifier",
    "CharacterArchetype",
    "CharacterClassEntry",
    "HighLevelCasting",
    "CurrentStats",
    "Tweak",
    "RawCharacter",
    "AbilityModifiers",
]
