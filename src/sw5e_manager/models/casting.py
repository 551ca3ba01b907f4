"""Casting summary models produced by the casting engine.

These are transient result structures. ``model_dump(by_alias=True)``
yields the camelCase shape consumed by character-rendering code.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from sw5e_manager.models.character import HighLevelCasting
from sw5e_manager.models.rules import Power


_RESULT_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
    alias_generator=to_camel,
)


class TechCasting(BaseModel):
    """Tech casting stat block (Intelligence based)."""

    model_config = _RESULT_CONFIG

    points_used: int
    max_points: int
    attack_modifier: int
    save_dc: int = Field(alias="saveDC")
    max_power_level: int
    powers_known: list[Power] = Field(default_factory=list)


class ForceCasting(BaseModel):
    """Force casting stat block.

    Light side powers use Wisdom, dark side powers use Charisma and
    universal powers use whichever of the two is higher.
    """

    model_config = _RESULT_CONFIG

    points_used: int
    max_points: int
    light_attack_modifier: int
    light_save_dc: int = Field(alias="lightSaveDC")
    dark_attack_modifier: int
    dark_save_dc: int = Field(alias="darkSaveDC")
    universal_attack_modifier: int
    universal_save_dc: int = Field(alias="universalSaveDC")
    max_power_level: int
    powers_known: list[Power] = Field(default_factory=list)


class CastingResult(BaseModel):
    """Combined Tech and Force casting summary for one character.

    Attributes:
        tech_casting: Tech stat block, or None if the character cannot cast tech powers.
        force_casting: Force stat block, or None if the character cannot cast force powers.
        high_level_casting: Passed through from the character's current stats.
        all_force_powers: Every Force power name on the sheet, custom first,
            regardless of whether the character has Force casting.
        unresolved_powers: Power names missing from the catalog, Tech then Force.
    """

    model_config = _RESULT_CONFIG

    tech_casting: TechCasting | None = None
    force_casting: ForceCasting | None = None
    high_level_casting: HighLevelCasting = Field(default_factory=HighLevelCasting)
    all_force_powers: list[str] = Field(default_factory=list)
    unresolved_powers: list[str] = Field(default_factory=list)

    @property
    def has_tech_casting(self) -> bool:
        return self.tech_casting is not None

    @property
    def has_force_casting(self) -> bool:
        return self.force_casting is not None


__all__ = [
    "TechCasting",
    "ForceCasting",
    "CastingResult",
]
