"""Tests for the character record models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sw5e_manager.models import (
    Ability,
    AbilityModifiers,
    CasterType,
    CharacterArchetype,
    CharacterClassEntry,
    RawCharacter,
    calculate_modifier,
)


class TestCalculateModifier:
    """Tests for the calculate_modifier function."""

    @pytest.mark.parametrize(
        "score,expected",
        [(1, -5), (7, -2), (8, -1), (10, 0), (11, 0), (16, 3), (18, 4), (20, 5)],
    )
    def test_modifier_table(self, score: int, expected: int) -> None:
        """Test modifier calculation against the ability score table."""
        assert calculate_modifier(score) == expected


class TestAbilityModifiers:
    """Tests for AbilityModifiers."""

    def test_defaults_to_zero(self) -> None:
        """Test unspecified modifiers are 0."""
        mods = AbilityModifiers(wisdom=3)
        assert mods.modifier(Ability.WIS) == 3
        assert mods.modifier(Ability.CHA) == 0

    def test_from_scores(self) -> None:
        """Test modifiers derived from raw scores."""
        mods = AbilityModifiers.from_scores({"Intelligence": 16, "wisdom": 8})
        assert mods.intelligence == 3
        assert mods.wisdom == -1

    def test_unknown_ability(self) -> None:
        """Test unknown ability names are rejected."""
        with pytest.raises(ValueError):
            AbilityModifiers.from_scores({"luck": 18})


class TestCharacterClassEntry:
    """Tests for CharacterClassEntry."""

    def test_level_bounds(self) -> None:
        """Test class levels must be between 1 and 20."""
        with pytest.raises(ValidationError):
            CharacterClassEntry(name="Consular", levels=0)
        with pytest.raises(ValidationError):
            CharacterClassEntry(name="Consular", levels=21)

    def test_powers_for(self) -> None:
        """Test power lists are selected by caster type."""
        entry = CharacterClassEntry(
            name="Consular",
            levels=3,
            force_powers=["Force Push"],
            archetype=CharacterArchetype(name="Way of Lightning", tech_powers=["Overload"]),
        )
        assert entry.powers_for(CasterType.FORCE) == ["Force Push"]
        assert entry.powers_for(CasterType.TECH) == []
        assert entry.archetype is not None
        assert entry.archetype.powers_for(CasterType.TECH) == ["Overload"]
        assert entry.archetype_name == "Way of Lightning"

    def test_no_archetype(self) -> None:
        """Test archetype_name is None without an archetype."""
        assert CharacterClassEntry(name="Guardian", levels=1).archetype_name is None


class TestRawCharacter:
    """Tests for RawCharacter."""

    def test_parses_camel_case_record(self) -> None:
        """Test the stored camelCase record loads."""
        character = RawCharacter.model_validate(
            {
                "name": "Kira",
                "classes": [
                    {
                        "name": "Consular",
                        "levels": 5,
                        "forcePowers": ["Force Push"],
                        "archetype": {"name": "Way of Lightning"},
                    }
                ],
                "customTechPowers": ["Overload"],
                "currentStats": {
                    "techPointsUsed": 1,
                    "forcePointsUsed": 4,
                    "highLevelCasting": {"level6": True},
                },
                "tweaks": {"techCasting": {"maxPoints": {"override": 9}}},
            }
        )
        assert character.classes[0].force_powers == ["Force Push"]
        assert character.custom_powers_for(CasterType.TECH) == ["Overload"]
        assert character.current_stats.force_points_used == 4
        assert character.current_stats.high_level_casting.level6 is True

    def test_total_level_and_proficiency(self) -> None:
        """Test derived level and proficiency bonus."""
        character = RawCharacter(
            classes=[
                CharacterClassEntry(name="Consular", levels=5),
                CharacterClassEntry(name="Guardian", levels=4),
            ]
        )
        assert character.total_level == 9
        assert character.proficiency_bonus == 4

    def test_empty_character_proficiency(self) -> None:
        """Test a character without classes gets the level 1 bonus."""
        assert RawCharacter().proficiency_bonus == 2
