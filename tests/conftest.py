"""Pytest configuration and shared fixtures.

This module provides the rule tables, power catalog and characters shared
across the casting engine test suite. Level tables follow the published
progressions: full casters reach 9th level powers, two-thirds casters 7th,
half casters 5th and third casters 4th.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from sw5e_manager.models import (
    ArchetypeRule,
    CasterType,
    CharacterArchetype,
    CharacterClassEntry,
    ClassRule,
    ForceAlignment,
    LeveledTableEntry,
    Power,
    RawCharacter,
    RuleBook,
)


if TYPE_CHECKING:
    from collections.abc import Callable, Generator


# =============================================================================
# Level Table Helpers
# =============================================================================

FULL_CASTER_TIERS = [1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 6, 6, 7, 7, 8, 8, 9, 9, 9, 9]
TWO_THIRDS_CASTER_TIERS = [1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4, 5, 5, 5, 6, 6, 6, 7, 7]
HALF_CASTER_TIERS = [1, 1, 1, 1, 2, 2, 2, 2, 3, 3, 3, 3, 4, 4, 4, 4, 5, 5, 5, 5]
THIRD_CASTER_TIERS = [0, 0, 1, 1, 1, 1, 2, 2, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3, 4, 4]


def ordinal(tier: int) -> str:
    """Render a tier the way the rulebook tables print it ('3rd', '—')."""
    if tier <= 0:
        return "—"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(tier, "th")
    return f"{tier}{suffix}"


def class_table(tiers: list[int]) -> dict[int, dict[str, str]]:
    """Build a class ``levelChanges`` table from per-level tiers."""
    return {
        level: {"Proficiency Bonus": f"+{(level - 1) // 4 + 2}", "Max Power Level": ordinal(tier)}
        for level, tier in enumerate(tiers, start=1)
    }


def leveled_table(tiers: list[int]) -> dict[int, list[LeveledTableEntry]]:
    """Build an archetype ``leveledTable`` from per-level tiers."""
    return {
        level: [
            LeveledTableEntry(key="Powers Known", value=str(level + 2)),
            LeveledTableEntry(key="Max Power Level", value=ordinal(tier)),
        ]
        for level, tier in enumerate(tiers, start=1)
    }


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from sw5e_manager.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Rule Table Fixtures
# =============================================================================


@pytest.fixture
def consular_rule() -> ClassRule:
    """Full Force caster; also the reference table for max power level."""
    return ClassRule(
        name="Consular",
        caster_type=CasterType.FORCE,
        caster_ratio=1.0,
        level_changes=class_table(FULL_CASTER_TIERS),
    )


@pytest.fixture
def class_rules(consular_rule: ClassRule) -> list[ClassRule]:
    """Class rule table covering every caster ratio."""
    return [
        consular_rule,
        ClassRule(
            name="Sentinel",
            caster_type=CasterType.FORCE,
            caster_ratio=2 / 3,
            level_changes=class_table(TWO_THIRDS_CASTER_TIERS),
        ),
        ClassRule(
            name="Guardian",
            caster_type=CasterType.FORCE,
            caster_ratio=1 / 2,
            level_changes=class_table(HALF_CASTER_TIERS),
        ),
        ClassRule(
            name="Engineer",
            caster_type=CasterType.TECH,
            caster_ratio=1.0,
            level_changes=class_table(FULL_CASTER_TIERS),
        ),
        ClassRule(
            name="Scout",
            caster_type=CasterType.TECH,
            caster_ratio=1 / 2,
            level_changes=class_table(HALF_CASTER_TIERS),
        ),
        ClassRule(
            name="Fighter",
            caster_type=CasterType.NONE,
            caster_ratio=0.0,
            level_changes=class_table([0] * 20),
        ),
    ]


@pytest.fixture
def archetype_rules() -> list[ArchetypeRule]:
    """Archetype rule table.

    ``Adept Specialist`` turns a Fighter into a third Force caster with its
    own leveled table. ``Shien Form`` slows a Guardian's Force progression
    but has no table, so its potential comes from the Guardian table.
    """
    return [
        ArchetypeRule(
            name="Adept Specialist",
            class_name="Fighter",
            caster_type=CasterType.FORCE,
            caster_ratio=1 / 3,
            leveled_table=leveled_table(THIRD_CASTER_TIERS),
        ),
        ArchetypeRule(
            name="Shien Form",
            class_name="Guardian",
            caster_type=CasterType.FORCE,
            caster_ratio=1 / 3,
        ),
        ArchetypeRule(
            name="Way of Lightning",
            class_name="Consular",
            caster_type=CasterType.NONE,
        ),
    ]


@pytest.fixture
def power_catalog() -> list[Power]:
    """A small power catalog."""
    return [
        Power(name="Saber Throw", power_type=CasterType.FORCE, level=0, force_alignment=ForceAlignment.UNIVERSAL),
        Power(name="Force Push", power_type=CasterType.FORCE, level=1, force_alignment=ForceAlignment.UNIVERSAL),
        Power(name="Force Lightning", power_type=CasterType.FORCE, level=1, force_alignment=ForceAlignment.DARK),
        Power(name="Battle Meditation", power_type=CasterType.FORCE, level=1, force_alignment=ForceAlignment.LIGHT),
        Power(name="Force Jump", power_type=CasterType.FORCE, level=1, force_alignment=ForceAlignment.UNIVERSAL),
        Power(name="Electroshock", power_type=CasterType.TECH, level=0),
        Power(name="Overload", power_type=CasterType.TECH, level=1),
        Power(name="Tracker Droid Interface", power_type=CasterType.TECH, level=1),
    ]


@pytest.fixture
def rule_book(
    class_rules: list[ClassRule],
    archetype_rules: list[ArchetypeRule],
    power_catalog: list[Power],
) -> RuleBook:
    """All rule tables bundled together."""
    return RuleBook(classes=class_rules, archetypes=archetype_rules, powers=power_catalog)


# =============================================================================
# Character Fixtures
# =============================================================================


def make_character(*entries: tuple[str, int], **kwargs: Any) -> RawCharacter:
    """Build a character from ``(class name, levels)`` pairs."""
    return RawCharacter(
        name=kwargs.pop("name", "Test Character"),
        classes=[CharacterClassEntry(name=name, levels=levels) for name, levels in entries],
        **kwargs,
    )


@pytest.fixture
def character_factory() -> Callable[..., RawCharacter]:
    """Provide ``make_character`` to tests."""
    return make_character


@pytest.fixture
def multiclass_character() -> RawCharacter:
    """Consular/Guardian with class, archetype and custom powers."""
    return RawCharacter(
        name="Kira",
        classes=[
            CharacterClassEntry(
                name="Consular",
                levels=5,
                archetype=CharacterArchetype(
                    name="Way of Lightning",
                    force_powers=["Force Lightning"],
                ),
                force_powers=["Saber Throw", "Ghost Power"],
            ),
            CharacterClassEntry(
                name="Guardian",
                levels=4,
                archetype=CharacterArchetype(
                    name="Shien Form",
                    force_powers=["Battle Meditation"],
                ),
                force_powers=["Force Push"],
            ),
        ],
        custom_force_powers=["Force Jump"],
    )
