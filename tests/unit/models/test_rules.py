"""Tests for rule data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sw5e_manager.core.exceptions import RuleTableError
from sw5e_manager.models import (
    ArchetypeRule,
    CasterType,
    ClassRule,
    LeveledTableEntry,
    Power,
    RuleBook,
    index_powers,
    parse_table_int,
)


class TestParseTableInt:
    """Tests for reading integers out of level-table cells."""

    @pytest.mark.parametrize(
        "cell,expected",
        [
            ("1st", 1),
            ("2nd", 2),
            ("9th", 9),
            ("5", 5),
            (" 3rd", 3),
            ("—", 0),
            ("", 0),
            (None, 0),
            (4, 4),
        ],
    )
    def test_cells(self, cell: str | int | None, expected: int) -> None:
        """Test the leading integer is read and blanks count as 0."""
        assert parse_table_int(cell) == expected


class TestClassRule:
    """Tests for ClassRule."""

    def test_parses_camel_case_payload(self) -> None:
        """Test rule rows load from the published camelCase JSON."""
        rule = ClassRule.model_validate(
            {
                "name": "Consular",
                "casterType": "Force",
                "casterRatio": 1,
                "levelChanges": {"1": {"Max Power Level": "1st"}},
                "hitDiceDieType": 6,
            }
        )
        assert rule.caster_type == CasterType.FORCE
        assert rule.caster_ratio == 1.0
        assert rule.level_changes[1]["Max Power Level"] == "1st"

    def test_max_power_level_at(self, consular_rule: ClassRule) -> None:
        """Test reading the Max Power Level column."""
        assert consular_rule.max_power_level_at(1) == 1
        assert consular_rule.max_power_level_at(20) == 9

    def test_missing_level_row(self, consular_rule: ClassRule) -> None:
        """Test a missing level row fails loudly."""
        with pytest.raises(RuleTableError) as exc_info:
            consular_rule.max_power_level_at(21)

        assert exc_info.value.details["rule_name"] == "Consular"
        assert exc_info.value.details["level"] == 21

    def test_missing_column(self) -> None:
        """Test a row without the Max Power Level column fails loudly."""
        rule = ClassRule(name="Scholar", level_changes={20: {"Proficiency Bonus": "+6"}})

        with pytest.raises(RuleTableError) as exc_info:
            rule.max_power_level_at(20)

        assert exc_info.value.details["column"] == "Max Power Level"

    def test_frozen(self, consular_rule: ClassRule) -> None:
        """Test rule rows cannot be modified."""
        with pytest.raises(ValidationError):
            consular_rule.caster_ratio = 0.5  # type: ignore[misc]


class TestArchetypeRule:
    """Tests for ArchetypeRule."""

    def test_leveled_table_lookup(self) -> None:
        """Test reading Max Power Level from a leveled table."""
        rule = ArchetypeRule(
            name="Adept Specialist",
            caster_type=CasterType.FORCE,
            caster_ratio=1 / 3,
            leveled_table={
                20: [
                    LeveledTableEntry(key="Powers Known", value="10"),
                    LeveledTableEntry(key="Max Power Level", value="4th"),
                ]
            },
        )
        assert rule.max_power_level_at(20) == 4

    def test_row_without_entry_counts_as_zero(self) -> None:
        """Test a row without a Max Power Level entry is tier 0."""
        rule = ArchetypeRule(
            name="Adept Specialist",
            leveled_table={20: [LeveledTableEntry(key="Powers Known", value="10")]},
        )
        assert rule.max_power_level_at(20) == 0

    def test_missing_row(self) -> None:
        """Test a missing leveled-table row fails loudly."""
        rule = ArchetypeRule(name="Adept Specialist", leveled_table={1: []})

        with pytest.raises(RuleTableError):
            rule.max_power_level_at(20)

    def test_no_table(self) -> None:
        """Test asking an archetype without a table fails loudly."""
        with pytest.raises(RuleTableError):
            ArchetypeRule(name="Shien Form").max_power_level_at(20)


class TestPowerCatalog:
    """Tests for power indexing and the RuleBook."""

    def test_index_first_occurrence_wins(self) -> None:
        """Test duplicate power names keep the first entry."""
        first = Power(name="Force Push", power_type=CasterType.FORCE, level=1)
        second = Power(name="Force Push", power_type=CasterType.FORCE, level=3)

        index = index_powers([first, second])

        assert index["Force Push"] is first

    def test_index_accepts_mapping(self) -> None:
        """Test an existing name index is returned without a copy."""
        push = Power(name="Force Push", power_type=CasterType.FORCE)
        index = {"Force Push": push}
        assert index_powers(index) is index

    def test_power_level_bounds(self) -> None:
        """Test power tiers are limited to 0-9."""
        with pytest.raises(ValidationError):
            Power(name="Too Much", power_type=CasterType.TECH, level=10)

    def test_rule_book_lookups(self, rule_book: RuleBook) -> None:
        """Test RuleBook finds classes, archetypes and powers."""
        assert rule_book.find_class("Consular") is not None
        assert rule_book.find_class("Consular", CasterType.TECH) is None
        assert rule_book.find_archetype("Adept Specialist", CasterType.FORCE) is not None
        assert rule_book.find_power("Overload") is not None
        assert rule_book.find_power("Ghost Power") is None
