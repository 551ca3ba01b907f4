"""Tech and Force casting summary for a character.

The calculator runs four computations per caster type (effective caster
level, point pool, max power level, known powers), attaches attack and
save DC values, and runs every number through the tweak hook. A caster
type appears in the result only if the character reaches the casting
threshold or knows at least one power of that type.

Example:
    >>> calculator = CastingCalculator(rules)
    >>> result = calculator.calculate(hero, AbilityModifiers(wisdom=3))
    >>> result.force_casting.max_points
    23
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from fractions import Fraction

from sw5e_manager.core.config import Settings, get_settings
from sw5e_manager.core.constants import CASTING_LEVEL_THRESHOLD, SAVE_DC_BASE
from sw5e_manager.core.logging import get_logger
from sw5e_manager.engine.caster_level import get_casting_level
from sw5e_manager.engine.max_power_level import get_max_power_level
from sw5e_manager.engine.power_points import get_power_points
from sw5e_manager.engine.powers_known import KnownPowers, get_powers_known
from sw5e_manager.engine.tweaks import TweakHook, apply_tweak
from sw5e_manager.models.casting import CastingResult, ForceCasting, TechCasting
from sw5e_manager.models.character import AbilityModifiers, RawCharacter
from sw5e_manager.models.enums import Ability, CasterType
from sw5e_manager.models.rules import ArchetypeRule, ClassRule, Power, RuleBook, index_powers


logger = get_logger(__name__)


def _report_missing_rules(
    character: RawCharacter,
    classes: Sequence[ClassRule],
    archetypes: Sequence[ArchetypeRule],
) -> None:
    class_names = {rule.name for rule in classes}
    archetype_names = {rule.name for rule in archetypes}
    for entry in character.classes:
        if entry.name not in class_names:
            logger.warning("Class not found", class_name=entry.name, character=character.name)
        if entry.archetype_name and entry.archetype_name not in archetype_names:
            logger.warning(
                "Archetype not found",
                archetype=entry.archetype_name,
                class_name=entry.name,
                character=character.name,
            )


def _has_casting(casting_level: Fraction, known: KnownPowers, threshold: float) -> bool:
    return casting_level >= threshold or len(known.powers) > 0


def generate_casting(
    character: RawCharacter,
    ability_modifiers: AbilityModifiers,
    powers: Iterable[Power] | Mapping[str, Power],
    proficiency_bonus: int,
    classes: Sequence[ClassRule],
    consular: ClassRule | None,
    archetypes: Sequence[ArchetypeRule],
    *,
    apply_tweak: TweakHook = apply_tweak,
    casting_level_threshold: float = CASTING_LEVEL_THRESHOLD,
) -> CastingResult:
    """Compute the character's Tech and Force casting summary.

    Args:
        character: The character record.
        ability_modifiers: Ability score modifiers.
        powers: Power catalog.
        proficiency_bonus: Proficiency bonus.
        classes: Class rule table.
        consular: Reference class rule for max power level lookups.
        archetypes: Archetype rule table.
        apply_tweak: Override hook applied to every numeric field.
        casting_level_threshold: Effective caster level that grants a
            casting type on its own.

    Returns:
        The casting summary. ``tech_casting`` / ``force_casting`` are None
        when the character does not have that casting type.

    Raises:
        RuleTableError: If a rule table lacks a required level row.
    """
    catalog = index_powers(powers)
    _report_missing_rules(character, classes, archetypes)

    # Tech
    tech_bonus = ability_modifiers.modifier(Ability.INT)
    tech_level = get_casting_level(character.classes, classes, archetypes, CasterType.TECH)
    tech_known = get_powers_known(character, catalog, CasterType.TECH)
    tech_casting = TechCasting(
        points_used=character.current_stats.tech_points_used,
        max_points=get_power_points(
            character, classes, archetypes, tech_bonus, CasterType.TECH, apply_tweak=apply_tweak
        ),
        attack_modifier=apply_tweak(
            character, "techCasting.attackModifier", tech_bonus + proficiency_bonus
        ),
        save_dc=apply_tweak(
            character, "techCasting.saveDC", SAVE_DC_BASE + tech_bonus + proficiency_bonus
        ),
        max_power_level=get_max_power_level(
            character, classes, consular, archetypes, CasterType.TECH, apply_tweak=apply_tweak
        ),
        powers_known=tech_known.powers,
    )
    has_tech_casting = _has_casting(tech_level, tech_known, casting_level_threshold)

    # Force
    light_bonus = ability_modifiers.modifier(Ability.WIS)
    dark_bonus = ability_modifiers.modifier(Ability.CHA)
    universal_bonus = max(light_bonus, dark_bonus)
    force_level = get_casting_level(character.classes, classes, archetypes, CasterType.FORCE)
    force_known = get_powers_known(character, catalog, CasterType.FORCE)
    force_casting = ForceCasting(
        points_used=character.current_stats.force_points_used,
        max_points=get_power_points(
            character, classes, archetypes, universal_bonus, CasterType.FORCE, apply_tweak=apply_tweak
        ),
        light_attack_modifier=apply_tweak(
            character, "forceCasting.lightAttackModifier", light_bonus + proficiency_bonus
        ),
        light_save_dc=apply_tweak(
            character, "forceCasting.lightSaveDC", SAVE_DC_BASE + light_bonus + proficiency_bonus
        ),
        dark_attack_modifier=apply_tweak(
            character, "forceCasting.darkAttackModifier", dark_bonus + proficiency_bonus
        ),
        dark_save_dc=apply_tweak(
            character, "forceCasting.darkSaveDC", SAVE_DC_BASE + dark_bonus + proficiency_bonus
        ),
        universal_attack_modifier=apply_tweak(
            character, "forceCasting.universalAttackModifier", universal_bonus + proficiency_bonus
        ),
        universal_save_dc=apply_tweak(
            character,
            "forceCasting.universalSaveDC",
            SAVE_DC_BASE + universal_bonus + proficiency_bonus,
        ),
        max_power_level=get_max_power_level(
            character, classes, consular, archetypes, CasterType.FORCE, apply_tweak=apply_tweak
        ),
        powers_known=force_known.powers,
    )
    has_force_casting = _has_casting(force_level, force_known, casting_level_threshold)

    all_force_powers = [
        *character.custom_force_powers,
        *(name for entry in character.classes for name in entry.force_powers or []),
    ]

    logger.debug(
        "Casting computed",
        character=character.name,
        tech_level=str(tech_level),
        force_level=str(force_level),
        has_tech_casting=has_tech_casting,
        has_force_casting=has_force_casting,
    )

    return CastingResult(
        tech_casting=tech_casting if has_tech_casting else None,
        force_casting=force_casting if has_force_casting else None,
        high_level_casting=character.current_stats.high_level_casting,
        all_force_powers=all_force_powers,
        unresolved_powers=[*tech_known.unresolved, *force_known.unresolved],
    )


class CastingCalculator:
    """Casting summaries against a fixed rule book.

    The calculator holds only read-only rule data and the tweak hook, so
    one instance can serve any number of characters.

    Example:
        >>> calculator = CastingCalculator(rules, apply_tweak=ignore_tweaks)
        >>> calculator.calculate(hero, modifiers, proficiency_bonus=3)
    """

    def __init__(
        self,
        rules: RuleBook,
        *,
        settings: Settings | None = None,
        apply_tweak: TweakHook = apply_tweak,
    ) -> None:
        """Initialize the calculator.

        Args:
            rules: Class, archetype and power tables.
            settings: Application settings; defaults to ``get_settings()``.
            apply_tweak: Override hook applied to every numeric field.
        """
        self._rules = rules
        self._settings = settings or get_settings()
        self._apply_tweak = apply_tweak
        reference_name = self._settings.casting.reference_class_name
        self._consular = rules.find_class(reference_name)
        if self._consular is None:
            logger.warning("Reference class not found", class_name=reference_name)

    @property
    def rules(self) -> RuleBook:
        return self._rules

    @property
    def reference_class(self) -> ClassRule | None:
        return self._consular

    def calculate(
        self,
        character: RawCharacter,
        ability_modifiers: AbilityModifiers,
        *,
        proficiency_bonus: int | None = None,
    ) -> CastingResult:
        """Compute the casting summary for a character.

        Args:
            character: The character record.
            ability_modifiers: Ability score modifiers.
            proficiency_bonus: Proficiency bonus; defaults to the one
                derived from the character's total level.

        Returns:
            The casting summary.
        """
        if proficiency_bonus is None:
            proficiency_bonus = character.proficiency_bonus
        return generate_casting(
            character,
            ability_modifiers,
            self._rules.powers,
            proficiency_bonus,
            self._rules.classes,
            self._consular,
            self._rules.archetypes,
            apply_tweak=self._apply_tweak,
            casting_level_threshold=self._settings.casting.casting_level_threshold,
        )


__all__ = [
    "generate_casting",
    "CastingCalculator",
]
