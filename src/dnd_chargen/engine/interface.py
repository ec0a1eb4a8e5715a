"""Rule-engine contract.

A rule engine answers every question the character-creation wizard asks
for one game system. ``DnD5eRuleEngine`` is the D&D 5E implementation;
other systems plug in by providing the same members.

``is_rule_engine`` is a structural check for loading engines from
plugins or tests. It inspects the identity attributes and required
methods without calling them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from dnd_chargen.models.abilities import AbilityScores
from dnd_chargen.models.character import CharacterSnapshot
from dnd_chargen.models.enums import CreationStep
from dnd_chargen.models.results import (
    DerivedStats,
    EquipmentChoiceGroup,
    SkillChoice,
    ValidationResult,
)


class RuleEngine(Protocol):
    """Members every rule engine provides."""

    system_id: str
    system_name: str
    version: str

    # Validation

    def validate_character(self, character: CharacterSnapshot) -> ValidationResult: ...

    def validate_step(self, character: CharacterSnapshot, step: CreationStep | str) -> ValidationResult: ...

    def is_character_complete(self, character: CharacterSnapshot) -> bool: ...

    # Content

    def get_available_races(self) -> Sequence[Any]: ...

    def get_available_classes(self) -> Sequence[Any]: ...

    def get_available_backgrounds(self) -> Sequence[Any]: ...

    def get_subraces(self, base_race: str) -> Sequence[Any]: ...

    # Choices

    def get_valid_skill_choices(self, character: CharacterSnapshot) -> SkillChoice: ...

    def get_equipment_choices(self, class_id: str) -> list[EquipmentChoiceGroup]: ...

    def get_available_spells(self, character: CharacterSnapshot, spell_level: int) -> Sequence[Any]: ...

    # Calculations

    def calculate_derived_stats(self, character: CharacterSnapshot) -> DerivedStats: ...

    def apply_racial_bonuses(self, base_scores: AbilityScores, race_id: str | None) -> AbilityScores: ...

    def calculate_level_up_hp(self, character: CharacterSnapshot, roll: int | None = None) -> int: ...

    def get_proficiency_bonus(self, level: int) -> int: ...


IDENTITY_ATTRIBUTES: tuple[str, ...] = ("system_id", "system_name", "version")

REQUIRED_METHODS: tuple[str, ...] = (
    "validate_character",
    "validate_step",
    "is_character_complete",
    "get_available_races",
    "get_available_classes",
    "get_available_backgrounds",
    "get_subraces",
    "get_valid_skill_choices",
    "get_equipment_choices",
    "get_available_spells",
    "calculate_derived_stats",
    "apply_racial_bonuses",
    "calculate_level_up_hp",
    "get_proficiency_bonus",
)


def missing_members(obj: object) -> list[str]:
    """Names of identity attributes or methods ``obj`` lacks or mistypes."""
    missing = [name for name in IDENTITY_ATTRIBUTES if not isinstance(getattr(obj, name, None), str)]
    missing.extend(name for name in REQUIRED_METHODS if not callable(getattr(obj, name, None)))
    return missing


def is_rule_engine(obj: object) -> bool:
    """Whether ``obj`` structurally satisfies ``RuleEngine``.

    Identity attributes must be strings and every required method must be
    callable. ``None`` and plain values are never engines.
    """
    if obj is None:
        return False
    return not missing_members(obj)


__all__ = [
    "RuleEngine",
    "IDENTITY_ATTRIBUTES",
    "REQUIRED_METHODS",
    "missing_members",
    "is_rule_engine",
]
