"""Per-step validation of a character snapshot.

Each creation step is validated on its own; no step assumes another has
passed. ``validate_character`` unions every step result and a character
is complete exactly when that union has no errors.

Validation never raises for player mistakes. Every violation found in a
call is reported, each with a stable code.
"""

from __future__ import annotations

from collections.abc import Callable

from dnd_chargen.catalog.catalog import RulesContent
from dnd_chargen.core.constants import MAX_ABILITY_SCORE, MIN_ABILITY_SCORE, UNSET_ABILITY_SCORE
from dnd_chargen.core.logging import character_context, get_logger
from dnd_chargen.models.character import CharacterSnapshot
from dnd_chargen.models.enums import CreationStep, ValidationSeverity
from dnd_chargen.models.results import ValidationIssue, ValidationResult
from dnd_chargen.rules.racial_bonuses import RacialBonusApplier


logger = get_logger(__name__)


class StepValidator:
    """Validates creation steps against one content set.

    Args:
        content: Catalogs to resolve ids against.
        bonus_applier: Flexible-bonus rules for the race step.
    """

    def __init__(self, content: RulesContent, bonus_applier: RacialBonusApplier) -> None:
        self._content = content
        self._bonus_applier = bonus_applier
        self._handlers: dict[CreationStep, Callable[[CharacterSnapshot], ValidationResult]] = {
            CreationStep.ABILITY_SCORES: self.validate_ability_scores,
            CreationStep.RACE: self.validate_race,
            CreationStep.CLASS: self.validate_class,
            CreationStep.BACKGROUND: self.validate_background,
            CreationStep.EQUIPMENT: self.validate_equipment,
            CreationStep.REVIEW: self.validate_review,
        }

    def validate_step(self, character: CharacterSnapshot, step: CreationStep | str) -> ValidationResult:
        """Validate a single step.

        Raises:
            ValueError: If ``step`` is not a creation step name.
        """
        result = self._handlers[CreationStep(step)](character)
        if not result.is_valid:
            logger.debug("Step invalid", step=str(step), codes=[i.code for i in result.errors])
        return result

    def validate_character(self, character: CharacterSnapshot) -> ValidationResult:
        """Union of every step result, in wizard order."""
        with character_context(character.name):
            result = ValidationResult.merge(*(handler(character) for handler in self._handlers.values()))
            logger.debug("Character validated", errors=len(result.errors), warnings=len(result.warnings))
        return result

    def is_character_complete(self, character: CharacterSnapshot) -> bool:
        return self.validate_character(character).is_valid

    # =========================================================================
    # Steps
    # =========================================================================

    def validate_ability_scores(self, character: CharacterSnapshot) -> ValidationResult:
        """Each score must lie in [1, 30] and be assigned.

        A score of 0 is reported twice, once as out of range and once as
        not set.
        """
        issues: list[ValidationIssue] = []
        for ability, score in character.ability_scores.items():
            if not MIN_ABILITY_SCORE <= score <= MAX_ABILITY_SCORE:
                issues.append(_issue(
                    CreationStep.ABILITY_SCORES,
                    "ABILITY_SCORE_OUT_OF_RANGE",
                    f"{ability.full_name} must be between {MIN_ABILITY_SCORE} and "
                    f"{MAX_ABILITY_SCORE} (current: {score})",
                    field=ability.value,
                ))
            if score == UNSET_ABILITY_SCORE:
                issues.append(_issue(
                    CreationStep.ABILITY_SCORES,
                    "ABILITY_SCORE_NOT_SET",
                    f"{ability.full_name} has not been assigned",
                    field=ability.value,
                ))
        return ValidationResult.from_issues(issues)

    def validate_race(self, character: CharacterSnapshot) -> ValidationResult:
        if not character.race_id:
            return ValidationResult.from_issues([_issue(
                CreationStep.RACE, "RACE_REQUIRED", "A race must be selected", field="race_id",
            )])

        if not self._content.races.exists(character.race_id):
            return ValidationResult.from_issues([_issue(
                CreationStep.RACE,
                "RACE_INVALID",
                f"Unknown race: {character.race_id}",
                field="race_id",
            )])

        if self._bonus_applier.has_flexible_bonuses(character.race_id) or character.flexible_bonuses:
            return self._bonus_applier.validate_flexible_bonus_choices(
                character.race_id, character.flexible_bonuses
            )
        return ValidationResult()

    def validate_class(self, character: CharacterSnapshot) -> ValidationResult:
        """At least one class; level-1 subclass gating; subclass ids resolve."""
        if not character.classes:
            return ValidationResult.from_issues([_issue(
                CreationStep.CLASS, "CLASS_REQUIRED", "A class must be selected", field="classes",
            )])

        issues: list[ValidationIssue] = []
        for index, entry in enumerate(character.classes):
            field = f"classes[{index}]"
            class_def = self._content.classes.get_by_id(entry.class_id)
            if class_def is None:
                issues.append(_issue(
                    CreationStep.CLASS,
                    "CLASS_INVALID",
                    f"Unknown class: {entry.class_id}",
                    field=f"{field}.class_id",
                ))
                continue

            if entry.subclass_id is None:
                if class_def.subclass_level == 1:
                    issues.append(_issue(
                        CreationStep.CLASS,
                        "SUBCLASS_REQUIRED_L1",
                        f"{class_def.name} must choose a subclass at level 1",
                        field=f"{field}.subclass_id",
                    ))
            elif class_def.get_subclass(entry.subclass_id) is None:
                issues.append(_issue(
                    CreationStep.CLASS,
                    "SUBCLASS_INVALID",
                    f"{entry.subclass_id} is not a {class_def.name} subclass",
                    field=f"{field}.subclass_id",
                ))
        return ValidationResult.from_issues(issues)

    def validate_background(self, character: CharacterSnapshot) -> ValidationResult:
        if not character.background_id:
            return ValidationResult.from_issues([_issue(
                CreationStep.BACKGROUND,
                "BACKGROUND_REQUIRED",
                "A background must be selected",
                field="background_id",
            )])
        if not self._content.backgrounds.exists(character.background_id):
            return ValidationResult.from_issues([_issue(
                CreationStep.BACKGROUND,
                "BACKGROUND_INVALID",
                f"Unknown background: {character.background_id}",
                field="background_id",
            )])
        return ValidationResult()

    def validate_equipment(self, character: CharacterSnapshot) -> ValidationResult:
        """Equipment is optional; an empty list only yields a note."""
        if character.equipment:
            return ValidationResult()
        return ValidationResult.from_issues([_issue(
            CreationStep.EQUIPMENT,
            "EQUIPMENT_NOT_SELECTED",
            "No starting equipment selected",
            field="equipment",
            severity=ValidationSeverity.INFO,
        )])

    def validate_review(self, character: CharacterSnapshot) -> ValidationResult:
        return ValidationResult()


def _issue(
    step: CreationStep,
    code: str,
    message: str,
    *,
    field: str | None = None,
    severity: ValidationSeverity = ValidationSeverity.ERROR,
) -> ValidationIssue:
    return ValidationIssue(code=code, message=message, step=step, field=field, severity=severity)


__all__ = [
    "StepValidator",
]
