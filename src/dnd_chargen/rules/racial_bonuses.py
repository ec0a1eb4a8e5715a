"""Racial ability score increases.

Fixed bonuses come from the race record. Flexible bonuses are chosen by
the player for races with a ``FlexibleBonusConfig`` (the SRD half-elf picks
two abilities other than charisma for +1 each).

``RacialBonusApplier.apply_bonuses`` is safe to call before validation:
invalid flexible choices are dropped and only fixed bonuses apply.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from dnd_chargen.catalog.catalog import RulesContent
from dnd_chargen.core.logging import get_logger
from dnd_chargen.models.abilities import AbilityBonus, AbilityScores
from dnd_chargen.models.content import FlexibleBonusConfig, Race
from dnd_chargen.models.enums import Ability, CreationStep
from dnd_chargen.models.results import ValidationIssue, ValidationResult


logger = get_logger(__name__)

FLEXIBLE_BONUS_FIELD = "flexible_bonuses"


# =============================================================================
# Race record helpers
# =============================================================================


def racial_bonus_map(race: Race) -> dict[Ability, int]:
    """Total fixed bonus per ability for a race."""
    totals: dict[Ability, int] = {}
    for entry in race.ability_bonuses:
        totals[entry.ability] = totals.get(entry.ability, 0) + entry.bonus
    return totals


def racial_bonus_for(race: Race, ability: Ability) -> int:
    return racial_bonus_map(race).get(ability, 0)


# =============================================================================
# Applier
# =============================================================================


class RacialBonusApplier:
    """Applies fixed and flexible racial bonuses against one content set.

    Args:
        content: Catalogs and flexible-bonus configs to read from.
    """

    def __init__(self, content: RulesContent) -> None:
        self._content = content

    def has_flexible_bonuses(self, race_id: str | None) -> bool:
        return self._content.get_flexible_bonus_config(race_id) is not None

    def get_flexible_bonus_config(self, race_id: str | None) -> FlexibleBonusConfig | None:
        return self._content.get_flexible_bonus_config(race_id)

    def get_valid_flexible_abilities(self, race_id: str | None) -> tuple[Ability, ...]:
        """Abilities a player may pick for the race's flexible bonuses."""
        config = self._content.get_flexible_bonus_config(race_id)
        if config is None:
            return ()
        return config.allowed_abilities

    def validate_flexible_bonus_choices(
        self,
        race_id: str | None,
        choices: Sequence[AbilityBonus],
    ) -> ValidationResult:
        """Check flexible choices against the race's config.

        Every rule is checked independently, so one call can report
        several codes.

        Args:
            race_id: Selected race.
            choices: Player-chosen bonuses.

        Returns:
            Result with any of ``FLEXIBLE_BONUS_NOT_ALLOWED``,
            ``FLEXIBLE_BONUS_COUNT_INVALID``, ``FLEXIBLE_BONUS_EXCLUDED_ABILITY``
            or ``FLEXIBLE_BONUS_NO_STACKING``. Each choice carries its own amount.
        """
        config = self._content.get_flexible_bonus_config(race_id)
        issues: list[ValidationIssue] = []

        if config is None:
            if choices:
                issues.append(_issue(
                    "FLEXIBLE_BONUS_NOT_ALLOWED",
                    "This race does not have flexible ability bonuses",
                ))
            return ValidationResult.from_issues(issues)

        if len(choices) != config.choice_count:
            issues.append(_issue(
                "FLEXIBLE_BONUS_COUNT_INVALID",
                f"Must choose exactly {config.choice_count} abilities, got {len(choices)}",
            ))

        for choice in choices:
            if choice.ability in config.excluded_abilities:
                issues.append(_issue(
                    "FLEXIBLE_BONUS_EXCLUDED_ABILITY",
                    f"Cannot choose {choice.ability.full_name}: it already has a fixed racial bonus",
                ))

        if not config.allow_stacking:
            repeated = [a for a, n in Counter(c.ability for c in choices).items() if n > 1]
            if repeated:
                issues.append(_issue(
                    "FLEXIBLE_BONUS_NO_STACKING",
                    "Cannot apply multiple bonuses to the same ability",
                ))

        return ValidationResult.from_issues(issues)

    def apply_bonuses(
        self,
        base: AbilityScores,
        race_id: str | None,
        flexible_choices: Sequence[AbilityBonus] | None = None,
    ) -> AbilityScores:
        """Add racial bonuses to ``base`` and return the new scores.

        Args:
            base: Scores before racial bonuses. Not modified.
            race_id: Race whose bonuses to apply. Unknown ids return ``base``.
            flexible_choices: Player-chosen bonuses; applied only if valid.

        Returns:
            New scores with bonuses applied.
        """
        race = self._content.races.get_by_id(race_id)
        if race is None:
            return base

        bonuses = racial_bonus_map(race)

        if flexible_choices:
            verdict = self.validate_flexible_bonus_choices(race_id, flexible_choices)
            if verdict.is_valid:
                for choice in flexible_choices:
                    bonuses[choice.ability] = bonuses.get(choice.ability, 0) + choice.bonus
            else:
                logger.debug(
                    "Dropping invalid flexible bonuses",
                    race_id=race_id,
                    codes=[issue.code for issue in verdict.errors],
                )

        return base.with_bonuses(bonuses)


def _issue(code: str, message: str) -> ValidationIssue:
    return ValidationIssue(
        code=code,
        message=message,
        step=CreationStep.RACE,
        field=FLEXIBLE_BONUS_FIELD,
    )


__all__ = [
    "racial_bonus_map",
    "racial_bonus_for",
    "RacialBonusApplier",
]
