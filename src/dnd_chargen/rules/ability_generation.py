"""Point-buy and standard-array checks (PHB p.13).

These check how base scores were generated, before racial bonuses. They
are separate from the ability-score step, which only checks the legal
range.
"""

from __future__ import annotations

from collections import Counter

from dnd_chargen.core.constants import (
    POINT_BUY_COSTS,
    POINT_BUY_MAX,
    POINT_BUY_MIN,
    POINT_BUY_TOTAL,
    STANDARD_ARRAY,
)
from dnd_chargen.core.exceptions import PointBuyError
from dnd_chargen.models.abilities import AbilityScores
from dnd_chargen.models.enums import CreationStep
from dnd_chargen.models.results import ValidationIssue, ValidationResult


def point_buy_cost(score: int) -> int:
    """Point cost of a single score.

    Raises:
        PointBuyError: If ``score`` is outside 8-15.
    """
    if not POINT_BUY_MIN <= score <= POINT_BUY_MAX:
        raise PointBuyError(
            f"Point buy scores must be between {POINT_BUY_MIN} and {POINT_BUY_MAX}",
            score=score,
        )
    return POINT_BUY_COSTS[score]


def total_points_spent(scores: AbilityScores) -> int:
    """Points spent across all six scores.

    Scores below the minimum count as free and scores above the maximum
    cost as much as the maximum, so partially edited scores still total.
    """
    total = 0
    for _, score in scores.items():
        if score < POINT_BUY_MIN:
            continue
        total += point_buy_cost(min(score, POINT_BUY_MAX))
    return total


def validate_point_buy(scores: AbilityScores) -> ValidationResult:
    """Every score in 8-15 and exactly 27 points spent."""
    issues: list[ValidationIssue] = []
    for ability, score in scores.items():
        if score < POINT_BUY_MIN:
            issues.append(ValidationIssue(
                code="POINT_BUY_SCORE_TOO_LOW",
                message=f"{ability.full_name} must be at least {POINT_BUY_MIN} (current: {score})",
                step=CreationStep.ABILITY_SCORES,
                field=ability.value,
            ))
        elif score > POINT_BUY_MAX:
            issues.append(ValidationIssue(
                code="POINT_BUY_SCORE_TOO_HIGH",
                message=(
                    f"{ability.full_name} cannot exceed {POINT_BUY_MAX} before racial "
                    f"bonuses (current: {score})"
                ),
                step=CreationStep.ABILITY_SCORES,
                field=ability.value,
            ))

    spent = total_points_spent(scores)
    if spent != POINT_BUY_TOTAL:
        issues.append(ValidationIssue(
            code="POINT_BUY_TOTAL_INVALID",
            message=f"Must spend exactly {POINT_BUY_TOTAL} points (current: {spent})",
            step=CreationStep.ABILITY_SCORES,
            field="point_buy",
        ))
    return ValidationResult.from_issues(issues)


def validate_standard_array(scores: AbilityScores) -> ValidationResult:
    """The six scores must be a permutation of 15, 14, 13, 12, 10, 8."""
    assigned = Counter(score for _, score in scores.items())
    if assigned == Counter(STANDARD_ARRAY):
        return ValidationResult()
    return ValidationResult.from_issues([ValidationIssue(
        code="STANDARD_ARRAY_MISMATCH",
        message=f"Scores must use each of {', '.join(map(str, STANDARD_ARRAY))} exactly once",
        step=CreationStep.ABILITY_SCORES,
        field="standard_array",
    )])


def increase_cost(current_score: int) -> int:
    """Points needed to raise a score by one, or 0 at the maximum."""
    if current_score >= POINT_BUY_MAX:
        return 0
    current = point_buy_cost(current_score) if current_score >= POINT_BUY_MIN else 0
    return point_buy_cost(max(current_score + 1, POINT_BUY_MIN)) - current


def can_increase(current_score: int, points_remaining: int) -> bool:
    if current_score >= POINT_BUY_MAX:
        return False
    return points_remaining >= increase_cost(current_score)


def can_decrease(current_score: int) -> bool:
    return current_score > POINT_BUY_MIN


__all__ = [
    "point_buy_cost",
    "total_points_spent",
    "validate_point_buy",
    "validate_standard_array",
    "increase_cost",
    "can_increase",
    "can_decrease",
]
