"""Dice rolling for hit points and ability scores.

Rolls go through the d20 library. The engine only rolls hit dice on level
up and, for callers that want them, 4d6-drop-lowest ability scores.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import d20

from dnd_chargen.core.exceptions import DiceRollError
from dnd_chargen.core.logging import get_logger


logger = get_logger(__name__)


HIT_DIE_SIZES = (6, 8, 10, 12)
ABILITY_SCORE_EXPRESSION = "4d6kh3"


@dataclass(frozen=True)
class DiceResult:
    """Outcome of a single roll.

    Attributes:
        expression: The expression that was rolled.
        total: The total result of the roll.
        dice: Kept die faces, in roll order.
    """

    expression: str
    total: int
    dice: list[int]


class DiceRoller:
    """Thin wrapper around ``d20.roll``.

    Example:
        >>> roller = DiceRoller()
        >>> roller.roll_hit_die(8).total in range(1, 9)
        True
    """

    def __init__(self, *, seed: int | None = None) -> None:
        """Initialize the dice roller.

        Args:
            seed: Optional random seed for reproducible rolls.
        """
        self._seed = seed
        if seed is not None:
            import random

            random.seed(seed)
        logger.debug("DiceRoller initialized", seed=seed)

    def roll(self, expression: str) -> DiceResult:
        """Roll a dice expression.

        Args:
            expression: Dice expression (e.g., '1d8', '4d6kh3').

        Returns:
            DiceResult with the total and the kept dice.

        Raises:
            DiceRollError: If the expression is empty or invalid.
        """
        if not expression or not expression.strip():
            raise DiceRollError("Empty dice expression", expression=expression)

        try:
            result = d20.roll(expression)
        except d20.RollError as exc:
            raise DiceRollError(
                f"Invalid dice expression: {exc}",
                expression=expression,
            ) from exc

        rolled = DiceResult(
            expression=expression,
            total=result.total,
            dice=self._extract_dice_values(result.expr),
        )
        logger.debug("Dice rolled", expression=expression, total=rolled.total)
        return rolled

    def _extract_dice_values(self, expr: Any) -> list[int]:
        values: list[int] = []

        def traverse(node: Any) -> None:
            if isinstance(node, d20.Dice):
                for die in node.values:
                    if die.kept:
                        values.append(die.number)
            elif hasattr(node, "children"):
                for child in node.children:
                    traverse(child)

        traverse(expr)
        return values

    def roll_hit_die(self, hit_die: int) -> DiceResult:
        """Roll one hit die.

        Raises:
            DiceRollError: If ``hit_die`` is not d6, d8, d10 or d12.
        """
        if hit_die not in HIT_DIE_SIZES:
            raise DiceRollError(
                f"Hit die must be one of {HIT_DIE_SIZES}, got {hit_die}",
                expression=f"1d{hit_die}",
            )
        return self.roll(f"1d{hit_die}")

    def roll_ability_score(self) -> DiceResult:
        """Roll 4d6 and keep the highest three."""
        return self.roll(ABILITY_SCORE_EXPRESSION)

    def roll_ability_scores(self) -> list[int]:
        """Six 4d6-drop-lowest totals, in roll order."""
        return [self.roll_ability_score().total for _ in range(6)]


__all__ = [
    "HIT_DIE_SIZES",
    "DiceResult",
    "DiceRoller",
]
