"""Ability score value types.

``AbilityScores`` is deliberately permissive: any integer is accepted,
including the 0 sentinel for an unassigned score. Range checking belongs
to the ability-score step validator.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from pydantic import BaseModel, ConfigDict, Field

from dnd_chargen.core.constants import UNSET_ABILITY_SCORE
from dnd_chargen.models.enums import Ability


def calculate_modifier(score: int) -> int:
    """Calculate the ability modifier for a given score.

    Uses floor division, so odd scores below 10 round toward negative
    infinity.

    Args:
        score: The ability score value.

    Returns:
        The calculated modifier.

    Example:
        >>> calculate_modifier(8)
        -1
        >>> calculate_modifier(20)
        5
    """
    return (score - 10) // 2


class AbilityScores(BaseModel):
    """The six ability scores of a character.

    Every field defaults to the unset sentinel. Instances are frozen;
    ``with_bonus`` and ``with_bonuses`` return new instances.

    Attributes:
        strength: Physical power.
        dexterity: Agility and reflexes.
        constitution: Health and stamina.
        intelligence: Reasoning and memory.
        wisdom: Perception and insight.
        charisma: Force of personality.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    strength: int = Field(default=UNSET_ABILITY_SCORE)
    dexterity: int = Field(default=UNSET_ABILITY_SCORE)
    constitution: int = Field(default=UNSET_ABILITY_SCORE)
    intelligence: int = Field(default=UNSET_ABILITY_SCORE)
    wisdom: int = Field(default=UNSET_ABILITY_SCORE)
    charisma: int = Field(default=UNSET_ABILITY_SCORE)

    @classmethod
    def uniform(cls, score: int) -> AbilityScores:
        """Build scores with every ability set to ``score``."""
        return cls(**{ability.value: score for ability in Ability})

    def get_score(self, ability: Ability) -> int:
        """Get the score for a specific ability.

        Args:
            ability: The ability to look up.

        Returns:
            The ability score value.
        """
        return getattr(self, ability.value)

    def get_modifier(self, ability: Ability) -> int:
        """Get the modifier for a specific ability.

        Args:
            ability: The ability to look up.

        Returns:
            The ability modifier.
        """
        return calculate_modifier(self.get_score(ability))

    def items(self) -> Iterator[tuple[Ability, int]]:
        """Iterate ``(ability, score)`` pairs in canonical order."""
        for ability in Ability:
            yield ability, self.get_score(ability)

    def with_bonus(self, ability: Ability, amount: int) -> AbilityScores:
        """Return a copy with ``amount`` added to one ability."""
        return self.with_bonuses({ability: amount})

    def with_bonuses(self, bonuses: Mapping[Ability, int]) -> AbilityScores:
        """Return a copy with each bonus added to its ability.

        Args:
            bonuses: Amount to add per ability. Missing abilities are unchanged.

        Returns:
            A new AbilityScores instance.
        """
        if not bonuses:
            return self
        updated = {
            ability.value: score + bonuses.get(ability, 0)
            for ability, score in self.items()
        }
        return AbilityScores(**updated)


class AbilityBonus(BaseModel):
    """An amount added to one ability, fixed by a race or chosen by the player."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    ability: Ability
    bonus: int = 1


__all__ = [
    "calculate_modifier",
    "AbilityScores",
    "AbilityBonus",
]
