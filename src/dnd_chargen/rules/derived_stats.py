"""Derived combat and utility statistics.

The snapshot's ability scores are used as the final scores. Callers that
store base scores apply racial bonuses first and pass the result in.
"""

from __future__ import annotations

from dnd_chargen.catalog.catalog import RulesContent
from dnd_chargen.core.constants import (
    DEFAULT_HIT_DIE,
    DEFAULT_SPEED,
    PASSIVE_SCORE_BASE,
    UNARMORED_AC_BASE,
)
from dnd_chargen.core.logging import get_logger
from dnd_chargen.models.character import CharacterSnapshot
from dnd_chargen.models.enums import Ability
from dnd_chargen.models.results import DerivedStats, HitDice
from dnd_chargen.rules import formulas
from dnd_chargen.rules.spellcasting import SpellcastingCalculator


logger = get_logger(__name__)


class DerivedStatCalculator:
    """Computes AC, hit points, passives and the rest from a snapshot.

    Args:
        content: Catalogs to resolve race and class ids against.
        spellcasting: Calculator used for spell save DC and attack bonus.
        default_hit_die: Hit die when the first class does not resolve.
        default_speed: Walking speed when no race resolves.
    """

    def __init__(
        self,
        content: RulesContent,
        spellcasting: SpellcastingCalculator,
        *,
        default_hit_die: int = DEFAULT_HIT_DIE,
        default_speed: int = DEFAULT_SPEED,
    ) -> None:
        self._content = content
        self._spellcasting = spellcasting
        self._default_hit_die = default_hit_die
        self._default_speed = default_speed

    def hit_die_for(self, character: CharacterSnapshot) -> int:
        """Hit die of the first class entry."""
        entry = character.primary_class
        if entry is None:
            return self._default_hit_die
        class_def = self._content.classes.get_by_id(entry.class_id)
        if class_def is None:
            logger.debug("Unknown class, using default hit die", class_id=entry.class_id)
            return self._default_hit_die
        return class_def.hit_die

    def speed_for(self, character: CharacterSnapshot) -> int:
        race = self._content.races.get_by_id(character.race_id)
        return race.speed.walk if race is not None else self._default_speed

    def max_hit_points(self, character: CharacterSnapshot) -> int:
        """Full hit die at first level, fixed average for each level after.

        The total is never below 1.
        """
        hit_die = self.hit_die_for(character)
        con_mod = character.ability_scores.get_modifier(Ability.CON)
        first_level = hit_die + con_mod
        later_levels = (character.total_level - 1) * (formulas.average_hit_die_roll(hit_die) + con_mod)
        return max(1, first_level + later_levels)

    def level_up_hit_points(self, character: CharacterSnapshot, roll: int | None = None) -> int:
        """Hit points gained on the next level.

        Args:
            character: The snapshot before levelling.
            roll: Hit-die roll; None or non-positive uses the fixed average.

        Returns:
            ``max(1, roll_or_average + CON modifier)``.
        """
        hit_die = self.hit_die_for(character)
        gained = roll if roll is not None and roll > 0 else formulas.average_hit_die_roll(hit_die)
        return max(1, gained + character.ability_scores.get_modifier(Ability.CON))

    def calculate(self, character: CharacterSnapshot) -> DerivedStats:
        """All derived statistics for ``character``."""
        scores = character.ability_scores
        dex_mod = scores.get_modifier(Ability.DEX)
        wis_mod = scores.get_modifier(Ability.WIS)
        int_mod = scores.get_modifier(Ability.INT)
        max_hp = self.max_hit_points(character)
        spellcasting = self._spellcasting.get_spellcasting_info(character)

        return DerivedStats(
            armor_class=UNARMORED_AC_BASE + dex_mod,
            initiative=dex_mod,
            speed=self.speed_for(character),
            max_hit_points=max_hp,
            current_hit_points=max_hp,
            hit_dice=HitDice(total=character.total_level, size=self.hit_die_for(character)),
            proficiency_bonus=formulas.proficiency_bonus(character.total_level),
            passive_perception=PASSIVE_SCORE_BASE + wis_mod,
            passive_insight=PASSIVE_SCORE_BASE + wis_mod,
            passive_investigation=PASSIVE_SCORE_BASE + int_mod,
            spell_save_dc=spellcasting.spell_save_dc if spellcasting.is_spellcaster else None,
            spell_attack_bonus=spellcasting.spell_attack_bonus if spellcasting.is_spellcaster else None,
        )


__all__ = [
    "DerivedStatCalculator",
]
