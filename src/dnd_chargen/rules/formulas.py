"""Pure numeric formulas shared by the calculators.

Nothing here holds state. Functions that index by level raise
``LevelOutOfRangeError`` for levels below 1, since such a call is a
caller bug rather than a player mistake.
"""

from __future__ import annotations

from collections.abc import Iterable

from dnd_chargen.core.constants import SPELL_SAVE_DC_BASE
from dnd_chargen.core.exceptions import LevelOutOfRangeError
from dnd_chargen.models.abilities import calculate_modifier
from dnd_chargen.models.character import ClassEntry
from dnd_chargen.models.content import PreparedFormula, PreparedFormulaKind


def ability_modifier(score: int) -> int:
    """``floor((score - 10) / 2)``.

    Example:
        >>> [ability_modifier(s) for s in (10, 11, 12, 8, 20)]
        [0, 0, 1, -1, 5]
    """
    return calculate_modifier(score)


def proficiency_bonus(total_level: int) -> int:
    """Proficiency bonus for a total character level.

    Args:
        total_level: Sum of all class levels.

    Returns:
        ``floor((total_level - 1) / 4) + 2``.

    Raises:
        LevelOutOfRangeError: If ``total_level`` is below 1.
    """
    if total_level < 1:
        raise LevelOutOfRangeError(
            "Proficiency bonus is undefined below level 1",
            level=total_level,
        )
    return (total_level - 1) // 4 + 2


def total_level(entries: Iterable[ClassEntry]) -> int:
    """Sum of class levels; 1 when there are no entries."""
    levels = [entry.level for entry in entries]
    return sum(levels) if levels else 1


def half_level_rounded_up(level: int) -> int:
    return (level + 1) // 2


def average_hit_die_roll(hit_die: int) -> int:
    """Fixed hit-point gain per level: ``ceil(hit_die / 2) + 1``."""
    return -(-hit_die // 2) + 1


def spell_save_dc(prof_bonus: int, modifier: int) -> int:
    return SPELL_SAVE_DC_BASE + prof_bonus + modifier


def spell_attack_bonus(prof_bonus: int, modifier: int) -> int:
    return prof_bonus + modifier


def parse_prepared_formula(text: str) -> PreparedFormula:
    """Resolve formula text like ``"CHA_MOD + HALF_LEVEL"``.

    Raises:
        FormulaError: If the text is not a recognized formula.
    """
    return PreparedFormula.parse(text)


def prepared_spell_count(formula: PreparedFormula, modifier: int, class_level: int) -> int:
    """Number of spells a prepared caster may prepare.

    Args:
        formula: Resolved formula.
        modifier: Spellcasting ability modifier.
        class_level: Level in the casting class.

    Returns:
        The formula result, never less than 1.
    """
    if formula.kind == PreparedFormulaKind.MOD_PLUS_LEVEL:
        count = modifier + class_level
    elif formula.kind == PreparedFormulaKind.MOD_PLUS_HALF_LEVEL:
        count = modifier + half_level_rounded_up(class_level)
    else:
        count = modifier
    return max(1, count)


__all__ = [
    "ability_modifier",
    "proficiency_bonus",
    "total_level",
    "half_level_rounded_up",
    "average_hit_die_roll",
    "spell_save_dc",
    "spell_attack_bonus",
    "parse_prepared_formula",
    "prepared_spell_count",
]
