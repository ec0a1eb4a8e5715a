"""D&D 5E rules: formulas, progression tables, validators and calculators."""

from __future__ import annotations

from dnd_chargen.rules.ability_generation import (
    can_decrease,
    can_increase,
    point_buy_cost,
    total_points_spent,
    validate_point_buy,
    validate_standard_array,
)
from dnd_chargen.rules.derived_stats import DerivedStatCalculator
from dnd_chargen.rules.formulas import (
    ability_modifier,
    parse_prepared_formula,
    prepared_spell_count,
    proficiency_bonus,
    total_level,
)
from dnd_chargen.rules.racial_bonuses import RacialBonusApplier, racial_bonus_for, racial_bonus_map
from dnd_chargen.rules.spellcasting import SpellcastingCalculator
from dnd_chargen.rules.validators import StepValidator


__all__ = [
    # Formulas
    "ability_modifier",
    "proficiency_bonus",
    "total_level",
    "parse_prepared_formula",
    "prepared_spell_count",
    # Ability generation
    "point_buy_cost",
    "total_points_spent",
    "validate_point_buy",
    "validate_standard_array",
    "can_increase",
    "can_decrease",
    # Components
    "RacialBonusApplier",
    "racial_bonus_map",
    "racial_bonus_for",
    "StepValidator",
    "DerivedStatCalculator",
    "SpellcastingCalculator",
]
