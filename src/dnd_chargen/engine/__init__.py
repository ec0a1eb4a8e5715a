"""Rule-engine facade for D&D 5E character creation.

Submodules:
    interface: The ``RuleEngine`` protocol and structural conformance check
    dnd5e: The SRD implementation
    dice: Hit-die and ability-score rolls (d20 library)

Example:
    >>> from dnd_chargen.engine import create_dnd5e_engine, is_rule_engine
    >>> engine = create_dnd5e_engine()
    >>> is_rule_engine(engine)
    True
"""

from __future__ import annotations

from dnd_chargen.engine.dice import DiceResult, DiceRoller
from dnd_chargen.engine.dnd5e import DnD5eRuleEngine, create_dnd5e_engine
from dnd_chargen.engine.interface import RuleEngine, is_rule_engine, missing_members


__all__ = [
    "DiceResult",
    "DiceRoller",
    "DnD5eRuleEngine",
    "create_dnd5e_engine",
    "RuleEngine",
    "is_rule_engine",
    "missing_members",
]
