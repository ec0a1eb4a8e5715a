"""dnd_chargen - D&D 5E character-creation rule engine.

Validates wizard steps, applies racial bonuses, and computes derived
statistics and spellcasting state for characters built from SRD content.

Example:
    >>> from dnd_chargen import AbilityScores, CharacterSnapshot, ClassEntry, create_dnd5e_engine
    >>>
    >>> engine = create_dnd5e_engine()
    >>> scores = engine.apply_racial_bonuses(AbilityScores.uniform(10), "hill-dwarf")
    >>> character = CharacterSnapshot(
    ...     ability_scores=scores,
    ...     race_id="hill-dwarf",
    ...     classes=(ClassEntry(class_id="fighter"),),
    ...     background_id="soldier",
    ... )
    >>> engine.validate_character(character).is_valid
    True

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 schemas for content, snapshots and results.
    catalog: Read-only content lookup.
    rules: Formulas, progression tables, validators and calculators.
    data: Bundled SRD content.
    engine: The rule-engine facade and its protocol.
"""

from __future__ import annotations

# Core
from dnd_chargen.core.config import Settings, get_settings
from dnd_chargen.core.exceptions import DndChargenError, RuleEngineError
from dnd_chargen.core.logging import configure_logging, get_logger

# Models
from dnd_chargen.models import (
    Ability,
    AbilityBonus,
    AbilityScores,
    CharacterSnapshot,
    ClassEntry,
    CreationStep,
    DerivedStats,
    Proficiencies,
    Skill,
    SpellcastingInfo,
    ValidationResult,
)

# Engine
from dnd_chargen.engine import DnD5eRuleEngine, RuleEngine, create_dnd5e_engine, is_rule_engine


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "DndChargenError",
    "RuleEngineError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "Ability",
    "AbilityBonus",
    "AbilityScores",
    "CharacterSnapshot",
    "ClassEntry",
    "CreationStep",
    "DerivedStats",
    "Proficiencies",
    "Skill",
    "SpellcastingInfo",
    "ValidationResult",
    # Engine
    "DnD5eRuleEngine",
    "RuleEngine",
    "create_dnd5e_engine",
    "is_rule_engine",
]
