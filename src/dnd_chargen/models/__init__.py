"""Domain models for D&D 5E character creation.

Exports:
    Enums: Ability, Skill, CreationStep, ValidationSeverity, CasterType,
        Size, TraitType, SpellSchool, ItemType.
    Abilities: AbilityScores, AbilityBonus, calculate_modifier.
    Content: Race, ClassDefinition, Subclass, Background, Spell and the
        spellcasting profile types.
    Character: CharacterSnapshot, ClassEntry, Proficiencies.
    Results: ValidationResult, DerivedStats, SpellcastingInfo and the
        choice-helper values.
"""

from __future__ import annotations

from dnd_chargen.models.abilities import AbilityBonus, AbilityScores, calculate_modifier
from dnd_chargen.models.character import CharacterSnapshot, ClassEntry, Proficiencies
from dnd_chargen.models.content import (
    Background,
    ClassDefinition,
    EquipmentOption,
    EquipmentOptionGroup,
    FlexibleBonusConfig,
    KnownSpellProgression,
    LeveledSlotTable,
    PactSlotTable,
    PreparedFormula,
    PreparedFormulaKind,
    PreparedSpellProgression,
    Race,
    RacialTrait,
    SkillChoiceDescriptor,
    Speed,
    Spell,
    SpellcastingProfile,
    Subclass,
)
from dnd_chargen.models.enums import (
    Ability,
    CasterType,
    CreationStep,
    ItemType,
    Size,
    Skill,
    SpellSchool,
    TraitType,
    ValidationSeverity,
)
from dnd_chargen.models.results import (
    DerivedStats,
    EquipmentChoiceGroup,
    EquipmentChoiceOption,
    EquipmentItem,
    HitDice,
    PactSlots,
    SkillChoice,
    SpellcastingInfo,
    SpellSlot,
    ValidationIssue,
    ValidationResult,
)


__all__ = [
    # Enums
    "Ability",
    "Skill",
    "CreationStep",
    "ValidationSeverity",
    "CasterType",
    "Size",
    "TraitType",
    "SpellSchool",
    "ItemType",
    # Abilities
    "AbilityScores",
    "AbilityBonus",
    "calculate_modifier",
    # Content
    "Speed",
    "RacialTrait",
    "Race",
    "FlexibleBonusConfig",
    "SkillChoiceDescriptor",
    "EquipmentOption",
    "EquipmentOptionGroup",
    "Subclass",
    "PreparedFormulaKind",
    "PreparedFormula",
    "KnownSpellProgression",
    "PreparedSpellProgression",
    "LeveledSlotTable",
    "PactSlotTable",
    "SpellcastingProfile",
    "ClassDefinition",
    "Background",
    "Spell",
    # Character
    "ClassEntry",
    "Proficiencies",
    "CharacterSnapshot",
    # Results
    "ValidationIssue",
    "ValidationResult",
    "HitDice",
    "DerivedStats",
    "SpellSlot",
    "PactSlots",
    "SpellcastingInfo",
    "SkillChoice",
    "EquipmentItem",
    "EquipmentChoiceOption",
    "EquipmentChoiceGroup",
]
