"""Enumeration types for the D&D 5E character-creation engine.

Ability scores, skills and the creation-step vocabulary shared by the
content models, validators and calculators.
"""

from __future__ import annotations

from enum import StrEnum


class Ability(StrEnum):
    """D&D 5E ability scores.

    Values match the field names on ``AbilityScores``.
    """

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def full_name(self) -> str:
        """Get the full name of the ability.

        Returns:
            Full ability name (e.g., 'Strength' for STR).
        """
        return self.value.capitalize()

    @property
    def abbreviation(self) -> str:
        """Get the three-letter abbreviation.

        Returns:
            Three-letter abbreviation (e.g., 'STR').
        """
        return self.name

    @classmethod
    def from_abbreviation(cls, token: str) -> Ability | None:
        """Look up an ability by its abbreviation, case-insensitively."""
        return cls.__members__.get(token.upper())


class Skill(StrEnum):
    """D&D 5E skills and their associated abilities."""

    # Strength skills
    ATHLETICS = "athletics"

    # Dexterity skills
    ACROBATICS = "acrobatics"
    SLEIGHT_OF_HAND = "sleight_of_hand"
    STEALTH = "stealth"

    # Intelligence skills
    ARCANA = "arcana"
    HISTORY = "history"
    INVESTIGATION = "investigation"
    NATURE = "nature"
    RELIGION = "religion"

    # Wisdom skills
    ANIMAL_HANDLING = "animal_handling"
    INSIGHT = "insight"
    MEDICINE = "medicine"
    PERCEPTION = "perception"
    SURVIVAL = "survival"

    # Charisma skills
    DECEPTION = "deception"
    INTIMIDATION = "intimidation"
    PERFORMANCE = "performance"
    PERSUASION = "persuasion"

    @property
    def ability(self) -> Ability:
        """Get the ability score used for checks with this skill."""
        return _SKILL_ABILITIES[self]

    @property
    def display_name(self) -> str:
        """Title-cased name (e.g., 'Sleight Of Hand')."""
        return self.value.replace("_", " ").title()


_SKILL_ABILITIES: dict[Skill, Ability] = {
    Skill.ATHLETICS: Ability.STR,
    Skill.ACROBATICS: Ability.DEX,
    Skill.SLEIGHT_OF_HAND: Ability.DEX,
    Skill.STEALTH: Ability.DEX,
    Skill.ARCANA: Ability.INT,
    Skill.HISTORY: Ability.INT,
    Skill.INVESTIGATION: Ability.INT,
    Skill.NATURE: Ability.INT,
    Skill.RELIGION: Ability.INT,
    Skill.ANIMAL_HANDLING: Ability.WIS,
    Skill.INSIGHT: Ability.WIS,
    Skill.MEDICINE: Ability.WIS,
    Skill.PERCEPTION: Ability.WIS,
    Skill.SURVIVAL: Ability.WIS,
    Skill.DECEPTION: Ability.CHA,
    Skill.INTIMIDATION: Ability.CHA,
    Skill.PERFORMANCE: Ability.CHA,
    Skill.PERSUASION: Ability.CHA,
}


class CreationStep(StrEnum):
    """The six steps of the character-creation wizard."""

    ABILITY_SCORES = "ability_scores"
    RACE = "race"
    CLASS = "class"
    BACKGROUND = "background"
    EQUIPMENT = "equipment"
    REVIEW = "review"


class ValidationSeverity(StrEnum):
    """Severity of a validation issue. Only errors block completion."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class CasterType(StrEnum):
    """Spellcasting classification governing slot-table shape."""

    FULL = "full"
    HALF = "half"
    PACT = "pact"
    NONE = "none"


class Size(StrEnum):
    """Creature size categories available to player races."""

    SMALL = "small"
    MEDIUM = "medium"


class TraitType(StrEnum):
    """Whether a racial trait is always on or must be used."""

    PASSIVE = "passive"
    ACTIVE = "active"


class SpellSchool(StrEnum):
    """The eight schools of magic."""

    ABJURATION = "abjuration"
    CONJURATION = "conjuration"
    DIVINATION = "divination"
    ENCHANTMENT = "enchantment"
    EVOCATION = "evocation"
    ILLUSION = "illusion"
    NECROMANCY = "necromancy"
    TRANSMUTATION = "transmutation"


class ItemType(StrEnum):
    """Coarse item categories used by equipment choice groups."""

    WEAPON = "weapon"
    ARMOR = "armor"
    GEAR = "gear"
    TOOL = "tool"
    PACK = "pack"


__all__ = [
    "Ability",
    "Skill",
    "CreationStep",
    "ValidationSeverity",
    "CasterType",
    "Size",
    "TraitType",
    "SpellSchool",
    "ItemType",
]
