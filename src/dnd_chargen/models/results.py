"""Values returned by the rule engine.

Every result is a frozen model that can be serialized with ``model_dump()``.
Results are built fresh on each call and never shared with the engine.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from dnd_chargen.models.enums import (
    Ability,
    CasterType,
    CreationStep,
    ItemType,
    Skill,
    ValidationSeverity,
)


_FROZEN = ConfigDict(frozen=True, extra="forbid")


# =============================================================================
# Validation
# =============================================================================


class ValidationIssue(BaseModel):
    """A single rule violation or note.

    Attributes:
        code: Stable machine-readable code (e.g. ``RACE_REQUIRED``).
        message: Human-readable description.
        step: Creation step that produced the issue.
        field: Offending field, if one applies.
        severity: Error, warning or info.
    """

    model_config = _FROZEN

    code: str
    message: str
    step: CreationStep
    field: str | None = None
    severity: ValidationSeverity = ValidationSeverity.ERROR


class ValidationResult(BaseModel):
    """Issues collected by a validator, grouped by severity.

    Only errors affect ``is_valid``.
    """

    model_config = _FROZEN

    errors: tuple[ValidationIssue, ...] = ()
    warnings: tuple[ValidationIssue, ...] = ()
    info: tuple[ValidationIssue, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def codes(self) -> tuple[str, ...]:
        """Codes of every issue, errors first."""
        return tuple(issue.code for issue in (*self.errors, *self.warnings, *self.info))

    @classmethod
    def from_issues(cls, issues: list[ValidationIssue]) -> ValidationResult:
        """Sort issues into buckets by severity."""
        return cls(
            errors=tuple(i for i in issues if i.severity == ValidationSeverity.ERROR),
            warnings=tuple(i for i in issues if i.severity == ValidationSeverity.WARNING),
            info=tuple(i for i in issues if i.severity == ValidationSeverity.INFO),
        )

    @classmethod
    def merge(cls, *results: ValidationResult) -> ValidationResult:
        """Union several results, preserving order."""
        return cls(
            errors=tuple(i for r in results for i in r.errors),
            warnings=tuple(i for r in results for i in r.warnings),
            info=tuple(i for r in results for i in r.info),
        )


# =============================================================================
# Derived Stats
# =============================================================================


class HitDice(BaseModel):
    """Hit dice pool."""

    model_config = _FROZEN

    total: int
    size: int


class DerivedStats(BaseModel):
    """Combat and utility statistics computed from a snapshot.

    Spell save DC and spell attack bonus are None for non-casters.
    """

    model_config = _FROZEN

    armor_class: int
    initiative: int
    speed: int
    max_hit_points: int
    current_hit_points: int
    hit_dice: HitDice
    proficiency_bonus: int
    passive_perception: int
    passive_insight: int
    passive_investigation: int
    spell_save_dc: int | None = None
    spell_attack_bonus: int | None = None


# =============================================================================
# Spellcasting
# =============================================================================


class SpellSlot(BaseModel):
    """Slots available at one spell level."""

    model_config = _FROZEN

    total: int = Field(ge=0)
    used: int = Field(default=0, ge=0)


class PactSlots(BaseModel):
    """Pact-magic slots: all share one level that rises with class level."""

    model_config = _FROZEN

    slot_count: int = Field(ge=0)
    slot_level: int = Field(ge=0)


class SpellcastingInfo(BaseModel):
    """Spellcasting state of a character.

    Non-casters get ``SpellcastingInfo.empty()``. Casters carry exactly one of
    ``max_spells_known`` or ``max_prepared_spells`` and exactly one slot shape.
    """

    model_config = _FROZEN

    is_spellcaster: bool = False
    class_id: str | None = None
    caster_type: CasterType = CasterType.NONE
    spellcasting_ability: Ability | None = None
    spell_save_dc: int = 0
    spell_attack_bonus: int = 0
    cantrips_known: int = 0
    max_spells_known: int | None = None
    max_prepared_spells: int | None = None
    spell_slots: dict[int, SpellSlot] = Field(default_factory=dict)
    pact_slots: PactSlots | None = None
    spell_list_id: str | None = None
    bonus_spells: tuple[str, ...] = ()
    ritual_casting: bool = False
    known_cantrips: tuple[str, ...] = ()
    known_spells: tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> SpellcastingInfo:
        """The single value returned for characters who cannot cast."""
        return cls()


# =============================================================================
# Choice Helpers
# =============================================================================


class SkillChoice(BaseModel):
    """Skills a class lets the player pick, with the current picks."""

    model_config = _FROZEN

    count: int
    options: tuple[Skill, ...]
    selected: tuple[Skill, ...] = ()

    @property
    def remaining(self) -> int:
        return max(0, self.count - len(self.selected))


class EquipmentItem(BaseModel):
    """An item inside an equipment option."""

    model_config = _FROZEN

    id: str
    name: str
    quantity: int = 1
    type: ItemType


class EquipmentChoiceOption(BaseModel):
    """One selectable option of an equipment group."""

    model_config = _FROZEN

    id: str
    name: str
    description: str
    items: tuple[EquipmentItem, ...]


class EquipmentChoiceGroup(BaseModel):
    """A starting-equipment decision presented to the player."""

    model_config = _FROZEN

    id: str
    description: str
    options: tuple[EquipmentChoiceOption, ...]
    selected_index: int | None = None


__all__ = [
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
