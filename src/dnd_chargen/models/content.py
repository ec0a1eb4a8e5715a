"""Reference content models: races, classes, backgrounds and spells.

These records describe the game system and are loaded once per engine.
They are frozen Pydantic models; the engine reads them and never copies
player selections into them.

Spellcasting profiles use two tagged unions:

- ``progression`` is either a known-spells table or a prepared-spells
  formula, never both.
- ``slots`` is either a leveled slot table (full and half casters) or a
  pact-magic table where every slot shares one upgrading level.

Prepared-spell formulas may be written as text in source data
(``"INT_MOD + LEVEL"``). The text is resolved into a ``PreparedFormula``
when the model is built, so malformed data fails at load time.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Annotated, Any, Literal, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    WrapSerializer,
    field_validator,
    model_validator,
)

from dnd_chargen.core.constants import DEFAULT_SPEED, MAX_SPELL_LEVEL
from dnd_chargen.core.exceptions import FormulaError
from dnd_chargen.models.abilities import AbilityBonus
from dnd_chargen.models.enums import Ability, Size, Skill, SpellSchool, TraitType


_FROZEN = ConfigDict(frozen=True, extra="forbid")

_K = TypeVar("_K")
_V = TypeVar("_V")


def _read_only(value: Mapping[Any, Any]) -> Mapping[Any, Any]:
    return MappingProxyType(dict(value))


# Read-only view over a validated dict; dumps back to a plain dict.
ReadOnlyMapping = Annotated[
    Mapping[_K, _V],
    AfterValidator(_read_only),
    WrapSerializer(lambda value, handler: handler(dict(value))),
]


# =============================================================================
# Races
# =============================================================================


class Speed(BaseModel):
    """Movement speeds in feet."""

    model_config = _FROZEN

    walk: int = Field(default=DEFAULT_SPEED, ge=0)


class RacialTrait(BaseModel):
    """A named racial feature."""

    model_config = _FROZEN

    id: str
    name: str
    description: str = ""
    type: TraitType = TraitType.PASSIVE


class Race(BaseModel):
    """A playable race or subrace.

    A race without ``base_race`` is a root race. Subraces name their root
    through ``base_race`` (e.g. 'hill-dwarf' -> 'dwarf').

    Attributes:
        id: Stable identifier.
        name: Display name.
        base_race: Root race name for subraces.
        size: Creature size.
        speed: Movement speeds.
        ability_bonuses: Fixed ability increases.
        traits: Racial traits.
        languages: Languages granted.
        language_choices: Number of extra languages the player picks.
        description: Flavor text.
    """

    model_config = _FROZEN

    id: str
    name: str
    base_race: str | None = None
    size: Size = Size.MEDIUM
    speed: Speed = Field(default_factory=Speed)
    ability_bonuses: tuple[AbilityBonus, ...] = ()
    traits: tuple[RacialTrait, ...] = ()
    languages: tuple[str, ...] = ()
    language_choices: int = Field(default=0, ge=0)
    description: str = ""

    @property
    def is_subrace(self) -> bool:
        return self.base_race is not None


class FlexibleBonusConfig(BaseModel):
    """Player-chosen ability increases for one race.

    Attributes:
        race_id: Race the config applies to.
        choice_count: Exact number of choices the player must make.
        bonus_per_choice: Amount each choice normally grants, offered to pickers.
        excluded_abilities: Abilities that may not be chosen.
        allow_stacking: Whether one ability may be chosen more than once.
    """

    model_config = _FROZEN

    race_id: str
    choice_count: int = Field(ge=1)
    bonus_per_choice: int = Field(default=1, ge=1)
    excluded_abilities: frozenset[Ability] = frozenset()
    allow_stacking: bool = False

    @property
    def allowed_abilities(self) -> tuple[Ability, ...]:
        """Abilities the player may pick, in canonical order."""
        return tuple(a for a in Ability if a not in self.excluded_abilities)


# =============================================================================
# Classes
# =============================================================================


class SkillChoiceDescriptor(BaseModel):
    """How many skills a class picks and from which list."""

    model_config = _FROZEN

    choose: int = Field(ge=0)
    options: tuple[Skill, ...]


class EquipmentOption(BaseModel):
    """One alternative inside a starting-equipment group."""

    model_config = _FROZEN

    id: str
    description: str
    items: tuple[str, ...]


class EquipmentOptionGroup(BaseModel):
    """A starting-equipment decision, e.g. '(a) a greataxe or (b) a martial weapon'."""

    model_config = _FROZEN

    id: str
    choose: int = Field(default=1, ge=1)
    options: tuple[EquipmentOption, ...]


class Subclass(BaseModel):
    """A subclass and the spells it always grants.

    ``bonus_spells`` maps the class level at which spells are gained to
    their spell ids.
    """

    model_config = _FROZEN

    id: str
    name: str
    class_id: str
    description: str = ""
    bonus_spells: ReadOnlyMapping[int, tuple[str, ...]] = Field(default_factory=dict, validate_default=True)

    def bonus_spells_through(self, class_level: int) -> tuple[str, ...]:
        """All bonus spells granted at or below ``class_level``, in level order."""
        granted: list[str] = []
        for level in sorted(self.bonus_spells):
            if level <= class_level:
                granted.extend(self.bonus_spells[level])
        return tuple(granted)


class PreparedFormulaKind(StrEnum):
    """Closed set of prepared-spell count formulas."""

    MOD = "mod"
    MOD_PLUS_LEVEL = "mod_plus_level"
    MOD_PLUS_HALF_LEVEL = "mod_plus_half_level"


_MOD_TOKEN = re.compile(r"^([A-Z]{3})_MOD$")

_LEVEL_TOKENS: dict[tuple[str, ...], PreparedFormulaKind] = {
    (): PreparedFormulaKind.MOD,
    ("LEVEL",): PreparedFormulaKind.MOD_PLUS_LEVEL,
    ("HALF_LEVEL",): PreparedFormulaKind.MOD_PLUS_HALF_LEVEL,
}


class PreparedFormula(BaseModel):
    """Resolved prepared-spell formula.

    Attributes:
        kind: Which formula applies.
        ability: Ability named in the source text, if it was parsed from text.
    """

    model_config = _FROZEN

    kind: PreparedFormulaKind
    ability: Ability | None = None

    @classmethod
    def parse(cls, text: str) -> PreparedFormula:
        """Resolve formula text such as ``"WIS_MOD + LEVEL"``.

        The text must contain exactly one ``<ABBR>_MOD`` term and at most one
        of ``LEVEL`` or ``HALF_LEVEL``, joined by ``+``.

        Args:
            text: Formula source text.

        Returns:
            The resolved formula.

        Raises:
            FormulaError: If the text does not match a known formula.
        """
        tokens = [t.strip().upper() for t in text.split("+")]
        if not tokens or any(not t for t in tokens):
            raise FormulaError("Empty term in prepared-spell formula", formula=text)

        mod_terms = [t for t in tokens if _MOD_TOKEN.match(t)]
        if len(mod_terms) != 1:
            raise FormulaError(
                "Prepared-spell formula needs exactly one ability modifier term",
                formula=text,
            )
        match = _MOD_TOKEN.match(mod_terms[0])
        ability = Ability.from_abbreviation(match.group(1)) if match else None
        if ability is None:
            raise FormulaError("Unknown ability in prepared-spell formula", formula=text)

        rest = tuple(t for t in tokens if t != mod_terms[0])
        kind = _LEVEL_TOKENS.get(rest)
        if kind is None:
            raise FormulaError("Unrecognized prepared-spell formula terms", formula=text)
        return cls(kind=kind, ability=ability)


class KnownSpellProgression(BaseModel):
    """Known-spell caster: a fixed number of spells known per class level."""

    model_config = _FROZEN

    kind: Literal["known"] = "known"
    spells_known: ReadOnlyMapping[int, int]


class PreparedSpellProgression(BaseModel):
    """Prepared caster: the count comes from a formula."""

    model_config = _FROZEN

    kind: Literal["prepared"] = "prepared"
    formula: PreparedFormula

    @field_validator("formula", mode="before")
    @classmethod
    def resolve_formula_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            return PreparedFormula.parse(value)
        return value


SpellProgression = Annotated[
    KnownSpellProgression | PreparedSpellProgression,
    Field(discriminator="kind"),
]


class LeveledSlotTable(BaseModel):
    """Standard slot progression.

    ``rows`` maps class level to slot counts by spell level; index 0 holds
    1st-level slots.
    """

    model_config = _FROZEN

    kind: Literal["leveled"] = "leveled"
    rows: ReadOnlyMapping[int, tuple[int, ...]]

    @field_validator("rows", mode="after")
    @classmethod
    def check_row_width(cls, rows: Mapping[int, tuple[int, ...]]) -> Mapping[int, tuple[int, ...]]:
        for level, row in rows.items():
            if len(row) > MAX_SPELL_LEVEL:
                raise ValueError(f"slot row for level {level} has more than {MAX_SPELL_LEVEL} entries")
        return rows


class PactSlotTable(BaseModel):
    """Pact magic: class level -> (slot count, shared slot level)."""

    model_config = _FROZEN

    kind: Literal["pact"] = "pact"
    rows: ReadOnlyMapping[int, tuple[int, int]]


SlotTable = Annotated[
    LeveledSlotTable | PactSlotTable,
    Field(discriminator="kind"),
]


class SpellcastingProfile(BaseModel):
    """How a class casts spells.

    Attributes:
        ability: Spellcasting ability.
        cantrips_known: Class level breakpoints -> cantrips known.
        progression: Known-spells table or prepared-spells formula.
        slots: Leveled or pact slot table.
        spell_list_id: Spell list the class draws from.
        ritual_casting: Whether rituals can be cast.
        first_level: Class level at which the feature is gained.
    """

    model_config = _FROZEN

    ability: Ability
    cantrips_known: ReadOnlyMapping[int, int] = Field(default_factory=dict, validate_default=True)
    progression: SpellProgression
    slots: SlotTable
    spell_list_id: str
    ritual_casting: bool = False
    first_level: int = Field(default=1, ge=1, le=20)

    @property
    def uses_pact_magic(self) -> bool:
        return isinstance(self.slots, PactSlotTable)

    def is_active_at(self, class_level: int) -> bool:
        return class_level >= self.first_level

    @model_validator(mode="after")
    def check_formula_ability(self) -> SpellcastingProfile:
        """Reject a formula that names a different ability than the profile.

        Raises:
            FormulaError: If the formula's ability disagrees with ``ability``.
        """
        progression = self.progression
        if isinstance(progression, PreparedSpellProgression):
            named = progression.formula.ability
            if named is not None and named != self.ability:
                raise FormulaError(
                    f"Formula uses {named.abbreviation} but the class casts with "
                    f"{self.ability.abbreviation}",
                    details={"ability": self.ability.value, "formula_ability": named.value},
                )
        return self


class ClassDefinition(BaseModel):
    """A character class.

    Attributes:
        id: Stable identifier.
        name: Display name.
        hit_die: Hit die size.
        saving_throws: Exactly two saving-throw proficiencies.
        armor_proficiencies: Armor categories.
        weapon_proficiencies: Weapon categories.
        tool_proficiencies: Tools.
        skill_choices: Skill selection descriptor.
        equipment_options: Starting-equipment decisions.
        features: Class level -> feature names.
        subclasses: Available subclasses.
        subclass_level: Level at which a subclass becomes mandatory.
        spellcasting: Spellcasting profile, if the class casts.
    """

    model_config = _FROZEN

    id: str
    name: str
    hit_die: Literal[6, 8, 10, 12]
    saving_throws: tuple[Ability, Ability]
    armor_proficiencies: tuple[str, ...] = ()
    weapon_proficiencies: tuple[str, ...] = ()
    tool_proficiencies: tuple[str, ...] = ()
    skill_choices: SkillChoiceDescriptor
    equipment_options: tuple[EquipmentOptionGroup, ...] = ()
    features: ReadOnlyMapping[int, tuple[str, ...]] = Field(default_factory=dict, validate_default=True)
    subclasses: tuple[Subclass, ...] = ()
    subclass_level: Literal[1, 2, 3] = 3
    spellcasting: SpellcastingProfile | None = None
    description: str = ""

    @property
    def is_spellcaster(self) -> bool:
        return self.spellcasting is not None

    def get_subclass(self, subclass_id: str) -> Subclass | None:
        """Find a subclass of this class by id."""
        for subclass in self.subclasses:
            if subclass.id == subclass_id:
                return subclass
        return None


# =============================================================================
# Backgrounds and Spells
# =============================================================================


class Background(BaseModel):
    """A character background."""

    model_config = _FROZEN

    id: str
    name: str
    skill_proficiencies: tuple[Skill, ...] = ()
    tool_proficiencies: tuple[str, ...] = ()
    language_choices: int = Field(default=0, ge=0)
    equipment: tuple[str, ...] = ()
    feature_name: str = ""
    feature_description: str = ""
    description: str = ""


class Spell(BaseModel):
    """A spell and the class spell lists that include it."""

    model_config = _FROZEN

    id: str
    name: str
    level: int = Field(ge=0, le=MAX_SPELL_LEVEL)
    school: SpellSchool
    casting_time: str = "1 action"
    range: str = "Self"
    components: tuple[str, ...] = ()
    duration: str = "Instantaneous"
    description: str = ""
    ritual: bool = False
    concentration: bool = False
    classes: tuple[str, ...] = ()

    @property
    def is_cantrip(self) -> bool:
        return self.level == 0


__all__ = [
    "ReadOnlyMapping",
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
    "SpellProgression",
    "LeveledSlotTable",
    "PactSlotTable",
    "SlotTable",
    "SpellcastingProfile",
    "ClassDefinition",
    "Background",
    "Spell",
]
