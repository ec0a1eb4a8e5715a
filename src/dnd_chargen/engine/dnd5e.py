"""D&D 5th Edition (SRD) rule engine.

``DnD5eRuleEngine`` is the single entry point the character-creation
wizard talks to. It wires the rule components to one content set:

- ``StepValidator`` for per-step and whole-character validation
- ``RacialBonusApplier`` for fixed and flexible racial bonuses
- ``SpellcastingCalculator`` and ``DerivedStatCalculator`` for computed state
- ``DiceRoller`` for rolled level-up hit points

Every query is a pure function of its arguments and the engine's
immutable content. Unknown ids never raise; they return ``None`` or an
empty list.

Example:
    >>> engine = create_dnd5e_engine()
    >>> engine.get_proficiency_bonus(5)
    3
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from dnd_chargen.catalog.catalog import RulesContent
from dnd_chargen.core.config import Settings, get_settings
from dnd_chargen.core.logging import get_logger
from dnd_chargen.data.srd import load_srd_content
from dnd_chargen.engine.dice import DiceRoller
from dnd_chargen.models.abilities import AbilityBonus, AbilityScores
from dnd_chargen.models.character import CharacterSnapshot
from dnd_chargen.models.content import (
    Background,
    ClassDefinition,
    FlexibleBonusConfig,
    Race,
    Spell,
    Subclass,
)
from dnd_chargen.models.enums import Ability, CasterType, CreationStep, ItemType
from dnd_chargen.models.results import (
    DerivedStats,
    EquipmentChoiceGroup,
    EquipmentChoiceOption,
    EquipmentItem,
    SkillChoice,
    SpellcastingInfo,
    ValidationResult,
)
from dnd_chargen.rules import formulas
from dnd_chargen.rules.derived_stats import DerivedStatCalculator
from dnd_chargen.rules.progression import CASTER_TYPES
from dnd_chargen.rules.racial_bonuses import RacialBonusApplier
from dnd_chargen.rules.spellcasting import SpellcastingCalculator
from dnd_chargen.rules.validators import StepValidator


logger = get_logger(__name__)


# =============================================================================
# Equipment Display Helpers
# =============================================================================

_CHOICE_SUFFIX = "-choice"

_WEAPON_IDS: tuple[str, ...] = (
    "greataxe", "handaxe", "javelin", "longsword", "shortsword",
    "rapier", "scimitar", "mace", "dagger", "quarterstaff",
    "crossbow", "shortbow", "longbow", "sling", "dart",
    "warhammer", "light-hammer", "battleaxe", "greatsword",
)


def format_item_name(item_id: str) -> str:
    """Title-case an item id, dropping a trailing '-choice' placeholder marker."""
    if item_id.endswith(_CHOICE_SUFFIX):
        item_id = item_id[: -len(_CHOICE_SUFFIX)]
    return " ".join(word.capitalize() for word in item_id.split("-"))


def classify_item(item_id: str) -> ItemType:
    """Guess an item's type from keywords in its id."""
    if "pack" in item_id:
        return ItemType.PACK
    if any(word in item_id for word in ("armor", "shield", "mail", "leather")):
        return ItemType.ARMOR
    if "tool" in item_id or "kit" in item_id:
        return ItemType.TOOL
    if any(weapon in item_id for weapon in _WEAPON_IDS):
        return ItemType.WEAPON
    if any(word in item_id for word in ("martial", "simple", "weapon")):
        return ItemType.WEAPON
    return ItemType.GEAR


# =============================================================================
# Engine
# =============================================================================


class DnD5eRuleEngine:
    """Rule engine for D&D 5E character creation.

    Args:
        content: Catalogs to validate against. Defaults to the bundled SRD.
        settings: Engine settings. Defaults to ``get_settings()``.
        caster_types: Class id to caster type classification.
        dice: Roller for level-up hit points.
    """

    system_id = "dnd5e"
    system_name = "D&D 5th Edition (SRD)"
    version = "1.0.0"

    def __init__(
        self,
        content: RulesContent | None = None,
        *,
        settings: Settings | None = None,
        caster_types: Mapping[str, CasterType] = CASTER_TYPES,
        dice: DiceRoller | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        engine_settings = self._settings.engine
        self._content = content or load_srd_content(strict=engine_settings.strict_content)

        self._bonus_applier = RacialBonusApplier(self._content)
        self._validator = StepValidator(self._content, self._bonus_applier)
        self._spellcasting = SpellcastingCalculator(self._content, caster_types)
        self._derived = DerivedStatCalculator(
            self._content,
            self._spellcasting,
            default_hit_die=engine_settings.default_hit_die,
            default_speed=engine_settings.default_speed,
        )
        self._dice = dice or DiceRoller()

        logger.info(
            "Rule engine initialized",
            system_id=self.system_id,
            races=len(self._content.races),
            classes=len(self._content.classes),
            backgrounds=len(self._content.backgrounds),
            spells=len(self._content.spells),
        )

    @property
    def content(self) -> RulesContent:
        return self._content

    # =========================================================================
    # Validation
    # =========================================================================

    def validate_step(self, character: CharacterSnapshot, step: CreationStep | str) -> ValidationResult:
        """Validate one creation step."""
        return self._validator.validate_step(character, step)

    def validate_character(self, character: CharacterSnapshot) -> ValidationResult:
        """Validate every creation step and merge the results."""
        return self._validator.validate_character(character)

    def is_character_complete(self, character: CharacterSnapshot) -> bool:
        return self._validator.is_character_complete(character)

    def validate_flexible_bonus_choices(
        self,
        race_id: str | None,
        choices: Sequence[AbilityBonus],
    ) -> ValidationResult:
        return self._bonus_applier.validate_flexible_bonus_choices(race_id, choices)

    # =========================================================================
    # Races
    # =========================================================================

    def get_available_races(self) -> list[Race]:
        return self._content.races.all()

    def get_race_by_id(self, race_id: str | None) -> Race | None:
        return self._content.races.get_by_id(race_id)

    def get_subraces(self, base_race: str) -> list[Race]:
        """Subraces of a base race name (e.g. 'dwarf')."""
        return self._content.subraces_of(base_race)

    def get_base_race_options(self) -> list[dict[str, Any]]:
        """One entry per base race for the first race picker.

        Races with subraces appear once under their base race name;
        standalone races appear as themselves.

        Returns:
            Dicts with ``id``, ``name`` and ``has_subraces``, in catalog order.
        """
        options: dict[str, dict[str, Any]] = {}
        for race in self._content.races:
            if race.base_race is not None:
                options.setdefault(race.base_race, {
                    "id": race.base_race,
                    "name": race.base_race.capitalize(),
                    "has_subraces": True,
                })
            else:
                options.setdefault(race.id, {
                    "id": race.id,
                    "name": race.name,
                    "has_subraces": False,
                })
        return list(options.values())

    def has_flexible_ability_bonuses(self, race_id: str | None) -> bool:
        return self._bonus_applier.has_flexible_bonuses(race_id)

    def get_flexible_bonus_options(self, race_id: str | None) -> FlexibleBonusConfig | None:
        return self._bonus_applier.get_flexible_bonus_config(race_id)

    def get_valid_flexible_bonus_abilities(self, race_id: str | None) -> tuple[Ability, ...]:
        return self._bonus_applier.get_valid_flexible_abilities(race_id)

    # =========================================================================
    # Classes and Backgrounds
    # =========================================================================

    def get_available_classes(self) -> list[ClassDefinition]:
        return self._content.classes.all()

    def get_class_by_id(self, class_id: str | None) -> ClassDefinition | None:
        return self._content.classes.get_by_id(class_id)

    def get_available_subclasses(self, class_id: str | None) -> list[Subclass]:
        class_def = self._content.classes.get_by_id(class_id)
        if class_def is None:
            return []
        return list(class_def.subclasses)

    def get_subclass_by_id(self, class_id: str | None, subclass_id: str | None) -> Subclass | None:
        class_def = self._content.classes.get_by_id(class_id)
        if class_def is None or subclass_id is None:
            return None
        return class_def.get_subclass(subclass_id)

    def requires_level1_subclass(self, class_id: str | None) -> bool:
        """Whether the class must pick its subclass at 1st level."""
        class_def = self._content.classes.get_by_id(class_id)
        return class_def is not None and class_def.subclass_level == 1

    def get_available_backgrounds(self) -> list[Background]:
        return self._content.backgrounds.all()

    def get_background_by_id(self, background_id: str | None) -> Background | None:
        return self._content.backgrounds.get_by_id(background_id)

    # =========================================================================
    # Choice Helpers
    # =========================================================================

    def get_valid_skill_choices(self, character: CharacterSnapshot) -> SkillChoice:
        """Skill picks offered by the first class, with the picks made so far.

        Skills granted from elsewhere (e.g. a background) are not counted
        as selections.
        """
        entry = character.primary_class
        class_def = self._content.classes.get_by_id(entry.class_id) if entry else None
        if class_def is None:
            return SkillChoice(count=0, options=())

        descriptor = class_def.skill_choices
        return SkillChoice(
            count=descriptor.choose,
            options=descriptor.options,
            selected=tuple(s for s in character.proficiencies.skills if s in descriptor.options),
        )

    def get_equipment_choices(self, class_id: str | None) -> list[EquipmentChoiceGroup]:
        """Starting-equipment groups for a class, ready for display."""
        class_def = self._content.classes.get_by_id(class_id)
        if class_def is None:
            return []

        return [
            EquipmentChoiceGroup(
                id=group.id,
                description=f"Choose {group.choose} of the following",
                options=tuple(
                    EquipmentChoiceOption(
                        id=option.id,
                        name=option.description,
                        description=option.description,
                        items=tuple(
                            EquipmentItem(
                                id=item_id,
                                name=format_item_name(item_id),
                                type=classify_item(item_id),
                            )
                            for item_id in option.items
                        ),
                    )
                    for option in group.options
                ),
            )
            for group in class_def.equipment_options
        ]

    def get_available_spells(self, character: CharacterSnapshot, spell_level: int) -> list[Spell]:
        """Spells of ``spell_level`` on the character's casting class list.

        Uses the first class with a spellcasting profile. Characters without
        one, or below that class's first casting level, get an empty list.
        """
        casting = self._spellcasting.find_casting_class(character)
        if casting is None:
            return []
        entry, _, profile = casting
        if not profile.is_active_at(entry.level):
            return []
        return [
            spell
            for spell in self._content.spells_for_list(profile.spell_list_id)
            if spell.level == spell_level
        ]

    # =========================================================================
    # Calculations
    # =========================================================================

    def apply_racial_bonuses(
        self,
        base_scores: AbilityScores,
        race_id: str | None,
        flexible_choices: Sequence[AbilityBonus] | None = None,
    ) -> AbilityScores:
        """Base scores plus fixed and valid flexible racial bonuses."""
        return self._bonus_applier.apply_bonuses(base_scores, race_id, flexible_choices)

    def calculate_derived_stats(self, character: CharacterSnapshot) -> DerivedStats:
        return self._derived.calculate(character)

    def get_spellcasting_info(self, character: CharacterSnapshot) -> SpellcastingInfo:
        return self._spellcasting.get_spellcasting_info(character)

    def get_proficiency_bonus(self, level: int) -> int:
        return formulas.proficiency_bonus(level)

    def calculate_level_up_hp(self, character: CharacterSnapshot, roll: int | None = None) -> int:
        """Hit points gained on the next level.

        Args:
            character: The snapshot before levelling.
            roll: Hit-die roll; omitted or non-positive uses the fixed average.
        """
        return self._derived.level_up_hit_points(character, roll)

    def roll_level_up_hp(self, character: CharacterSnapshot) -> int:
        """Roll the first class's hit die and apply it as a level-up.

        Raises:
            DiceRollError: If the resolved hit die is not a valid die size.
        """
        hit_die = self._derived.hit_die_for(character)
        rolled = self._dice.roll_hit_die(hit_die)
        gained = self.calculate_level_up_hp(character, rolled.total)
        logger.debug("Level-up hit points rolled", hit_die=hit_die, roll=rolled.total, gained=gained)
        return gained


def create_dnd5e_engine(
    content: RulesContent | None = None,
    *,
    settings: Settings | None = None,
) -> DnD5eRuleEngine:
    """Build an engine over the bundled SRD content."""
    return DnD5eRuleEngine(content, settings=settings)


__all__ = [
    "DnD5eRuleEngine",
    "create_dnd5e_engine",
    "format_item_name",
    "classify_item",
]
