"""Tests for the D&D 5E rule-engine facade."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from dnd_chargen.catalog import RulesContent
from dnd_chargen.core.config import EngineSettings, Settings
from dnd_chargen.engine import DiceRoller, DnD5eRuleEngine, create_dnd5e_engine
from dnd_chargen.engine.dnd5e import classify_item, format_item_name
from dnd_chargen.models import (
    Ability,
    AbilityBonus,
    AbilityScores,
    CharacterSnapshot,
    ClassEntry,
    CreationStep,
    ItemType,
    Proficiencies,
    Skill,
)


MakeCharacter = Callable[..., CharacterSnapshot]


class TestIdentity:
    """Tests for engine identity and construction."""

    def test_identity(self, engine: DnD5eRuleEngine) -> None:
        """Test system identifiers."""
        assert engine.system_id == "dnd5e"
        assert engine.system_name == "D&D 5th Edition (SRD)"
        assert engine.version == "1.0.0"

    def test_factory_loads_srd(self) -> None:
        """Test the factory builds an engine over the bundled content."""
        engine = create_dnd5e_engine()
        assert len(engine.get_available_classes()) == 12

    def test_engines_do_not_share_state(self, srd_content: RulesContent) -> None:
        """Test two engines with different fallbacks stay independent."""
        small = DnD5eRuleEngine(
            srd_content, settings=Settings(engine=EngineSettings(default_speed=20))
        )
        default = DnD5eRuleEngine(srd_content)
        character = CharacterSnapshot(ability_scores=AbilityScores.uniform(10))

        assert small.calculate_derived_stats(character).speed == 20
        assert default.calculate_derived_stats(character).speed == 30


class TestContentQueries:
    """Tests for catalog queries."""

    def test_race_lookup(self, engine: DnD5eRuleEngine) -> None:
        """Test race lookup by id."""
        assert engine.get_race_by_id("tiefling") is not None
        assert engine.get_race_by_id("ogre") is None
        assert len(engine.get_available_races()) == 13

    def test_subraces(self, engine: DnD5eRuleEngine) -> None:
        """Test subraces of a base race."""
        assert [r.id for r in engine.get_subraces("gnome")] == ["forest-gnome", "rock-gnome"]
        assert engine.get_subraces("ogre") == []

    def test_base_race_options(self, engine: DnD5eRuleEngine) -> None:
        """Test one option per base race."""
        options = {option["id"]: option for option in engine.get_base_race_options()}

        assert len(options) == 9
        assert options["dwarf"] == {"id": "dwarf", "name": "Dwarf", "has_subraces": True}
        assert options["human"] == {"id": "human", "name": "Human", "has_subraces": False}
        assert "hill-dwarf" not in options

    def test_class_and_subclass_lookup(self, engine: DnD5eRuleEngine) -> None:
        """Test class, subclass and background lookups."""
        assert engine.get_class_by_id("wizard") is not None
        assert engine.get_class_by_id("artificer") is None
        assert engine.get_subclass_by_id("cleric", "life-domain") is not None
        assert engine.get_subclass_by_id("cleric", "the-fiend") is None
        assert engine.get_subclass_by_id("artificer", "x") is None
        assert [s.id for s in engine.get_available_subclasses("warlock")] == ["the-fiend"]
        assert engine.get_available_subclasses("artificer") == []
        assert engine.get_background_by_id("sage") is not None
        assert len(engine.get_available_backgrounds()) == 6

    @pytest.mark.parametrize(
        "class_id,expected",
        [("cleric", True), ("sorcerer", True), ("warlock", True), ("wizard", False), ("artificer", False)],
    )
    def test_requires_level1_subclass(self, engine: DnD5eRuleEngine, class_id: str, expected: bool) -> None:
        """Test which classes pick a subclass at level 1."""
        assert engine.requires_level1_subclass(class_id) is expected

    def test_flexible_bonus_helpers(self, engine: DnD5eRuleEngine) -> None:
        """Test flexible-bonus queries."""
        assert engine.has_flexible_ability_bonuses("half-elf") is True
        assert engine.has_flexible_ability_bonuses("human") is False
        config = engine.get_flexible_bonus_options("half-elf")
        assert config is not None
        assert config.excluded_abilities == frozenset({Ability.CHA})
        assert engine.get_flexible_bonus_options("human") is None
        assert Ability.CHA not in engine.get_valid_flexible_bonus_abilities("half-elf")


class TestChoiceHelpers:
    """Tests for skill, equipment and spell choice helpers."""

    def test_skill_choices(self, engine: DnD5eRuleEngine, make_character: MakeCharacter) -> None:
        """Test skills offered by the first class with current picks."""
        character = make_character(
            class_id="fighter",
            proficiencies=Proficiencies(skills=(Skill.ATHLETICS, Skill.STEALTH)),
        )

        choice = engine.get_valid_skill_choices(character)

        assert choice.count == 2
        assert Skill.ATHLETICS in choice.options
        assert choice.selected == (Skill.ATHLETICS,)
        assert choice.remaining == 1

    def test_skill_choices_without_class(self, engine: DnD5eRuleEngine, make_character: MakeCharacter) -> None:
        """Test no class yields an empty choice."""
        choice = engine.get_valid_skill_choices(make_character(class_id=None))
        assert choice.count == 0
        assert choice.options == ()

    def test_equipment_choices(self, engine: DnD5eRuleEngine) -> None:
        """Test class equipment groups are converted for display."""
        groups = engine.get_equipment_choices("barbarian")

        assert groups[0].id == "barbarian-weapon-1"
        assert groups[0].description == "Choose 1 of the following"
        assert groups[0].selected_index is None
        greataxe = groups[0].options[0].items[0]
        assert greataxe.name == "Greataxe"
        assert greataxe.type == ItemType.WEAPON
        assert greataxe.quantity == 1
        placeholder = groups[0].options[1].items[0]
        assert placeholder.name == "Martial Melee"

    def test_equipment_choices_unknown_class(self, engine: DnD5eRuleEngine) -> None:
        """Test unknown classes have no equipment groups."""
        assert engine.get_equipment_choices("artificer") == []

    def test_available_cantrips_for_wizard(self, engine: DnD5eRuleEngine, make_character: MakeCharacter) -> None:
        """Test spells are filtered by class list and level."""
        spells = engine.get_available_spells(make_character(class_id="wizard"), 0)
        ids = {spell.id for spell in spells}

        assert "fire-bolt" in ids
        assert "sacred-flame" not in ids
        assert all(spell.level == 0 for spell in spells)

    def test_available_spells_for_cleric(self, engine: DnD5eRuleEngine, make_character: MakeCharacter) -> None:
        """Test first-level spells for a cleric."""
        ids = {s.id for s in engine.get_available_spells(make_character(class_id="cleric"), 1)}
        assert {"bless", "cure-wounds", "guiding-bolt"} <= ids
        assert "magic-missile" not in ids

    def test_available_spells_for_non_caster(self, engine: DnD5eRuleEngine, make_character: MakeCharacter) -> None:
        """Test non-casters get no spells."""
        assert engine.get_available_spells(make_character(class_id="fighter"), 0) == []
        assert engine.get_available_spells(make_character(class_id="paladin", level=1), 1) == []

    def test_available_spells_follow_first_casting_class(self, engine: DnD5eRuleEngine) -> None:
        """Test a later casting class does not stand in for the first one."""
        early = CharacterSnapshot(
            ability_scores=AbilityScores.uniform(10),
            classes=(ClassEntry(class_id="paladin", level=1), ClassEntry(class_id="wizard", level=1)),
        )
        later = early.model_copy(
            update={"classes": (ClassEntry(class_id="paladin", level=2), ClassEntry(class_id="wizard", level=1))}
        )

        assert engine.get_available_spells(early, 1) == []
        ids = {spell.id for spell in engine.get_available_spells(later, 1)}
        assert {"bless", "heroism"} <= ids
        assert "magic-missile" not in ids


class TestItemHelpers:
    """Tests for equipment display helpers."""

    @pytest.mark.parametrize(
        "item_id,name",
        [
            ("greataxe", "Greataxe"),
            ("martial-melee-choice", "Martial Melee"),
            ("light-crossbow", "Light Crossbow"),
        ],
    )
    def test_format_item_name(self, item_id: str, name: str) -> None:
        """Test kebab-case ids become display names."""
        assert format_item_name(item_id) == name

    @pytest.mark.parametrize(
        "item_id,item_type",
        [
            ("explorers-pack", ItemType.PACK),
            ("chain-mail", ItemType.ARMOR),
            ("leather-armor", ItemType.ARMOR),
            ("shield", ItemType.ARMOR),
            ("thieves-tools", ItemType.TOOL),
            ("disguise-kit", ItemType.TOOL),
            ("handaxe", ItemType.WEAPON),
            ("simple-weapon-choice", ItemType.WEAPON),
            ("holy-symbol", ItemType.GEAR),
        ],
    )
    def test_classify_item(self, item_id: str, item_type: ItemType) -> None:
        """Test item type keywords."""
        assert classify_item(item_id) == item_type


class TestCalculations:
    """Tests for calculator pass-throughs."""

    def test_apply_racial_bonuses(self, engine: DnD5eRuleEngine) -> None:
        """Test fixed and flexible bonuses through the facade."""
        scores = engine.apply_racial_bonuses(
            AbilityScores.uniform(10),
            "half-elf",
            (AbilityBonus(ability=Ability.STR), AbilityBonus(ability=Ability.CON)),
        )
        assert (scores.charisma, scores.strength, scores.constitution) == (12, 11, 11)

    def test_validate_flexible_bonus_choices(self, engine: DnD5eRuleEngine) -> None:
        """Test flexible validation through the facade."""
        result = engine.validate_flexible_bonus_choices("half-elf", (AbilityBonus(ability=Ability.STR),))
        assert result.codes == ("FLEXIBLE_BONUS_COUNT_INVALID",)

    def test_proficiency_bonus(self, engine: DnD5eRuleEngine) -> None:
        """Test the proficiency table through the facade."""
        assert [engine.get_proficiency_bonus(n) for n in (1, 5, 9, 13, 17)] == [2, 3, 4, 5, 6]

    def test_level_up_hp(self, engine: DnD5eRuleEngine, make_character: MakeCharacter) -> None:
        """Test level-up hit points with and without a roll."""
        character = make_character(class_id="barbarian")
        assert engine.calculate_level_up_hp(character, 10) == 10
        assert engine.calculate_level_up_hp(character) == 7

    def test_roll_level_up_hp(self, srd_content: RulesContent, make_character: MakeCharacter) -> None:
        """Test rolled level-up hit points stay within the die."""
        engine = DnD5eRuleEngine(srd_content, dice=DiceRoller(seed=3))
        character = make_character(class_id="wizard")

        for _ in range(20):
            assert 1 <= engine.roll_level_up_hp(character) <= 6

    def test_validate_step_by_name(self, engine: DnD5eRuleEngine, make_character: MakeCharacter) -> None:
        """Test steps may be passed as enum or string."""
        character = make_character()
        assert engine.validate_step(character, "race") == engine.validate_step(character, CreationStep.RACE)
