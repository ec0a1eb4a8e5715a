"""Integration tests for the character-creation flow.

Walks the wizard steps in order against the bundled SRD content: assign
scores, pick a race and apply its bonuses, pick a class and background,
then validate and compute the finished sheet.
"""

from __future__ import annotations

import pytest

from dnd_chargen import create_dnd5e_engine
from dnd_chargen.engine import DnD5eRuleEngine, is_rule_engine
from dnd_chargen.models import (
    Ability,
    AbilityBonus,
    AbilityScores,
    CharacterSnapshot,
    ClassEntry,
    CreationStep,
    PactSlots,
    SpellSlot,
)
from dnd_chargen.rules import validate_point_buy, validate_standard_array


pytestmark = pytest.mark.integration


@pytest.fixture
def flow_engine() -> DnD5eRuleEngine:
    """An engine built the way an application would build it."""
    return create_dnd5e_engine()


class TestWizardFlow:
    """Build a high-elf wizard step by step."""

    def test_full_flow(self, flow_engine: DnD5eRuleEngine) -> None:
        """Create, validate and compute a complete level 1 wizard."""
        assert is_rule_engine(flow_engine)

        # Ability scores
        base = AbilityScores(
            strength=8, dexterity=14, constitution=13,
            intelligence=15, wisdom=12, charisma=10,
        )
        assert validate_standard_array(base).is_valid

        # Race
        assert "elf" in {option["id"] for option in flow_engine.get_base_race_options()}
        assert "high-elf" in {race.id for race in flow_engine.get_subraces("elf")}
        scores = flow_engine.apply_racial_bonuses(base, "high-elf")
        assert scores.intelligence == 16
        assert scores.dexterity == 16

        character = CharacterSnapshot(name="Elara", ability_scores=scores, race_id="high-elf")
        assert flow_engine.validate_step(character, CreationStep.ABILITY_SCORES).is_valid
        assert flow_engine.validate_step(character, CreationStep.RACE).is_valid
        assert not flow_engine.is_character_complete(character)

        # Class
        assert not flow_engine.requires_level1_subclass("wizard")
        character = character.model_copy(update={"classes": (ClassEntry(class_id="wizard", level=1),)})
        assert flow_engine.validate_step(character, CreationStep.CLASS).is_valid

        skills = flow_engine.get_valid_skill_choices(character)
        assert skills.count == 2

        cantrips = [s.id for s in flow_engine.get_available_spells(character, 0)][:3]
        first_level = [s.id for s in flow_engine.get_available_spells(character, 1)][:4]
        assert len(cantrips) == 3
        assert len(first_level) == 4

        # Background and equipment
        groups = flow_engine.get_equipment_choices("wizard")
        equipment = tuple(group.options[0].items[0].id for group in groups)
        character = character.model_copy(
            update={
                "background_id": "sage",
                "equipment": equipment,
                "selected_cantrips": tuple(cantrips),
                "selected_spells": tuple(first_level),
            }
        )

        # Review
        result = flow_engine.validate_character(character)
        assert result.is_valid, result.codes
        assert result.codes == ()
        assert flow_engine.is_character_complete(character)

        stats = flow_engine.calculate_derived_stats(character)
        assert stats.max_hit_points == 7
        assert stats.initiative == 3
        assert stats.proficiency_bonus == 2
        assert stats.spell_save_dc == 13
        assert stats.spell_attack_bonus == 5

        info = flow_engine.get_spellcasting_info(character)
        assert info.cantrips_known == 3
        assert info.max_prepared_spells == 4
        assert info.spell_slots == {1: SpellSlot(total=2)}
        assert info.known_cantrips == tuple(cantrips)

    def test_empty_character_reports_every_required_step(self, flow_engine: DnD5eRuleEngine) -> None:
        """Test a fresh snapshot lists each missing selection."""
        result = flow_engine.validate_character(CharacterSnapshot())

        assert not result.is_valid
        assert {"RACE_REQUIRED", "CLASS_REQUIRED", "BACKGROUND_REQUIRED"} <= set(result.codes)
        assert "EQUIPMENT_NOT_SELECTED" in result.codes

    def test_point_buy_scores(self, flow_engine: DnD5eRuleEngine) -> None:
        """Test point-buy scores flow through racial bonuses."""
        base = AbilityScores(
            strength=15, dexterity=15, constitution=15,
            intelligence=8, wisdom=8, charisma=8,
        )
        assert validate_point_buy(base).is_valid

        scores = flow_engine.apply_racial_bonuses(base, "mountain-dwarf")
        assert scores.strength == 17
        assert scores.constitution == 17


class TestReferenceScenarios:
    """End-to-end checks of the reference rule scenarios."""

    def test_hill_dwarf_bonuses(self, flow_engine: DnD5eRuleEngine) -> None:
        """Test hill dwarf fixed bonuses on an all-10 array."""
        scores = flow_engine.apply_racial_bonuses(AbilityScores.uniform(10), "hill-dwarf")

        assert scores.constitution == 12
        assert scores.wisdom == 11
        assert scores.strength == scores.dexterity == scores.intelligence == scores.charisma == 10

    def test_half_elf_single_choice(self, flow_engine: DnD5eRuleEngine) -> None:
        """Test an incomplete flexible choice is rejected and not applied."""
        choices = (AbilityBonus(ability=Ability.STR),)

        result = flow_engine.validate_flexible_bonus_choices("half-elf", choices)
        scores = flow_engine.apply_racial_bonuses(AbilityScores.uniform(10), "half-elf", choices)

        assert not result.is_valid
        assert "FLEXIBLE_BONUS_COUNT_INVALID" in result.codes
        assert scores.charisma == 12
        assert scores.strength == 10

    def test_level_one_wizard_spellcasting(self, flow_engine: DnD5eRuleEngine) -> None:
        """Test save DC, attack bonus and counts for INT 16."""
        character = CharacterSnapshot(
            ability_scores=AbilityScores.uniform(10).with_bonus(Ability.INT, 6),
            classes=(ClassEntry(class_id="wizard", level=1),),
        )

        info = flow_engine.get_spellcasting_info(character)

        assert (info.spell_save_dc, info.spell_attack_bonus) == (13, 5)
        assert info.cantrips_known == 3
        assert info.max_prepared_spells == 4

    def test_level_two_warlock_pact_slots(self, flow_engine: DnD5eRuleEngine) -> None:
        """Test pact magic replaces the full-caster table."""
        character = CharacterSnapshot(
            ability_scores=AbilityScores.uniform(10).with_bonus(Ability.CHA, 6),
            classes=(ClassEntry(class_id="warlock", level=2, subclass_id="the-fiend"),),
        )

        info = flow_engine.get_spellcasting_info(character)

        assert info.pact_slots == PactSlots(slot_count=2, slot_level=1)
        assert info.spell_slots == {}

    def test_level_one_subclass_gate(self, flow_engine: DnD5eRuleEngine) -> None:
        """Test a cleric needs a domain at level 1."""
        without = CharacterSnapshot(classes=(ClassEntry(class_id="cleric", level=1),))
        with_domain = CharacterSnapshot(
            classes=(ClassEntry(class_id="cleric", level=1, subclass_id="life-domain"),)
        )

        missing = flow_engine.validate_step(without, CreationStep.CLASS)

        assert not missing.is_valid
        assert "SUBCLASS_REQUIRED_L1" in missing.codes
        assert flow_engine.validate_step(with_domain, CreationStep.CLASS).is_valid
