"""Tests for content models."""

from __future__ import annotations

from types import MappingProxyType

import pytest
from pydantic import ValidationError

from dnd_chargen.catalog import RulesContent
from dnd_chargen.core.exceptions import FormulaError
from dnd_chargen.models import (
    Ability,
    ClassDefinition,
    FlexibleBonusConfig,
    KnownSpellProgression,
    LeveledSlotTable,
    PactSlotTable,
    PreparedFormula,
    PreparedFormulaKind,
    PreparedSpellProgression,
    SpellcastingProfile,
    Subclass,
)


class TestPreparedFormula:
    """Tests for prepared-spell formula parsing."""

    @pytest.mark.parametrize(
        "text,kind,ability",
        [
            ("INT_MOD + LEVEL", PreparedFormulaKind.MOD_PLUS_LEVEL, Ability.INT),
            ("WIS_MOD+LEVEL", PreparedFormulaKind.MOD_PLUS_LEVEL, Ability.WIS),
            ("CHA_MOD + HALF_LEVEL", PreparedFormulaKind.MOD_PLUS_HALF_LEVEL, Ability.CHA),
            ("LEVEL + WIS_MOD", PreparedFormulaKind.MOD_PLUS_LEVEL, Ability.WIS),
            ("wis_mod", PreparedFormulaKind.MOD, Ability.WIS),
        ],
    )
    def test_parse_valid(self, text: str, kind: PreparedFormulaKind, ability: Ability) -> None:
        """Test recognized formulas resolve to their kind and ability."""
        formula = PreparedFormula.parse(text)
        assert formula.kind == kind
        assert formula.ability == ability

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "LEVEL",
            "WIS_MOD + XP",
            "WIS_MOD + LEVEL + LEVEL",
            "WIS_MOD + INT_MOD",
            "LUK_MOD + LEVEL",
            "WIS_MOD + ",
        ],
    )
    def test_parse_invalid(self, text: str) -> None:
        """Test malformed formulas fail fast."""
        with pytest.raises(FormulaError) as exc_info:
            PreparedFormula.parse(text)
        assert exc_info.value.details["formula"] == text

    def test_progression_resolves_text(self) -> None:
        """Test formula text is parsed when the progression is built."""
        progression = PreparedSpellProgression(formula="INT_MOD + LEVEL")
        assert isinstance(progression.formula, PreparedFormula)
        assert progression.formula.kind == PreparedFormulaKind.MOD_PLUS_LEVEL

    def test_progression_rejects_bad_text(self) -> None:
        """Test bad formula text surfaces as FormulaError at load time."""
        with pytest.raises(FormulaError):
            PreparedSpellProgression(formula="INT_MOD * 2")


class TestSpellcastingProfile:
    """Tests for spellcasting profile unions."""

    def test_prepared_and_pact_from_dicts(self) -> None:
        """Test the tagged unions resolve from plain data."""
        profile = SpellcastingProfile.model_validate({
            "ability": "intelligence",
            "progression": {"kind": "prepared", "formula": "INT_MOD + LEVEL"},
            "slots": {"kind": "pact", "rows": {1: [1, 1], 2: [2, 1]}},
            "spell_list_id": "test",
        })

        assert isinstance(profile.progression, PreparedSpellProgression)
        assert isinstance(profile.slots, PactSlotTable)
        assert profile.uses_pact_magic is True
        assert profile.slots.rows[2] == (2, 1)

    def test_known_and_leveled_from_dicts(self) -> None:
        """Test the known-spells variant resolves from plain data."""
        profile = SpellcastingProfile.model_validate({
            "ability": "charisma",
            "progression": {"kind": "known", "spells_known": {1: 2}},
            "slots": {"kind": "leveled", "rows": {1: [2]}},
            "spell_list_id": "test",
        })

        assert isinstance(profile.progression, KnownSpellProgression)
        assert isinstance(profile.slots, LeveledSlotTable)
        assert profile.uses_pact_magic is False

    def test_unknown_progression_kind(self) -> None:
        """Test an unknown tag is rejected."""
        with pytest.raises(ValidationError):
            SpellcastingProfile.model_validate({
                "ability": "wisdom",
                "progression": {"kind": "innate"},
                "slots": {"kind": "leveled", "rows": {}},
                "spell_list_id": "test",
            })

    def test_slot_row_too_wide(self) -> None:
        """Test slot rows cannot exceed nine spell levels."""
        with pytest.raises(ValidationError):
            LeveledSlotTable(rows={1: (1,) * 10})

    def test_formula_ability_mismatch(self) -> None:
        """Test the formula must name the profile's ability."""
        with pytest.raises(FormulaError):
            SpellcastingProfile(
                ability=Ability.WIS,
                progression=PreparedSpellProgression(formula="INT_MOD + LEVEL"),
                slots=LeveledSlotTable(rows={1: (2,)}),
                spell_list_id="test",
            )

    def test_first_level_gate(self) -> None:
        """Test half casters are inactive before their first casting level."""
        profile = SpellcastingProfile(
            ability=Ability.CHA,
            progression=PreparedSpellProgression(formula="CHA_MOD + HALF_LEVEL"),
            slots=LeveledSlotTable(rows={2: (2,)}),
            spell_list_id="paladin",
            first_level=2,
        )

        assert profile.is_active_at(1) is False
        assert profile.is_active_at(2) is True


class TestClassDefinition:
    """Tests for ClassDefinition."""

    def _make(self, **overrides: object) -> ClassDefinition:
        fields: dict[str, object] = {
            "id": "test",
            "name": "Test",
            "hit_die": 8,
            "saving_throws": (Ability.STR, Ability.CON),
            "skill_choices": {"choose": 2, "options": ["athletics", "perception"]},
        }
        fields.update(overrides)
        return ClassDefinition.model_validate(fields)

    def test_minimal(self) -> None:
        """Test a class without spellcasting."""
        class_def = self._make()
        assert class_def.is_spellcaster is False
        assert class_def.subclass_level == 3

    @pytest.mark.parametrize("hit_die", [4, 7, 20])
    def test_invalid_hit_die(self, hit_die: int) -> None:
        """Test only d6, d8, d10 and d12 are allowed."""
        with pytest.raises(ValidationError):
            self._make(hit_die=hit_die)

    def test_exactly_two_saving_throws(self) -> None:
        """Test saving throws are a pair."""
        with pytest.raises(ValidationError):
            self._make(saving_throws=(Ability.STR,))

    def test_get_subclass(self) -> None:
        """Test subclass lookup by id."""
        subclass = Subclass(id="sub", name="Sub", class_id="test")
        class_def = self._make(subclasses=(subclass,))

        assert class_def.get_subclass("sub") == subclass
        assert class_def.get_subclass("other") is None


class TestSubclassBonusSpells:
    """Tests for cumulative subclass bonus spells."""

    def test_cumulative_through_level(self) -> None:
        """Test spells from every unlocked level are granted in order."""
        subclass = Subclass(
            id="life-domain",
            name="Life Domain",
            class_id="cleric",
            bonus_spells={3: ("c", "d"), 1: ("a", "b"), 5: ("e",)},
        )

        assert subclass.bonus_spells_through(1) == ("a", "b")
        assert subclass.bonus_spells_through(4) == ("a", "b", "c", "d")
        assert subclass.bonus_spells_through(20) == ("a", "b", "c", "d", "e")

    def test_none_before_first_grant(self) -> None:
        """Test no spells below the first grant level."""
        subclass = Subclass(id="s", name="S", class_id="c", bonus_spells={3: ("x",)})
        assert subclass.bonus_spells_through(2) == ()


class TestFlexibleBonusConfig:
    """Tests for FlexibleBonusConfig."""

    def test_allowed_abilities_exclude(self) -> None:
        """Test excluded abilities are not offered."""
        config = FlexibleBonusConfig(
            race_id="half-elf",
            choice_count=2,
            excluded_abilities=frozenset({Ability.CHA}),
        )
        assert config.allowed_abilities == (
            Ability.STR, Ability.DEX, Ability.CON, Ability.INT, Ability.WIS,
        )

    def test_choice_count_must_be_positive(self) -> None:
        """Test a config must require at least one choice."""
        with pytest.raises(ValidationError):
            FlexibleBonusConfig(race_id="x", choice_count=0)


class TestReadOnlyTables:
    """Tests for the read-only catalog tables."""

    def test_loaded_tables_reject_writes(self, srd_content: RulesContent) -> None:
        """Test tables of loaded classes cannot be changed in place."""
        wizard = srd_content.classes.get_by_id("wizard")
        assert wizard is not None and wizard.spellcasting is not None
        rows = wizard.spellcasting.slots.rows

        assert isinstance(rows, MappingProxyType)
        with pytest.raises(TypeError):
            rows[1] = (9,)  # type: ignore[index]
        with pytest.raises(TypeError):
            wizard.spellcasting.cantrips_known[1] = 9  # type: ignore[index]
        with pytest.raises(TypeError):
            wizard.features[1] = ("extra",)  # type: ignore[index]

    def test_source_dict_is_copied(self) -> None:
        """Test later changes to the input dict do not leak into the model."""
        source = {1: ("a",)}
        subclass = Subclass(id="s", name="S", class_id="c", bonus_spells=source)
        source[2] = ("b",)

        assert subclass.bonus_spells == {1: ("a",)}
        assert isinstance(Subclass(id="s", name="S", class_id="c").bonus_spells, MappingProxyType)

    def test_dump_gives_plain_dicts(self) -> None:
        """Test serialized tables are ordinary dicts."""
        table = LeveledSlotTable(rows={1: (2,), 2: (3,)})
        dumped = table.model_dump()

        assert type(dumped["rows"]) is dict
        assert dumped["rows"] == {1: (2,), 2: (3,)}
        assert LeveledSlotTable.model_validate(dumped) == table
