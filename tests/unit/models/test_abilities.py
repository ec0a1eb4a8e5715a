"""Tests for ability score models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from dnd_chargen.models import Ability, AbilityBonus, AbilityScores, Skill, calculate_modifier


class TestCalculateModifier:
    """Tests for the calculate_modifier function."""

    def test_modifier_at_10(self) -> None:
        """Score of 10 gives modifier of 0."""
        assert calculate_modifier(10) == 0

    def test_modifier_at_1(self) -> None:
        """Score of 1 gives modifier of -5."""
        assert calculate_modifier(1) == -5

    def test_modifier_at_30(self) -> None:
        """Score of 30 gives modifier of +10."""
        assert calculate_modifier(30) == 10

    @pytest.mark.parametrize(
        "score,expected",
        [
            (1, -5), (2, -4), (3, -4), (4, -3), (5, -3),
            (6, -2), (7, -2), (8, -1), (9, -1), (10, 0),
            (11, 0), (12, 1), (13, 1), (14, 2), (15, 2),
            (16, 3), (17, 3), (18, 4), (19, 4), (20, 5),
        ],
    )
    def test_modifier_table(self, score: int, expected: int) -> None:
        """Test modifier calculation against D&D 5E table."""
        assert calculate_modifier(score) == expected


class TestAbilityScores:
    """Tests for AbilityScores."""

    def test_defaults_are_unset(self) -> None:
        """Test every score defaults to the 0 sentinel."""
        scores = AbilityScores()
        assert all(score == 0 for _, score in scores.items())

    def test_uniform(self) -> None:
        """Test uniform sets all six scores."""
        scores = AbilityScores.uniform(12)
        assert scores.strength == 12
        assert scores.charisma == 12

    def test_get_score_and_modifier(self) -> None:
        """Test lookup by Ability enum."""
        scores = AbilityScores.uniform(10).with_bonus(Ability.DEX, 6)
        assert scores.get_score(Ability.DEX) == 16
        assert scores.get_modifier(Ability.DEX) == 3

    def test_items_order(self) -> None:
        """Test items yields abilities in canonical order."""
        abilities = [ability for ability, _ in AbilityScores.uniform(10).items()]
        assert abilities == list(Ability)

    def test_with_bonuses_returns_new_instance(self) -> None:
        """Test bonuses never mutate the original."""
        base = AbilityScores.uniform(10)
        boosted = base.with_bonuses({Ability.CON: 2, Ability.WIS: 1})

        assert boosted is not base
        assert base.constitution == 10
        assert boosted.constitution == 12
        assert boosted.wisdom == 11
        assert boosted.strength == 10

    def test_with_empty_bonuses_is_identity(self) -> None:
        """Test an empty bonus map returns the same scores."""
        base = AbilityScores.uniform(10)
        assert base.with_bonuses({}) is base

    def test_frozen(self) -> None:
        """Test scores cannot be reassigned."""
        scores = AbilityScores.uniform(10)
        with pytest.raises(ValidationError):
            scores.strength = 18  # type: ignore[misc]

    def test_strict_rejects_strings(self) -> None:
        """Test strict mode refuses numeric strings."""
        with pytest.raises(ValidationError):
            AbilityScores(strength="15")  # type: ignore[arg-type]


class TestAbilityBonus:
    """Tests for AbilityBonus."""

    def test_default_bonus(self) -> None:
        """Test a bonus defaults to +1."""
        assert AbilityBonus(ability=Ability.STR).bonus == 1

    def test_ability_from_value(self) -> None:
        """Test the ability can be given by its value."""
        assert AbilityBonus(ability="wisdom", bonus=2).ability == Ability.WIS


class TestAbilityEnum:
    """Tests for Ability and Skill enums."""

    @pytest.mark.parametrize("token", ["STR", "str", "Str"])
    def test_from_abbreviation(self, token: str) -> None:
        """Test abbreviations resolve case-insensitively."""
        assert Ability.from_abbreviation(token) == Ability.STR

    def test_from_unknown_abbreviation(self) -> None:
        """Test unknown abbreviations give None."""
        assert Ability.from_abbreviation("LUK") is None

    def test_full_name(self) -> None:
        """Test display names."""
        assert Ability.CHA.full_name == "Charisma"
        assert Ability.CHA.abbreviation == "CHA"

    @pytest.mark.parametrize(
        "skill,ability",
        [
            (Skill.ATHLETICS, Ability.STR),
            (Skill.STEALTH, Ability.DEX),
            (Skill.ARCANA, Ability.INT),
            (Skill.PERCEPTION, Ability.WIS),
            (Skill.PERSUASION, Ability.CHA),
        ],
    )
    def test_skill_ability(self, skill: Skill, ability: Ability) -> None:
        """Test skills map to their governing ability."""
        assert skill.ability == ability

    def test_skill_display_name(self) -> None:
        """Test multi-word skill names."""
        assert Skill.SLEIGHT_OF_HAND.display_name == "Sleight Of Hand"
