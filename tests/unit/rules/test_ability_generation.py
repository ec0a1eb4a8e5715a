"""Tests for point-buy and standard-array checks."""

from __future__ import annotations

import pytest

from dnd_chargen.core.exceptions import PointBuyError
from dnd_chargen.models import AbilityScores
from dnd_chargen.rules.ability_generation import (
    can_decrease,
    can_increase,
    increase_cost,
    point_buy_cost,
    total_points_spent,
    validate_point_buy,
    validate_standard_array,
)


def _scores(*values: int) -> AbilityScores:
    names = ("strength", "dexterity", "constitution", "intelligence", "wisdom", "charisma")
    return AbilityScores(**dict(zip(names, values, strict=True)))


class TestPointBuyCost:
    """Tests for single-score costs."""

    @pytest.mark.parametrize(
        "score,cost",
        [(8, 0), (9, 1), (10, 2), (11, 3), (12, 4), (13, 5), (14, 7), (15, 9)],
    )
    def test_cost_table(self, score: int, cost: int) -> None:
        """Test the PHB cost table."""
        assert point_buy_cost(score) == cost

    @pytest.mark.parametrize("score", [7, 16, 0])
    def test_out_of_range(self, score: int) -> None:
        """Test costs outside 8-15 are undefined."""
        with pytest.raises(PointBuyError) as exc_info:
            point_buy_cost(score)
        assert exc_info.value.details["score"] == score


class TestTotals:
    """Tests for total_points_spent."""

    def test_standard_array_costs_27(self) -> None:
        """Test the standard array is a legal point buy."""
        assert total_points_spent(_scores(15, 14, 13, 12, 10, 8)) == 27

    def test_scores_below_minimum_are_free(self) -> None:
        """Test unassigned scores do not break the total."""
        assert total_points_spent(AbilityScores()) == 0

    def test_scores_above_maximum_cap(self) -> None:
        """Test scores above 15 count as 15."""
        assert total_points_spent(_scores(18, 8, 8, 8, 8, 8)) == 9


class TestValidatePointBuy:
    """Tests for validate_point_buy."""

    def test_valid(self) -> None:
        """Test three 15s and three 8s spend exactly 27."""
        result = validate_point_buy(_scores(15, 15, 15, 8, 8, 8))
        assert result.is_valid

    def test_under_spent(self) -> None:
        """Test spending fewer than 27 points."""
        result = validate_point_buy(AbilityScores.uniform(8))
        assert result.codes == ("POINT_BUY_TOTAL_INVALID",)

    def test_score_too_low_and_too_high(self) -> None:
        """Test every offending score is reported."""
        result = validate_point_buy(_scores(16, 7, 15, 8, 8, 8))
        codes = set(result.codes)
        assert "POINT_BUY_SCORE_TOO_HIGH" in codes
        assert "POINT_BUY_SCORE_TOO_LOW" in codes
        fields = {issue.field for issue in result.errors}
        assert {"strength", "dexterity"} <= fields


class TestValidateStandardArray:
    """Tests for validate_standard_array."""

    def test_any_permutation(self) -> None:
        """Test the array may be assigned in any order."""
        assert validate_standard_array(_scores(8, 10, 12, 13, 14, 15)).is_valid

    def test_mismatch(self) -> None:
        """Test a repeated value is rejected."""
        result = validate_standard_array(_scores(15, 15, 13, 12, 10, 8))
        assert result.codes == ("STANDARD_ARRAY_MISMATCH",)


class TestIncreaseDecrease:
    """Tests for point-buy stepping helpers."""

    @pytest.mark.parametrize("score,cost", [(8, 1), (12, 1), (13, 2), (14, 2), (15, 0)])
    def test_increase_cost(self, score: int, cost: int) -> None:
        """Test the marginal cost of one more point."""
        assert increase_cost(score) == cost

    def test_can_increase(self) -> None:
        """Test increases depend on remaining points and the cap."""
        assert can_increase(13, 2) is True
        assert can_increase(13, 1) is False
        assert can_increase(15, 27) is False

    def test_can_decrease(self) -> None:
        """Test scores cannot drop below 8."""
        assert can_decrease(9) is True
        assert can_decrease(8) is False
