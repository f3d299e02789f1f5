"""Tests for the calorie adjustment policy."""

import pytest

from diet_planner.domain.enums import Goal
from diet_planner.services.calories import SAFETY_NOTE, adjust_calories


def test_maintain_keeps_tdee() -> None:
    result = adjust_calories(2000, Goal.MAINTAIN, 27)

    assert result.target_calories == 2000
    assert result.weekly_weight_change_lb == 0
    assert result.safety_note is None


def test_lose_with_normal_bmi_takes_small_deficit_and_warns() -> None:
    result = adjust_calories(2000, Goal.LOSE, 22)

    assert result.target_calories == 1750
    assert result.weekly_weight_change_lb == -0.5
    assert result.safety_note == SAFETY_NOTE


def test_lose_with_obese_bmi_is_clamped_to_floor() -> None:
    result = adjust_calories(2000, Goal.LOSE, 32)

    assert result.target_calories == 1600
    assert result.weekly_weight_change_lb == -1.5
    assert result.safety_note is None


def test_lose_with_overweight_bmi_takes_500() -> None:
    result = adjust_calories(3000, Goal.LOSE, 28)

    assert result.target_calories == 2500
    assert result.weekly_weight_change_lb == -1.0
    assert result.safety_note is None


def test_lose_tier_boundaries() -> None:
    at_25 = adjust_calories(4000, Goal.LOSE, 25)
    at_30 = adjust_calories(4000, Goal.LOSE, 30)

    assert at_25.target_calories == 3750
    assert at_25.safety_note == SAFETY_NOTE
    assert at_30.target_calories == 3500
    assert at_30.safety_note is None


@pytest.mark.parametrize("bmi_value", [17, 22, 27, 33, 45])
@pytest.mark.parametrize("tdee", [900, 1400, 2200, 3500])
def test_lose_never_goes_below_80_percent_of_tdee(
    bmi_value: float, tdee: float
) -> None:
    result = adjust_calories(tdee, Goal.LOSE, bmi_value)

    assert result.target_calories >= tdee * 0.8


def test_gain_when_underweight_adds_500() -> None:
    result = adjust_calories(2000, Goal.GAIN, 17.5)

    assert result.target_calories == 2500
    assert result.weekly_weight_change_lb == 1.0
    assert result.safety_note is None


def test_gain_otherwise_adds_300() -> None:
    result = adjust_calories(2000, Goal.GAIN, 18.5)

    assert result.target_calories == 2300
    assert result.weekly_weight_change_lb == 0.6
