"""Tests for the profile assembler."""

from diet_planner.domain.enums import Climate, Goal
from diet_planner.domain.nutrition import MacroSplit, parse_personal_info
from diet_planner.services.calories import SAFETY_NOTE
from diet_planner.services.profiles import build_profile
from tests.conftest import make_person


def test_profile_for_reference_person() -> None:
    profile = build_profile(make_person())
    metrics = profile.metrics

    assert metrics.bmi == 22.9
    assert metrics.bmi_classification.category == "Normal weight"
    assert metrics.bmr == 1649
    assert metrics.tdee == 1979
    assert metrics.target_calories == 1979
    assert metrics.weekly_weight_change_lb == 0
    assert metrics.ideal_weight.min_kg == 56.7
    assert metrics.ideal_weight.max_kg == 76.3
    assert metrics.water_intake_ml == 2695
    assert metrics.water_glasses == 11
    assert metrics.safety_note is None


def test_profile_macros_are_rounded_from_target() -> None:
    macros = build_profile(make_person()).macronutrients

    assert (macros.carbs.calories, macros.carbs.grams) == (990, 247)
    assert (macros.protein.calories, macros.protein.grams) == (396, 99)
    assert (macros.fat.calories, macros.fat.grams) == (594, 66)
    assert macros.protein.recommended_grams == 56
    assert macros.fat.saturated_fat_limit_g == 22
    assert (
        macros.carbs.percentage,
        macros.protein.percentage,
        macros.fat.percentage,
    ) == (50, 20, 30)


def test_profile_micronutrients() -> None:
    micros = build_profile(make_person()).micronutrients

    assert micros.fiber_g == 38
    assert micros.sodium.sodium_mg == 2000
    assert micros.vitamin_c_mg == 90
    assert micros.iron_mg == 8


def test_profile_for_weight_loss_at_normal_bmi_has_safety_note() -> None:
    profile = build_profile(make_person(goal=Goal.LOSE))

    assert profile.metrics.target_calories == 1729
    assert profile.metrics.weekly_weight_change_lb == -0.5
    assert profile.metrics.safety_note == SAFETY_NOTE


def test_profile_uses_requested_split_and_climate() -> None:
    profile = build_profile(
        make_person(), MacroSplit(40, 30, 30), climate=Climate.TROPICAL
    )

    assert profile.macronutrients.protein.percentage == 30
    assert profile.macronutrients.carbs.percentage == 40
    assert profile.metrics.water_intake_ml == 4043


def test_build_profile_is_deterministic() -> None:
    person = make_person(goal=Goal.GAIN)

    assert build_profile(person, MacroSplit(45, 25, 30)) == build_profile(
        person, MacroSplit(45, 25, 30)
    )


def test_profile_with_zero_energy_expenditure() -> None:
    profile = build_profile(parse_personal_info(1, 5.6, 10, "male", "sedentary"))

    assert profile.metrics.target_calories == 0
    assert profile.macronutrients.protein.percentage == 20
    assert profile.macronutrients.carbs.grams == 0


def test_fractional_age_selects_older_water_band() -> None:
    profile = build_profile(parse_personal_info(70, 175, 65.5, "male", "sedentary"))

    assert profile.metrics.water_intake_ml == 2310
