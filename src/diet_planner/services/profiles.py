"""Assemble a nutrition profile from the formula library."""

from diet_planner.domain.enums import Climate
from diet_planner.domain.nutrition import (
    FatAmount,
    IdealWeightRange,
    MacroAmount,
    MacronutrientBreakdown,
    MacroSplit,
    Metrics,
    NutritionProfile,
    PersonalInfo,
    ProteinAmount,
)
from diet_planner.services import formulas
from diet_planner.services.calories import adjust_calories
from diet_planner.services.macros import rebalance_macros
from diet_planner.services.rounding import round_half_up, round_int

GENERAL_RECOMMENDATIONS: dict[str, str] = {
    "dailyFruitVeg": "400g (5 portions) minimum - WHO recommendation",
    "freeSugars": "Less than 10% of total calories (ideally <5%)",
    "physicalActivity": "At least 150 minutes moderate-intensity per week",
    "note": "Calculations based on WHO guidelines and peer-reviewed research",
}


def build_profile(
    personal_info: PersonalInfo,
    split: MacroSplit | None = None,
    climate: Climate = Climate.TEMPERATE,
) -> NutritionProfile:
    """Run the calculation pipeline and return a rounded profile.

    Order: BMI, classification, BMR (both equations), TDEE, ideal weight,
    water, calorie target, macros, micronutrients. Macros are split
    from the rounded calorie target.
    """
    info = personal_info
    bmi_value = formulas.bmi(info.weight_kg, info.height_cm)
    classification = formulas.bmi_classification(bmi_value)
    bmr_value = formulas.bmr(info.weight_kg, info.height_cm, info.age, info.gender)
    bmr_alternate = formulas.bmr_alternate(
        info.weight_kg, info.height_cm, info.age, info.gender
    )
    tdee_value = formulas.tdee(bmr_value, info.activity_level)
    ideal_weight = formulas.ideal_weight_range(info.height_cm)
    water_ml = formulas.water_intake_ml(
        info.weight_kg, info.activity_level, info.age, info.gender, climate
    )
    adjustment = adjust_calories(tdee_value, info.goal, bmi_value)
    target_calories = round_int(adjustment.target_calories)
    macros = rebalance_macros(target_calories, split, info.weight_kg)
    micronutrients = formulas.micronutrient_targets(info.age, info.gender)

    metrics = Metrics(
        bmi=round_half_up(bmi_value, 1),
        bmi_classification=classification,
        bmr=round_int(bmr_value),
        bmr_alternate=round_int(bmr_alternate),
        tdee=round_int(tdee_value),
        target_calories=target_calories,
        weekly_weight_change_lb=adjustment.weekly_weight_change_lb,
        ideal_weight=IdealWeightRange(
            min_kg=round_half_up(ideal_weight.min_kg, 1),
            max_kg=round_half_up(ideal_weight.max_kg, 1),
        ),
        water_intake_ml=water_ml,
        water_glasses=formulas.water_glasses(water_ml),
        safety_note=adjustment.safety_note,
    )
    return NutritionProfile(
        personal_info=info,
        metrics=metrics,
        macronutrients=_round_macros(macros),
        micronutrients=micronutrients,
        recommendations=dict(GENERAL_RECOMMENDATIONS),
    )


def _round_macros(macros: MacronutrientBreakdown) -> MacronutrientBreakdown:
    return MacronutrientBreakdown(
        carbs=MacroAmount(
            calories=round_int(macros.carbs.calories),
            grams=round_int(macros.carbs.grams),
            percentage=round_int(macros.carbs.percentage),
        ),
        protein=ProteinAmount(
            calories=round_int(macros.protein.calories),
            grams=round_int(macros.protein.grams),
            percentage=round_int(macros.protein.percentage),
            recommended_grams=round_int(macros.protein.recommended_grams),
        ),
        fat=FatAmount(
            calories=round_int(macros.fat.calories),
            grams=round_int(macros.fat.grams),
            percentage=round_int(macros.fat.percentage),
            saturated_fat_limit_g=round_int(macros.fat.saturated_fat_limit_g),
        ),
    )
