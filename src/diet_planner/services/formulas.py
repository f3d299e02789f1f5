"""Nutrition formulas.

Pure functions over scalar inputs. Nothing here rounds except
`water_intake_ml` and `water_glasses`; the profile assembler rounds for
presentation.

References:
- Mifflin MD, St Jeor ST, et al. (1990) for BMR.
- Roza AM, Shizgal HM (1984), revised Harris-Benedict equation.
- WHO BMI classification and sodium guideline.
- Institute of Medicine dietary reference intakes for fiber and RDAs.
"""

from diet_planner.domain.enums import ActivityLevel, Climate, Gender
from diet_planner.domain.nutrition import (
    BmiClassification,
    IdealWeightRange,
    MicronutrientTargets,
    SodiumTarget,
)
from diet_planner.services.rounding import round_int

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.SUPER_ACTIVE: 1.9,
}

WATER_ACTIVITY_BONUS_ML: dict[ActivityLevel, int] = {
    ActivityLevel.SEDENTARY: 0,
    ActivityLevel.LIGHTLY_ACTIVE: 300,
    ActivityLevel.MODERATELY_ACTIVE: 500,
    ActivityLevel.VERY_ACTIVE: 750,
    ActivityLevel.SUPER_ACTIVE: 1000,
}

CLIMATE_MULTIPLIERS: dict[Climate, float] = {
    Climate.COLD: 0.9,
    Climate.TEMPERATE: 1.0,
    Climate.HOT: 1.3,
    Climate.TROPICAL: 1.5,
}

HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 24.9
WATER_GLASS_ML = 250

# (exclusive upper bound, classification); the last row has no bound.
BMI_CLASSIFICATIONS: tuple[tuple[float | None, BmiClassification], ...] = (
    (
        16,
        BmiClassification(
            category="Severely Underweight",
            color_tag="red",
            health_risk="High risk of malnutrition",
            recommendation="Consult healthcare provider immediately",
        ),
    ),
    (
        18.5,
        BmiClassification(
            category="Underweight",
            color_tag="blue",
            health_risk="Possible nutritional deficiency",
            recommendation="Consider consulting a nutritionist",
        ),
    ),
    (
        25,
        BmiClassification(
            category="Normal weight",
            color_tag="green",
            health_risk="Low risk",
            recommendation="Maintain current weight with balanced diet",
        ),
    ),
    (
        30,
        BmiClassification(
            category="Overweight",
            color_tag="yellow",
            health_risk="Increased risk of health problems",
            recommendation="Consider modest weight reduction",
        ),
    ),
    (
        35,
        BmiClassification(
            category="Obesity Class I",
            color_tag="orange",
            health_risk="Moderate risk of health problems",
            recommendation="Weight reduction recommended",
        ),
    ),
    (
        40,
        BmiClassification(
            category="Obesity Class II",
            color_tag="red",
            health_risk="High risk of health problems",
            recommendation="Medical supervision for weight loss advised",
        ),
    ),
    (
        None,
        BmiClassification(
            category="Obesity Class III",
            color_tag="red",
            health_risk="Very high risk of health problems",
            recommendation="Immediate medical intervention recommended",
        ),
    ),
)


def bmi(weight_kg: float, height_cm: float) -> float:
    """Body Mass Index: weight(kg) / height(m)^2."""
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def bmr(weight_kg: float, height_cm: float, age: float, gender: Gender) -> float:
    """Basal Metabolic Rate using the Mifflin-St Jeor equation.

    Male:   BMR = 10 x weight(kg) + 6.25 x height(cm) - 5 x age(y) + 5
    Female: BMR = 10 x weight(kg) + 6.25 x height(cm) - 5 x age(y) - 161
    """
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if gender is Gender.MALE:
        return base + 5
    return base - 161


def bmr_alternate(
    weight_kg: float, height_cm: float, age: float, gender: Gender
) -> float:
    """BMR using the revised Harris-Benedict equation, for comparison only."""
    if gender is Gender.MALE:
        return 13.397 * weight_kg + 4.799 * height_cm - 5.677 * age + 88.362
    return 9.247 * weight_kg + 3.098 * height_cm - 4.330 * age + 447.593


def tdee(bmr_value: float, activity_level: ActivityLevel) -> float:
    """Total Daily Energy Expenditure: BMR x activity multiplier."""
    return bmr_value * ACTIVITY_MULTIPLIERS.get(activity_level, 1.2)


def ideal_weight_range(height_cm: float) -> IdealWeightRange:
    """Weight range giving a BMI between 18.5 and 24.9."""
    height_m = height_cm / 100
    squared = height_m * height_m
    return IdealWeightRange(
        min_kg=HEALTHY_BMI_MIN * squared,
        max_kg=HEALTHY_BMI_MAX * squared,
    )


def water_intake_ml(  # noqa: PLR0913
    weight_kg: float,
    activity_level: ActivityLevel,
    age: float,
    gender: Gender,
    climate: Climate = Climate.TEMPERATE,
) -> int:
    """Daily water intake in millilitres.

    Starts from 35 ml/kg (37 under 30, 30 over 65), adds 10% for men and
    a fixed bonus per activity level, then scales by climate.
    """
    if age > 65:
        base_ml = weight_kg * 30
    elif age < 30:
        base_ml = weight_kg * 37
    else:
        base_ml = weight_kg * 35
    if gender is Gender.MALE:
        base_ml *= 1.1
    total = (base_ml + WATER_ACTIVITY_BONUS_ML.get(activity_level, 0)) * (
        CLIMATE_MULTIPLIERS.get(climate, 1.0)
    )
    return round_int(total)


def water_glasses(water_ml: float) -> int:
    """Number of 250 ml glasses for a water amount."""
    return round_int(water_ml / WATER_GLASS_ML)


def bmi_classification(bmi_value: float) -> BmiClassification:
    """Return the first BMI tier whose upper bound exceeds the value."""
    for upper_bound, classification in BMI_CLASSIFICATIONS:
        if upper_bound is None or bmi_value < upper_bound:
            return classification
    return BMI_CLASSIFICATIONS[-1][1]


def fiber_target(age: float, gender: Gender) -> int:
    """Daily fiber in grams."""
    if gender is Gender.MALE:
        return 38 if age <= 50 else 30
    return 25 if age <= 50 else 21


def sodium_target() -> SodiumTarget:
    """WHO sodium ceiling: 2 g sodium, about 5 g salt."""
    return SodiumTarget(sodium_mg=2000, salt_g=5)


def micronutrient_targets(age: float, gender: Gender) -> MicronutrientTargets:
    """Daily RDAs keyed by age and gender bands."""
    is_male = gender is Gender.MALE
    if is_male:
        iron = 8
    else:
        iron = 18 if age <= 50 else 8
    return MicronutrientTargets(
        fiber_g=fiber_target(age, gender),
        sodium=sodium_target(),
        vitamin_c_mg=90 if is_male else 75,
        vitamin_d_ug=20 if age > 70 else 15,
        calcium_mg=1200 if age > 50 else 1000,
        iron_mg=iron,
        potassium_mg=3500,
    )
