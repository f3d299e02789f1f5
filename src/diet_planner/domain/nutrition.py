"""Nutrition profile domain models."""

import math
from dataclasses import dataclass

from diet_planner.domain.enums import ActivityLevel, Gender, Goal

MIN_AGE = 10
MAX_AGE = 120


class InvalidPersonalInfoError(ValueError):
    """Raised when required biometric inputs are missing or out of range."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("; ".join(problems))


@dataclass(frozen=True)
class PersonalInfo:
    """Validated biometric inputs for a single calculation."""

    weight_kg: float
    height_cm: float
    age: float
    gender: Gender
    activity_level: ActivityLevel
    goal: Goal = Goal.MAINTAIN


@dataclass(frozen=True)
class MacroSplit:
    """Requested calorie share per macronutrient, in percent.

    The sum is not checked here; the rebalancer applies its own floor and
    ceiling and lets carbohydrates absorb the rest.
    """

    carb_percent: float = 50
    protein_percent: float = 20
    fat_percent: float = 30


@dataclass(frozen=True)
class BmiClassification:
    """WHO BMI category with its fixed risk text."""

    category: str
    color_tag: str
    health_risk: str
    recommendation: str


@dataclass(frozen=True)
class IdealWeightRange:
    """Weight range for a healthy BMI at a given height."""

    min_kg: float
    max_kg: float


@dataclass(frozen=True)
class CalorieAdjustment:
    """Goal-based daily calorie target."""

    target_calories: float
    weekly_weight_change_lb: float
    safety_note: str | None


@dataclass(frozen=True)
class MacroAmount:
    """Calories, grams and share of one macronutrient."""

    calories: float
    grams: float
    percentage: float


@dataclass(frozen=True)
class ProteinAmount(MacroAmount):
    """Protein amount with the body-weight based minimum."""

    recommended_grams: float


@dataclass(frozen=True)
class FatAmount(MacroAmount):
    """Fat amount with the saturated fat limit."""

    saturated_fat_limit_g: float


@dataclass(frozen=True)
class MacronutrientBreakdown:
    """Per-macro breakdown of a daily calorie target."""

    carbs: MacroAmount
    protein: ProteinAmount
    fat: FatAmount


@dataclass(frozen=True)
class SodiumTarget:
    """Daily sodium ceiling and its table salt equivalent."""

    sodium_mg: int
    salt_g: int


@dataclass(frozen=True)
class MicronutrientTargets:
    """Daily fiber, sodium, vitamin and mineral targets."""

    fiber_g: int
    sodium: SodiumTarget
    vitamin_c_mg: int
    vitamin_d_ug: int
    calcium_mg: int
    iron_mg: int
    potassium_mg: int


@dataclass(frozen=True)
class Metrics:
    """Body metrics and energy figures."""

    bmi: float
    bmi_classification: BmiClassification
    bmr: int
    bmr_alternate: int
    tdee: int
    target_calories: int
    weekly_weight_change_lb: float
    ideal_weight: IdealWeightRange
    water_intake_ml: int
    water_glasses: int
    safety_note: str | None


@dataclass(frozen=True)
class NutritionProfile:
    """Complete result of a nutrition calculation."""

    personal_info: PersonalInfo
    metrics: Metrics
    macronutrients: MacronutrientBreakdown
    micronutrients: MicronutrientTargets
    recommendations: dict[str, str]


def parse_personal_info(  # noqa: PLR0913
    weight: object,
    height: object,
    age: object,
    gender: object,
    activity_level: object,
    goal: object = None,
) -> PersonalInfo:
    """Validate raw inputs and return a PersonalInfo.

    Missing or out-of-range weight, height, age, gender or activity level
    raise InvalidPersonalInfoError. Gender, activity level and goal values
    that are present but unrecognized fall back to their defaults.
    """
    problems: list[str] = []
    missing = [
        name
        for name, value in (
            ("weight", weight),
            ("height", height),
            ("age", age),
            ("gender", gender),
            ("activityLevel", activity_level),
        )
        if value is None or value == ""
    ]
    if missing:
        problems.append(f"Missing required fields: {', '.join(missing)}")

    weight_kg = _as_number(weight, "weight", problems)
    height_cm = _as_number(height, "height", problems)
    age_years = _as_number(age, "age", problems)
    if weight_kg is not None and weight_kg <= 0:
        problems.append("weight must be greater than 0")
    if height_cm is not None and height_cm <= 0:
        problems.append("height must be greater than 0")
    if age_years is not None and not MIN_AGE <= age_years <= MAX_AGE:
        problems.append(f"age must be between {MIN_AGE} and {MAX_AGE}")
    if problems:
        raise InvalidPersonalInfoError(problems)

    return PersonalInfo(
        weight_kg=weight_kg,
        height_cm=height_cm,
        age=age_years,
        gender=Gender.parse(gender),
        activity_level=ActivityLevel.parse(activity_level),
        goal=Goal.parse(goal),
    )


def _as_number(value: object, name: str, problems: list[str]) -> float | None:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        problems.append(f"{name} must be a number")
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        problems.append(f"{name} must be a number")
        return None
    if not math.isfinite(number):
        problems.append(f"{name} must be a finite number")
        return None
    return number
