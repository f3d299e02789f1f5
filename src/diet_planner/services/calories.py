"""Goal-based calorie target policy."""

from diet_planner.domain.enums import Goal
from diet_planner.domain.nutrition import CalorieAdjustment

OVERWEIGHT_BMI = 25
OBESE_BMI = 30
UNDERWEIGHT_BMI = 18.5
MINIMUM_TDEE_SHARE = 0.8
SAFETY_NOTE = "Consult healthcare provider before significant calorie restriction"


def adjust_calories(tdee: float, goal: Goal, current_bmi: float) -> CalorieAdjustment:
    """Return the daily calorie target for a goal.

    Losing weight takes a deficit tiered by BMI (750/500/250 kcal), never
    going below 80% of TDEE. Gaining adds 500 kcal when underweight and
    300 kcal otherwise, with no clamp. Weight change is an estimate in lb
    per week.
    """
    if goal is Goal.LOSE:
        if current_bmi > OBESE_BMI:
            deficit, weekly_change = 750, -1.5
        elif current_bmi > OVERWEIGHT_BMI:
            deficit, weekly_change = 500, -1.0
        else:
            deficit, weekly_change = 250, -0.5
        target = max(tdee - deficit, tdee * MINIMUM_TDEE_SHARE)
        note = SAFETY_NOTE if current_bmi <= OVERWEIGHT_BMI else None
        return CalorieAdjustment(
            target_calories=target,
            weekly_weight_change_lb=weekly_change,
            safety_note=note,
        )

    if goal is Goal.GAIN:
        if current_bmi < UNDERWEIGHT_BMI:
            surplus, weekly_change = 500, 1.0
        else:
            surplus, weekly_change = 300, 0.6
        return CalorieAdjustment(
            target_calories=tdee + surplus,
            weekly_weight_change_lb=weekly_change,
            safety_note=None,
        )

    return CalorieAdjustment(
        target_calories=tdee, weekly_weight_change_lb=0.0, safety_note=None
    )
