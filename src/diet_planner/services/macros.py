"""Macronutrient split with a protein floor and a fat ceiling."""

from diet_planner.domain.nutrition import (
    FatAmount,
    MacroAmount,
    MacronutrientBreakdown,
    MacroSplit,
    ProteinAmount,
)

CALORIES_PER_GRAM = {"carbs": 4, "protein": 4, "fat": 9}
PROTEIN_GRAMS_PER_KG = 0.8
MIN_PROTEIN_PERCENT = 15
MAX_FAT_PERCENT = 30
SATURATED_FAT_SHARE = 0.10
DEFAULT_WEIGHT_KG = 70


def rebalance_macros(
    target_calories: float,
    split: MacroSplit | None = None,
    weight_kg: float | None = None,
) -> MacronutrientBreakdown:
    """Split a calorie target into carbs, protein and fat.

    Steps:
    1. Minimum protein is 0.8 g per kg of body weight.
    2. Protein share is raised to at least max(15%, that minimum). A
       target of 0 kcal or less only applies the 15% floor.
    3. Fat share is capped at 30%.
    4. Carbohydrates take whatever share is left. This is not clamped and
       goes negative when the protein floor and fat share exceed 100%.
    5. Grams use 4/4/9 kcal per gram; saturated fat is limited to 10% of
       calories.

    Values are returned unrounded.
    """
    requested = split or MacroSplit()
    weight = weight_kg if weight_kg else DEFAULT_WEIGHT_KG

    recommended_protein_g = weight * PROTEIN_GRAMS_PER_KG
    recommended_protein_kcal = recommended_protein_g * CALORIES_PER_GRAM["protein"]
    if target_calories > 0:
        min_protein_percent = max(
            MIN_PROTEIN_PERCENT, recommended_protein_kcal / target_calories * 100
        )
    else:
        min_protein_percent = MIN_PROTEIN_PERCENT
    protein_percent = max(requested.protein_percent, min_protein_percent)
    fat_percent = min(requested.fat_percent, MAX_FAT_PERCENT)
    carb_percent = 100 - protein_percent - fat_percent

    carb_kcal = target_calories * carb_percent / 100
    protein_kcal = target_calories * protein_percent / 100
    fat_kcal = target_calories * fat_percent / 100

    return MacronutrientBreakdown(
        carbs=MacroAmount(
            calories=carb_kcal,
            grams=carb_kcal / CALORIES_PER_GRAM["carbs"],
            percentage=carb_percent,
        ),
        protein=ProteinAmount(
            calories=protein_kcal,
            grams=protein_kcal / CALORIES_PER_GRAM["protein"],
            percentage=protein_percent,
            recommended_grams=recommended_protein_g,
        ),
        fat=FatAmount(
            calories=fat_kcal,
            grams=fat_kcal / CALORIES_PER_GRAM["fat"],
            percentage=fat_percent,
            saturated_fat_limit_g=(
                target_calories * SATURATED_FAT_SHARE / CALORIES_PER_GRAM["fat"]
            ),
        ),
    )
