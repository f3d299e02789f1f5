"""Pydantic models for API request payloads."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CalculationRequest(BaseModel):
    """Biometric inputs for a nutrition calculation.

    Required fields are optional here so that missing values are reported
    by the domain validation with a single error message.
    """

    model_config = ConfigDict(populate_by_name=True)

    weight: float | None = None
    height: float | None = None
    age: float | None = None
    gender: str | None = None
    activity_level: str | None = Field(default=None, alias="activityLevel")
    goal: str | None = None
    carb_percent: float | None = Field(default=None, alias="carbPercent")
    protein_percent: float | None = Field(default=None, alias="proteinPercent")
    fat_percent: float | None = Field(default=None, alias="fatPercent")
    climate: str | None = None


class MealEntryPayload(BaseModel):
    """A food entry of a meal slot, as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    food_id: UUID = Field(alias="foodId")
    name: str
    serving_size: float = Field(alias="servingSize")
    total_calories: int = Field(alias="totalCalories")
    total_carbs: float = Field(alias="totalCarbs")
    total_protein: float = Field(alias="totalProtein")
    total_fat: float = Field(alias="totalFat")
    total_fiber: float = Field(default=0.0, alias="totalFiber")


class MealSlotPayload(BaseModel):
    """One meal slot of a plan."""

    meal: str
    foods: list[MealEntryPayload] = Field(default_factory=list)


class MealPlanPayload(BaseModel):
    """A daily meal plan sent back by the client for modification."""

    model_config = ConfigDict(populate_by_name=True)

    target_calories: float = Field(alias="targetCalories", gt=0)
    meal_plan: list[MealSlotPayload] = Field(
        default_factory=list, alias="mealPlan"
    )


class CreateMealPlanRequest(BaseModel):
    """Request to start a meal plan."""

    model_config = ConfigDict(populate_by_name=True)

    target_calories: float = Field(alias="targetCalories", gt=0)


class AddFoodRequest(BaseModel):
    """Request to add a catalog food to a meal slot."""

    model_config = ConfigDict(populate_by_name=True)

    plan: MealPlanPayload
    meal: str
    food_id: UUID = Field(alias="foodId")
    serving_size: float = Field(default=1.0, alias="servingSize")


class RemoveFoodRequest(BaseModel):
    """Request to remove an entry from a meal slot."""

    model_config = ConfigDict(populate_by_name=True)

    plan: MealPlanPayload
    meal: str
    entry_id: UUID = Field(alias="entryId")
