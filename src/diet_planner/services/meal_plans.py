"""Daily meal plan aggregation.

Plans are immutable: adding or removing a food returns a new plan. Totals
are always summed from the entries, never stored.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID, uuid4

from diet_planner.domain.enums import MealSlot
from diet_planner.domain.foods import FoodItem
from diet_planner.domain.meal_plans import MealEntry, MealPlan, MealSlotPlan, MealTotals
from diet_planner.services.catalog import FoodCatalogService
from diet_planner.services.rounding import round_half_up, round_int

NUTRITION_TIPS = (
    "Include vegetables with every meal",
    "Choose whole grains over refined grains",
    "Include lean protein at each meal",
    "Stay hydrated throughout the day",
    "Limit processed foods and added sugars",
)

_logger = logging.getLogger(__name__)


class MealPlanRepository(Protocol):
    """Persistence interface for meal plan snapshots."""

    def save_meal_plan(self, session_id: str, snapshot: dict[str, object]) -> None:
        """Store a snapshot of a session's meal plan."""


def create_meal_plan(target_calories: float) -> MealPlan:
    """Return an empty plan with per-slot calorie targets."""
    return MealPlan(
        target_calories=round_int(target_calories),
        slots=tuple(
            MealSlotPlan(
                slot=slot,
                target_calories=round_int(target_calories * slot.calorie_share),
            )
            for slot in MealSlot
        ),
    )


def build_entry(
    food: FoodItem, serving_multiplier: float, entry_id: UUID | None = None
) -> MealEntry:
    """Scale a food's nutrients by the number of servings."""
    if serving_multiplier <= 0:
        raise ValueError("serving_multiplier must be greater than 0")
    return MealEntry(
        id=entry_id or uuid4(),
        food_id=food.id,
        food_name=food.name,
        serving_multiplier=serving_multiplier,
        calories=round_int(food.calories * serving_multiplier),
        carbs_g=round_half_up(food.carbs_g * serving_multiplier, 1),
        protein_g=round_half_up(food.protein_g * serving_multiplier, 1),
        fat_g=round_half_up(food.fat_g * serving_multiplier, 1),
        fiber_g=round_half_up(food.fiber_g * serving_multiplier, 1),
    )


def add_food(
    plan: MealPlan, slot: MealSlot, food: FoodItem, serving_multiplier: float
) -> MealPlan:
    """Return a plan with the food appended to the slot."""
    entry = build_entry(food, serving_multiplier)
    return _replace_slot(
        plan, slot, lambda current: replace(current, entries=(*current.entries, entry))
    )


def remove_food(plan: MealPlan, slot: MealSlot, entry_id: UUID) -> MealPlan:
    """Return a plan without the entry; unknown ids leave the plan unchanged."""
    return _replace_slot(
        plan,
        slot,
        lambda current: replace(
            current,
            entries=tuple(entry for entry in current.entries if entry.id != entry_id),
        ),
    )


def slot_totals(slot_plan: MealSlotPlan) -> MealTotals:
    """Sum the entries of one slot."""
    return _sum_entries(slot_plan.entries)


def daily_totals(plan: MealPlan) -> MealTotals:
    """Sum every entry of the plan."""
    return _sum_entries(
        [entry for slot_plan in plan.slots for entry in slot_plan.entries]
    )


def slot_progress(slot_plan: MealSlotPlan) -> float:
    """Percent of the slot's calorie target already planned."""
    if slot_plan.target_calories <= 0:
        return 0.0
    return slot_totals(slot_plan).calories / slot_plan.target_calories * 100


def meal_plan_snapshot(plan: MealPlan) -> dict[str, object]:
    """Serialize a plan for storage."""
    totals = daily_totals(plan)
    return {
        "target_calories": plan.target_calories,
        "meals": {
            slot_plan.slot.key: [
                {
                    "entry_id": str(entry.id),
                    "food_id": str(entry.food_id),
                    "serving_size": entry.serving_multiplier,
                    "calories": entry.calories,
                }
                for entry in slot_plan.entries
            ]
            for slot_plan in plan.slots
        },
        "total_calories": totals.calories,
        "total_macros": {
            "carbs": totals.carbs_g,
            "protein": totals.protein_g,
            "fat": totals.fat_g,
            "fiber": totals.fiber_g,
        },
    }


@dataclass
class MealPlanService:
    """Application service for building a session's meal plan."""

    repository: MealPlanRepository
    catalog: FoodCatalogService

    def create(self, session_id: str, target_calories: float) -> MealPlan:
        """Start a new plan for a calorie target."""
        plan = create_meal_plan(target_calories)
        self._save(session_id, plan)
        return plan

    def add_food(  # noqa: PLR0913
        self,
        session_id: str,
        plan: MealPlan,
        slot: MealSlot,
        food_id: UUID,
        serving_multiplier: float,
    ) -> MealPlan:
        """Add a catalog food to a slot."""
        food = self.catalog.get_food(food_id)
        if food is None:
            raise LookupError(f"Food {food_id} not found")
        updated = add_food(plan, slot, food, serving_multiplier)
        self._save(session_id, updated)
        return updated

    def remove_food(
        self, session_id: str, plan: MealPlan, slot: MealSlot, entry_id: UUID
    ) -> MealPlan:
        """Remove an entry from a slot."""
        updated = remove_food(plan, slot, entry_id)
        self._save(session_id, updated)
        return updated

    def _save(self, session_id: str, plan: MealPlan) -> None:
        try:
            self.repository.save_meal_plan(session_id, meal_plan_snapshot(plan))
        except Exception:
            _logger.exception("Failed to save meal plan for session %s", session_id)


def _replace_slot(
    plan: MealPlan, slot: MealSlot, update: Callable[[MealSlotPlan], MealSlotPlan]
) -> MealPlan:
    return replace(
        plan,
        slots=tuple(
            update(slot_plan) if slot_plan.slot is slot else slot_plan
            for slot_plan in plan.slots
        ),
    )


def _sum_entries(entries: list[MealEntry] | tuple[MealEntry, ...]) -> MealTotals:
    return MealTotals(
        calories=sum(entry.calories for entry in entries),
        carbs_g=round_half_up(sum(entry.carbs_g for entry in entries), 1),
        protein_g=round_half_up(sum(entry.protein_g for entry in entries), 1),
        fat_g=round_half_up(sum(entry.fat_g for entry in entries), 1),
        fiber_g=round_half_up(sum(entry.fiber_g for entry in entries), 1),
    )
