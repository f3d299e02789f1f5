"""Domain models for daily meal plans."""

from dataclasses import dataclass
from uuid import UUID

from diet_planner.domain.enums import MealSlot


@dataclass(frozen=True)
class MealEntry:
    """A food added to a meal slot, with totals for its serving."""

    id: UUID
    food_id: UUID
    food_name: str
    serving_multiplier: float
    calories: int
    carbs_g: float
    protein_g: float
    fat_g: float
    fiber_g: float


@dataclass(frozen=True)
class MealTotals:
    """Summed nutrients of a slot or a whole day."""

    calories: float
    carbs_g: float
    protein_g: float
    fat_g: float
    fiber_g: float


@dataclass(frozen=True)
class MealSlotPlan:
    """Entries and calorie target of one meal slot."""

    slot: MealSlot
    target_calories: int
    entries: tuple[MealEntry, ...] = ()


@dataclass(frozen=True)
class MealPlan:
    """Daily plan with the four fixed meal slots."""

    target_calories: int
    slots: tuple[MealSlotPlan, ...]

    def slot(self, slot: MealSlot) -> MealSlotPlan:
        """Return the plan for a slot."""
        for slot_plan in self.slots:
            if slot_plan.slot is slot:
                return slot_plan
        raise KeyError(slot.key)
