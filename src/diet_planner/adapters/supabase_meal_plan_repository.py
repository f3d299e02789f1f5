"""Supabase repository for meal plan snapshots."""

from dataclasses import dataclass

from supabase import Client

from diet_planner.services.meal_plans import MealPlanRepository


@dataclass
class SupabaseMealPlanRepository(MealPlanRepository):
    """Supabase-backed meal plan repository."""

    client: Client

    def save_meal_plan(self, session_id: str, snapshot: dict[str, object]) -> None:
        """Insert a meal plan snapshot row."""
        response = (
            self.client.table("meal_plans")
            .insert({"session_id": session_id, **snapshot})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save meal plan")
