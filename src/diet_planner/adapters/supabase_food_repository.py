"""Supabase implementation for the food catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from diet_planner.domain.foods import FoodItem
from diet_planner.services.catalog import FoodCatalogRepository


@dataclass
class SupabaseFoodRepository(FoodCatalogRepository):
    """Supabase-backed read-only food catalog."""

    client: Client

    def list_foods(
        self, search: str | None, category: str | None, limit: int, offset: int
    ) -> list[FoodItem]:
        """Return active foods matching name/category filters."""
        query = self.client.table("foods").select("*").eq("is_active", True)
        if search:
            query = query.ilike("name", f"%{search}%")
        if category:
            query = query.eq("category", category)
        response = query.order("name").range(offset, offset + limit - 1).execute()
        return [_parse_food(row) for row in response.data or []]

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food by id, if present."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def list_categories(self) -> list[str]:
        """Return the category of every active food."""
        response = (
            self.client.table("foods")
            .select("category")
            .eq("is_active", True)
            .execute()
        )
        return [str(row["category"]) for row in response.data or []]

    def count_foods(self) -> int:
        """Return the number of catalog rows."""
        response = self.client.table("foods").select("id", count="exact").execute()
        if response.count is not None:
            return int(response.count)
        return len(response.data or [])

    def insert_foods(self, payloads: list[dict[str, object]]) -> int:
        """Insert catalog rows and return how many were created."""
        response = self.client.table("foods").insert(payloads).execute()
        if not response.data:
            raise RuntimeError("Failed to insert foods")
        return len(response.data)


def _parse_food(row: dict[str, object]) -> FoodItem:
    """Parse a food row into a domain model."""
    return FoodItem(
        id=UUID(row["id"]),
        name=str(row.get("name", "")),
        category=str(row.get("category", "")),
        calories=float(row.get("calories") or 0.0),
        carbs_g=float(row.get("carbs_g") or 0.0),
        protein_g=float(row.get("protein_g") or 0.0),
        fat_g=float(row.get("fat_g") or 0.0),
        fiber_g=float(row.get("fiber_g") or 0.0),
        sodium_mg=float(row.get("sodium_mg") or 0.0),
        potassium_mg=float(row.get("potassium_mg") or 0.0),
        calcium_mg=float(row.get("calcium_mg") or 0.0),
        iron_mg=float(row.get("iron_mg") or 0.0),
        vitamin_c_mg=float(row.get("vitamin_c_mg") or 0.0),
        vitamin_a_ug=float(row.get("vitamin_a_ug") or 0.0),
        omega3_g=float(row.get("omega3_g") or 0.0),
        serving_size=str(row.get("serving_size") or "100g"),
        notes=row.get("notes"),
    )
