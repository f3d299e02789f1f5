"""Read-only food catalog service."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from diet_planner.domain.foods import FoodItem

MAX_PAGE_SIZE = 200

_logger = logging.getLogger(__name__)


class FoodCatalogRepository(Protocol):
    """Persistence interface for the food catalog."""

    def list_foods(
        self, search: str | None, category: str | None, limit: int, offset: int
    ) -> list[FoodItem]:
        """Return active foods matching the filters, ordered by name."""

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food by id, if present."""

    def list_categories(self) -> list[str]:
        """Return the categories of active foods."""

    def count_foods(self) -> int:
        """Return the number of foods in the catalog."""

    def insert_foods(self, payloads: list[dict[str, object]]) -> int:
        """Insert foods and return how many were stored."""


@dataclass
class FoodCatalogService:
    """Application service for browsing the food catalog."""

    repository: FoodCatalogRepository
    default_limit: int = 50

    def list_foods(
        self,
        search: str | None = None,
        category: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[FoodItem]:
        """Search the catalog by text and category."""
        page_size = min(max(limit or self.default_limit, 1), MAX_PAGE_SIZE)
        term = search.strip() if search else None
        return self.repository.list_foods(
            term or None, category or None, page_size, max(offset, 0)
        )

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a single food."""
        return self.repository.get_food(food_id)

    def list_categories(self) -> list[str]:
        """Return distinct categories in alphabetical order."""
        return sorted(set(self.repository.list_categories()))

    def seed_if_empty(self) -> int:
        """Insert the starter foods when the catalog has none."""
        existing = self.repository.count_foods()
        if existing:
            _logger.info("Food catalog already contains %s items", existing)
            return 0
        inserted = self.repository.insert_foods(
            [{**food, "is_active": True} for food in STARTER_FOODS]
        )
        _logger.info("Seeded food catalog with %s items", inserted)
        return inserted


STARTER_FOODS: tuple[dict[str, object], ...] = (
    {
        "name": "Brown Rice (cooked)",
        "category": "Whole Grains",
        "calories": 111,
        "carbs_g": 23,
        "protein_g": 2.6,
        "fat_g": 0.9,
        "fiber_g": 1.8,
        "sodium_mg": 5,
        "potassium_mg": 43,
        "calcium_mg": 10,
        "iron_mg": 0.4,
        "notes": "Good source of complex carbohydrates and fiber",
    },
    {
        "name": "Chicken Breast (skinless, cooked)",
        "category": "Lean Protein",
        "calories": 165,
        "carbs_g": 0,
        "protein_g": 31,
        "fat_g": 3.6,
        "fiber_g": 0,
        "sodium_mg": 74,
        "potassium_mg": 256,
        "calcium_mg": 15,
        "iron_mg": 1.0,
        "notes": "Excellent source of complete protein",
    },
    {
        "name": "Broccoli (cooked)",
        "category": "Vegetables",
        "calories": 35,
        "carbs_g": 7,
        "protein_g": 2.4,
        "fat_g": 0.4,
        "fiber_g": 3.3,
        "sodium_mg": 41,
        "potassium_mg": 293,
        "calcium_mg": 40,
        "iron_mg": 0.7,
        "vitamin_c_mg": 65,
        "notes": "High in vitamin C, fiber, and antioxidants",
    },
    {
        "name": "Sweet Potato (baked)",
        "category": "Starchy Vegetables",
        "calories": 90,
        "carbs_g": 21,
        "protein_g": 2,
        "fat_g": 0.1,
        "fiber_g": 3.3,
        "sodium_mg": 6,
        "potassium_mg": 475,
        "calcium_mg": 38,
        "iron_mg": 0.7,
        "vitamin_a_ug": 961,
        "notes": "Rich in beta-carotene and potassium",
    },
    {
        "name": "Salmon (Atlantic, cooked)",
        "category": "Fatty Fish",
        "calories": 206,
        "carbs_g": 0,
        "protein_g": 22,
        "fat_g": 12,
        "fiber_g": 0,
        "sodium_mg": 59,
        "potassium_mg": 363,
        "calcium_mg": 13,
        "iron_mg": 0.8,
        "omega3_g": 1.8,
        "notes": "Excellent source of omega-3 fatty acids",
    },
    {
        "name": "Quinoa (cooked)",
        "category": "Whole Grains",
        "calories": 120,
        "carbs_g": 22,
        "protein_g": 4.4,
        "fat_g": 1.9,
        "fiber_g": 2.8,
        "sodium_mg": 7,
        "potassium_mg": 172,
        "calcium_mg": 17,
        "iron_mg": 1.5,
        "notes": "Complete protein grain, gluten-free",
    },
    {
        "name": "Greek Yogurt (plain, non-fat)",
        "category": "Dairy",
        "calories": 59,
        "carbs_g": 3.6,
        "protein_g": 10,
        "fat_g": 0.4,
        "fiber_g": 0,
        "sodium_mg": 36,
        "potassium_mg": 141,
        "calcium_mg": 110,
        "iron_mg": 0.1,
        "notes": "High protein, probiotic benefits",
    },
    {
        "name": "Avocado",
        "category": "Healthy Fats",
        "calories": 160,
        "carbs_g": 9,
        "protein_g": 2,
        "fat_g": 15,
        "fiber_g": 7,
        "sodium_mg": 7,
        "potassium_mg": 485,
        "calcium_mg": 12,
        "iron_mg": 0.6,
        "vitamin_c_mg": 10,
        "notes": "Rich in monounsaturated fats and fiber",
    },
    {
        "name": "Spinach (fresh)",
        "category": "Leafy Greens",
        "calories": 23,
        "carbs_g": 3.6,
        "protein_g": 2.9,
        "fat_g": 0.4,
        "fiber_g": 2.2,
        "sodium_mg": 79,
        "potassium_mg": 558,
        "calcium_mg": 99,
        "iron_mg": 2.7,
        "vitamin_c_mg": 28,
        "vitamin_a_ug": 469,
        "notes": "High in iron, folate, and antioxidants",
    },
    {
        "name": "Lentils (cooked)",
        "category": "Legumes",
        "calories": 116,
        "carbs_g": 20,
        "protein_g": 9,
        "fat_g": 0.4,
        "fiber_g": 7.9,
        "sodium_mg": 238,
        "potassium_mg": 369,
        "calcium_mg": 19,
        "iron_mg": 3.3,
        "notes": "High protein legume, excellent fiber source",
    },
    {
        "name": "Apple (medium)",
        "category": "Fruits",
        "calories": 52,
        "carbs_g": 14,
        "protein_g": 0.3,
        "fat_g": 0.2,
        "fiber_g": 2.4,
        "sodium_mg": 1,
        "potassium_mg": 107,
        "calcium_mg": 6,
        "iron_mg": 0.1,
        "vitamin_c_mg": 5,
        "notes": "Good source of fiber and natural sugars",
    },
    {
        "name": "Almonds (raw)",
        "category": "Healthy Fats",
        "calories": 579,
        "carbs_g": 22,
        "protein_g": 21,
        "fat_g": 50,
        "fiber_g": 12,
        "sodium_mg": 1,
        "potassium_mg": 733,
        "calcium_mg": 269,
        "iron_mg": 3.7,
        "vitamin_c_mg": 0,
        "notes": "High in healthy fats, protein, and vitamin E",
    },
)
