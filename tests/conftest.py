"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from diet_planner.config import Settings
from diet_planner.containers import AppContainer
from diet_planner.domain.enums import ActivityLevel, Gender, Goal
from diet_planner.domain.foods import FoodItem
from diet_planner.domain.history import CalculationRecord
from diet_planner.domain.nutrition import PersonalInfo
from diet_planner.services.calculations import (
    CALCULATION_METHOD,
    CalculationRepository,
    CalculationService,
)
from diet_planner.services.catalog import FoodCatalogRepository, FoodCatalogService
from diet_planner.services.meal_plans import MealPlanRepository, MealPlanService


@dataclass
class InMemoryCalculationRepository(CalculationRepository):
    """In-memory calculation history for tests."""

    records: list[CalculationRecord] = field(default_factory=list)

    def save_calculation(
        self,
        session_id: str,
        personal_info: dict[str, object],
        results: dict[str, object],
    ) -> None:
        self.records.append(
            CalculationRecord(
                id=uuid4(),
                session_id=session_id,
                personal_info=personal_info,
                results=results,
                calculation_method=CALCULATION_METHOD,
                created_at=datetime.now(tz=UTC),
            )
        )

    def list_calculations(
        self, session_id: str, limit: int
    ) -> list[CalculationRecord]:
        matching = [r for r in self.records if r.session_id == session_id]
        return list(reversed(matching))[:limit]


@dataclass
class FailingCalculationRepository(CalculationRepository):
    """Calculation repository whose writes always fail."""

    attempts: int = 0

    def save_calculation(
        self,
        session_id: str,
        personal_info: dict[str, object],
        results: dict[str, object],
    ) -> None:
        self.attempts += 1
        raise RuntimeError("database unavailable")

    def list_calculations(
        self, session_id: str, limit: int
    ) -> list[CalculationRecord]:
        return []


@dataclass
class InMemoryMealPlanRepository(MealPlanRepository):
    """In-memory meal plan snapshots for tests."""

    snapshots: list[tuple[str, dict[str, object]]] = field(default_factory=list)
    fail: bool = False

    def save_meal_plan(self, session_id: str, snapshot: dict[str, object]) -> None:
        if self.fail:
            raise RuntimeError("database unavailable")
        self.snapshots.append((session_id, snapshot))


@dataclass
class InMemoryFoodRepository(FoodCatalogRepository):
    """In-memory food catalog for tests."""

    foods: dict[UUID, FoodItem] = field(default_factory=dict)
    inserted: list[dict[str, object]] = field(default_factory=list)

    def list_foods(
        self, search: str | None, category: str | None, limit: int, offset: int
    ) -> list[FoodItem]:
        results = sorted(self.foods.values(), key=lambda food: food.name)
        if search:
            results = [f for f in results if search.lower() in f.name.lower()]
        if category:
            results = [f for f in results if f.category == category]
        return results[offset : offset + limit]

    def get_food(self, food_id: UUID) -> FoodItem | None:
        return self.foods.get(food_id)

    def list_categories(self) -> list[str]:
        return [food.category for food in self.foods.values()]

    def count_foods(self) -> int:
        return len(self.foods)

    def insert_foods(self, payloads: list[dict[str, object]]) -> int:
        for payload in payloads:
            self.inserted.append(payload)
            values = {k: v for k, v in payload.items() if k != "is_active"}
            food = make_food(**values)
            self.foods[food.id] = food
        return len(payloads)

    def add(self, food: FoodItem) -> FoodItem:
        self.foods[food.id] = food
        return food


def make_food(**overrides: object) -> FoodItem:
    """Build a food item with sensible defaults."""
    values: dict[str, object] = {
        "id": uuid4(),
        "name": "Test Food",
        "category": "Whole Grains",
        "calories": 100,
        "carbs_g": 10,
        "protein_g": 5,
        "fat_g": 2,
        "fiber_g": 1,
    }
    values.update(overrides)
    return FoodItem(**values)


def make_person(**overrides: object) -> PersonalInfo:
    """Build personal info for a 30 year old sedentary 70 kg man."""
    values: dict[str, object] = {
        "weight_kg": 70.0,
        "height_cm": 175.0,
        "age": 30,
        "gender": Gender.MALE,
        "activity_level": ActivityLevel.SEDENTARY,
        "goal": Goal.MAINTAIN,
    }
    values.update(overrides)
    return PersonalInfo(**values)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def calculation_repository() -> InMemoryCalculationRepository:
    return InMemoryCalculationRepository()


@pytest.fixture
def meal_plan_repository() -> InMemoryMealPlanRepository:
    return InMemoryMealPlanRepository()


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def container(
    settings: Settings,
    calculation_repository: InMemoryCalculationRepository,
    meal_plan_repository: InMemoryMealPlanRepository,
    food_repository: InMemoryFoodRepository,
) -> AppContainer:
    catalog_service = FoodCatalogService(food_repository)
    return AppContainer(
        settings=settings,
        calculation_service=CalculationService(calculation_repository),
        catalog_service=catalog_service,
        meal_plan_service=MealPlanService(
            repository=meal_plan_repository, catalog=catalog_service
        ),
    )


@pytest.fixture(autouse=True)
def _reset_app_logger() -> Iterator[None]:
    logger = logging.getLogger("diet_planner")
    yield
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
