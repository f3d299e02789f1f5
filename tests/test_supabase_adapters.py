"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from uuid import uuid4

import pytest

from diet_planner.adapters.supabase_calculation_repository import (
    SupabaseCalculationRepository,
)
from diet_planner.adapters.supabase_food_repository import SupabaseFoodRepository
from diet_planner.adapters.supabase_meal_plan_repository import (
    SupabaseMealPlanRepository,
)


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None
    count: int | None = None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": []}
    )
    count: int | None = None
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_range: tuple[int, int] | None = None

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args, **_kwargs) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def ilike(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def range(self, start: int, end: int) -> "FakeTable":
        self.last_range = (start, end)
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data, count=self.count)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_calculation_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    table = client.table("calculations")
    row_id = str(uuid4())
    table.queue("insert", [{"id": row_id}])
    table.queue(
        "select",
        [
            {
                "id": row_id,
                "session_id": "session-1",
                "personal_info": {"weight": 70},
                "results": {"bmi": 22.9},
                "calculation_method": "Mifflin-St Jeor + WHO Guidelines",
                "created_at": "2024-05-01T10:00:00+00:00",
            }
        ],
    )

    repository = SupabaseCalculationRepository(client)
    repository.save_calculation("session-1", {"weight": 70}, {"bmi": 22.9})
    records = repository.list_calculations("session-1", 10)

    assert isinstance(table.last_payload, dict)
    assert table.last_payload["session_id"] == "session-1"
    assert ("session_id", "session-1") in table.last_filters
    assert str(records[0].id) == row_id
    assert records[0].results == {"bmi": 22.9}
    assert records[0].created_at is not None


def test_supabase_calculation_repository_raises_on_empty_insert() -> None:
    repository = SupabaseCalculationRepository(FakeSupabaseClient())

    with pytest.raises(RuntimeError):
        repository.save_calculation("session-1", {}, {})


def test_supabase_food_repository_list_and_get() -> None:
    client = FakeSupabaseClient()
    table = client.table("foods")
    food_id = str(uuid4())
    row = {
        "id": food_id,
        "name": "Brown Rice (cooked)",
        "category": "Whole Grains",
        "calories": 111,
        "carbs_g": 23,
        "protein_g": 2.6,
        "fat_g": 0.9,
        "fiber_g": 1.8,
        "serving_size": "100g",
    }
    table.queue("select", [row])
    table.queue("select", [row])

    repository = SupabaseFoodRepository(client)
    foods = repository.list_foods("rice", "Whole Grains", 20, 40)
    fetched = repository.get_food(foods[0].id)

    assert foods[0].calories == 111
    assert foods[0].sodium_mg == 0.0
    assert ("name", "%rice%") in table.last_filters
    assert ("category", "Whole Grains") in table.last_filters
    assert table.last_range == (40, 59)
    assert fetched is not None
    assert str(fetched.id) == food_id


def test_supabase_food_repository_get_missing() -> None:
    repository = SupabaseFoodRepository(FakeSupabaseClient())

    assert repository.get_food(uuid4()) is None


def test_supabase_food_repository_count_and_insert() -> None:
    client = FakeSupabaseClient()
    table = client.table("foods")
    table.count = 3
    table.queue("insert", [{"id": str(uuid4())}, {"id": str(uuid4())}])
    table.queue("select", [{"category": "Dairy"}, {"category": "Fruits"}])

    repository = SupabaseFoodRepository(client)

    assert repository.list_categories() == ["Dairy", "Fruits"]
    assert repository.count_foods() == 3
    assert repository.insert_foods([{"name": "A"}, {"name": "B"}]) == 2


def test_supabase_meal_plan_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("meal_plans")
    table.queue("insert", [{"id": str(uuid4())}])

    repository = SupabaseMealPlanRepository(client)
    repository.save_meal_plan("session-1", {"target_calories": 2000, "meals": {}})

    assert table.last_payload == {
        "session_id": "session-1",
        "target_calories": 2000,
        "meals": {},
    }
