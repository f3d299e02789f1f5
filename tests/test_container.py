"""Tests for container wiring."""

from diet_planner.adapters.supabase_food_repository import SupabaseFoodRepository
from diet_planner.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert container.calculation_service.history_limit == 10
    assert isinstance(container.catalog_service.repository, SupabaseFoodRepository)
    assert container.meal_plan_service.catalog is container.catalog_service
