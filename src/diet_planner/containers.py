"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from diet_planner.adapters.supabase_calculation_repository import (
    SupabaseCalculationRepository,
)
from diet_planner.adapters.supabase_food_repository import SupabaseFoodRepository
from diet_planner.adapters.supabase_meal_plan_repository import (
    SupabaseMealPlanRepository,
)
from diet_planner.config import Settings
from diet_planner.services.calculations import CalculationService
from diet_planner.services.catalog import FoodCatalogService
from diet_planner.services.meal_plans import MealPlanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    calculation_service: CalculationService
    catalog_service: FoodCatalogService
    meal_plan_service: MealPlanService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    calculation_service = CalculationService(
        repository=SupabaseCalculationRepository(supabase_client),
        history_limit=resolved_settings.calculation_history_limit,
    )
    catalog_service = FoodCatalogService(
        repository=SupabaseFoodRepository(supabase_client),
        default_limit=resolved_settings.food_catalog_default_limit,
    )
    meal_plan_service = MealPlanService(
        repository=SupabaseMealPlanRepository(supabase_client),
        catalog=catalog_service,
    )
    return AppContainer(
        settings=resolved_settings,
        calculation_service=calculation_service,
        catalog_service=catalog_service,
        meal_plan_service=meal_plan_service,
    )
