"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from diet_planner.api.models import (
    AddFoodRequest,
    CalculationRequest,
    CreateMealPlanRequest,
    MealPlanPayload,
    RemoveFoodRequest,
)
from diet_planner.app_logging import configure_logging
from diet_planner.containers import AppContainer
from diet_planner.domain.enums import Climate, MealSlot
from diet_planner.domain.foods import FoodItem
from diet_planner.domain.history import CalculationRecord
from diet_planner.domain.meal_plans import (
    MealEntry,
    MealPlan,
    MealSlotPlan,
    MealTotals,
)
from diet_planner.domain.nutrition import (
    InvalidPersonalInfoError,
    MacroSplit,
    NutritionProfile,
    parse_personal_info,
)
from diet_planner.services.meal_plans import (
    NUTRITION_TIPS,
    create_meal_plan,
    daily_totals,
    slot_progress,
    slot_totals,
)
from diet_planner.services.rounding import round_half_up

SESSION_HEADER = "Session-ID"
API_VERSION = "2.0"


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        if state_container.settings.seed_food_catalog:
            try:
                state_container.catalog_service.seed_if_empty()
            except Exception:
                logger.exception("Failed to seed the food catalog")
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.middleware("http")
    async def session_id_middleware(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Attach an opaque session id, generating one when absent."""
        session_id = request.headers.get(SESSION_HEADER)
        generated = not session_id
        if generated:
            session_id = str(uuid4())
        request.state.session_id = session_id
        response = await call_next(request)
        if generated:
            response.headers[SESSION_HEADER] = session_id
        return response

    @app.get("/api/health")
    async def health(request: Request) -> dict[str, str]:
        """Simple health check endpoint."""
        return {
            "status": "OK",
            "message": "Diet Plan Calculator API is running",
            "version": API_VERSION,
            "sessionId": request.state.session_id,
        }

    @app.post("/api/calculate", response_model=None)
    async def calculate(
        payload: CalculationRequest, request: Request
    ) -> dict[str, object] | JSONResponse:
        """Compute a nutrition profile and record it for the session."""
        state_container: AppContainer = request.app.state.container
        try:
            personal_info = parse_personal_info(
                weight=payload.weight,
                height=payload.height,
                age=payload.age,
                gender=payload.gender,
                activity_level=payload.activity_level,
                goal=payload.goal,
            )
        except InvalidPersonalInfoError as exc:
            return JSONResponse(status_code=400, content={"error": str(exc)})

        profile = state_container.calculation_service.calculate(
            request.state.session_id,
            personal_info,
            split=_macro_split(payload),
            climate=Climate.parse(payload.climate),
        )
        return {
            **_profile_payload(profile),
            "sessionId": request.state.session_id,
        }

    @app.get("/api/foods")
    async def list_foods(  # noqa: PLR0913
        request: Request,
        search: str | None = None,
        category: str | None = None,
        limit: int | None = None,
        skip: int = 0,
    ) -> list[dict[str, object]]:
        """Return catalog foods filtered by text and category."""
        state_container: AppContainer = request.app.state.container
        foods = state_container.catalog_service.list_foods(
            search=search, category=category, limit=limit, offset=skip
        )
        return [_food_payload(food) for food in foods]

    @app.get("/api/food-categories")
    async def food_categories(request: Request) -> list[str]:
        """Return catalog categories."""
        state_container: AppContainer = request.app.state.container
        return state_container.catalog_service.list_categories()

    @app.get("/api/calculation-history")
    async def calculation_history(request: Request) -> list[dict[str, object]]:
        """Return recent calculations for the session."""
        state_container: AppContainer = request.app.state.container
        history = state_container.calculation_service.get_history(
            request.state.session_id
        )
        return [_history_payload(record) for record in history]

    @app.post("/api/meal-plan")
    async def create_plan(
        payload: CreateMealPlanRequest, request: Request
    ) -> dict[str, object]:
        """Start a meal plan split across the four meal slots."""
        state_container: AppContainer = request.app.state.container
        plan = state_container.meal_plan_service.create(
            request.state.session_id, payload.target_calories
        )
        return {
            **_meal_plan_payload(plan),
            "totalCalories": plan.target_calories,
            "nutritionTips": list(NUTRITION_TIPS),
            "sessionId": request.state.session_id,
        }

    @app.post("/api/meal-plan/foods", response_model=None)
    async def add_food(
        payload: AddFoodRequest, request: Request
    ) -> dict[str, object] | JSONResponse:
        """Add a catalog food to a meal slot."""
        state_container: AppContainer = request.app.state.container
        try:
            slot = MealSlot.from_key(payload.meal)
            plan = state_container.meal_plan_service.add_food(
                request.state.session_id,
                _meal_plan_from_payload(payload.plan),
                slot,
                payload.food_id,
                payload.serving_size,
            )
        except LookupError as exc:
            return JSONResponse(status_code=404, content={"error": str(exc)})
        except ValueError as exc:
            return JSONResponse(status_code=400, content={"error": str(exc)})
        return {**_meal_plan_payload(plan), "sessionId": request.state.session_id}

    @app.post("/api/meal-plan/foods/remove", response_model=None)
    async def remove_food(
        payload: RemoveFoodRequest, request: Request
    ) -> dict[str, object] | JSONResponse:
        """Remove an entry from a meal slot."""
        state_container: AppContainer = request.app.state.container
        try:
            slot = MealSlot.from_key(payload.meal)
            current = _meal_plan_from_payload(payload.plan)
        except ValueError as exc:
            return JSONResponse(status_code=400, content={"error": str(exc)})
        plan = state_container.meal_plan_service.remove_food(
            request.state.session_id, current, slot, payload.entry_id
        )
        return {**_meal_plan_payload(plan), "sessionId": request.state.session_id}

    return app


def _macro_split(payload: CalculationRequest) -> MacroSplit:
    defaults = MacroSplit()
    return MacroSplit(
        carb_percent=_or_default(payload.carb_percent, defaults.carb_percent),
        protein_percent=_or_default(
            payload.protein_percent, defaults.protein_percent
        ),
        fat_percent=_or_default(payload.fat_percent, defaults.fat_percent),
    )


def _or_default(value: float | None, default: float) -> float:
    return default if value is None else value


def _profile_payload(profile: NutritionProfile) -> dict[str, object]:
    info = profile.personal_info
    metrics = profile.metrics
    macros = profile.macronutrients
    micros = profile.micronutrients
    classification = metrics.bmi_classification
    return {
        "personalInfo": {
            "weight": info.weight_kg,
            "height": info.height_cm,
            "age": info.age,
            "gender": info.gender.value,
            "activityLevel": info.activity_level.value,
            "goal": info.goal.value,
        },
        "metrics": {
            "bmi": metrics.bmi,
            "bmiClassification": {
                "category": classification.category,
                "color": classification.color_tag,
                "healthRisk": classification.health_risk,
                "recommendation": classification.recommendation,
            },
            "bmr": metrics.bmr,
            "bmrHarrisBenedict": metrics.bmr_alternate,
            "tdee": metrics.tdee,
            "targetCalories": metrics.target_calories,
            "weeklyWeightChange": metrics.weekly_weight_change_lb,
            "idealWeight": {
                "min": metrics.ideal_weight.min_kg,
                "max": metrics.ideal_weight.max_kg,
            },
            "waterIntake": metrics.water_intake_ml,
            "waterGlasses": metrics.water_glasses,
            "safetyNote": metrics.safety_note,
        },
        "macronutrients": {
            "carbs": {
                "calories": macros.carbs.calories,
                "grams": macros.carbs.grams,
                "percentage": macros.carbs.percentage,
            },
            "protein": {
                "calories": macros.protein.calories,
                "grams": macros.protein.grams,
                "percentage": macros.protein.percentage,
                "recommendedGrams": macros.protein.recommended_grams,
                "note": (
                    f"Minimum {macros.protein.recommended_grams}g "
                    "based on body weight"
                ),
            },
            "fat": {
                "calories": macros.fat.calories,
                "grams": macros.fat.grams,
                "percentage": macros.fat.percentage,
                "saturatedFatLimit": macros.fat.saturated_fat_limit_g,
                "note": (
                    "WHO recommends <30% of total calories from fat, "
                    "<10% from saturated fat"
                ),
            },
        },
        "micronutrients": {
            "fiber": micros.fiber_g,
            "sodium": {
                "sodiumMg": micros.sodium.sodium_mg,
                "saltGrams": micros.sodium.salt_g,
            },
            "vitamins": {
                "vitaminC": micros.vitamin_c_mg,
                "vitaminD": micros.vitamin_d_ug,
            },
            "minerals": {
                "calcium": micros.calcium_mg,
                "iron": micros.iron_mg,
                "potassium": micros.potassium_mg,
            },
        },
        "recommendations": dict(profile.recommendations),
    }


def _food_payload(food: FoodItem) -> dict[str, object]:
    return {
        "id": str(food.id),
        "name": food.name,
        "category": food.category,
        "calories": food.calories,
        "carbs": food.carbs_g,
        "protein": food.protein_g,
        "fat": food.fat_g,
        "fiber": food.fiber_g,
        "sodium": food.sodium_mg,
        "potassium": food.potassium_mg,
        "calcium": food.calcium_mg,
        "iron": food.iron_mg,
        "vitaminC": food.vitamin_c_mg,
        "vitaminA": food.vitamin_a_ug,
        "omega3": food.omega3_g,
        "servingSize": food.serving_size,
        "notes": food.notes,
    }


def _history_payload(record: CalculationRecord) -> dict[str, object]:
    return {
        "id": str(record.id),
        "personalInfo": record.personal_info,
        "results": record.results,
        "calculationMethod": record.calculation_method,
        "createdAt": record.created_at.isoformat() if record.created_at else None,
    }


def _entry_payload(entry: MealEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "foodId": str(entry.food_id),
        "name": entry.food_name,
        "servingSize": entry.serving_multiplier,
        "totalCalories": entry.calories,
        "totalCarbs": entry.carbs_g,
        "totalProtein": entry.protein_g,
        "totalFat": entry.fat_g,
        "totalFiber": entry.fiber_g,
    }


def _totals_payload(totals: MealTotals) -> dict[str, object]:
    return {
        "calories": totals.calories,
        "carbs": totals.carbs_g,
        "protein": totals.protein_g,
        "fat": totals.fat_g,
        "fiber": totals.fiber_g,
    }


def _meal_plan_payload(plan: MealPlan) -> dict[str, object]:
    return {
        "targetCalories": plan.target_calories,
        "mealPlan": [
            {
                "meal": slot_plan.slot.key,
                "targetCalories": slot_plan.target_calories,
                "foods": [_entry_payload(entry) for entry in slot_plan.entries],
                "totals": _totals_payload(slot_totals(slot_plan)),
                "progress": round_half_up(slot_progress(slot_plan), 1),
            }
            for slot_plan in plan.slots
        ],
        "dailyTotals": _totals_payload(daily_totals(plan)),
    }


def _meal_plan_from_payload(payload: MealPlanPayload) -> MealPlan:
    """Rebuild a plan from the client's copy; slot targets are recomputed."""
    plan = create_meal_plan(payload.target_calories)
    entries_by_slot = {
        MealSlot.from_key(slot_payload.meal): tuple(
            MealEntry(
                id=entry.id,
                food_id=entry.food_id,
                food_name=entry.name,
                serving_multiplier=entry.serving_size,
                calories=entry.total_calories,
                carbs_g=entry.total_carbs,
                protein_g=entry.total_protein,
                fat_g=entry.total_fat,
                fiber_g=entry.total_fiber,
            )
            for entry in slot_payload.foods
        )
        for slot_payload in payload.meal_plan
    }
    return MealPlan(
        target_calories=plan.target_calories,
        slots=tuple(
            MealSlotPlan(
                slot=slot_plan.slot,
                target_calories=slot_plan.target_calories,
                entries=entries_by_slot.get(slot_plan.slot, ()),
            )
            for slot_plan in plan.slots
        ),
    )
