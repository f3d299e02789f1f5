"""Calculation service: compute a profile and record it for the session."""

import logging
from dataclasses import asdict, dataclass
from typing import Protocol

from diet_planner.domain.enums import Climate
from diet_planner.domain.history import CalculationRecord
from diet_planner.domain.nutrition import MacroSplit, NutritionProfile, PersonalInfo
from diet_planner.services.profiles import build_profile

CALCULATION_METHOD = "Mifflin-St Jeor + WHO Guidelines"

_logger = logging.getLogger(__name__)


class CalculationRepository(Protocol):
    """Persistence interface for calculation history."""

    def save_calculation(
        self,
        session_id: str,
        personal_info: dict[str, object],
        results: dict[str, object],
    ) -> None:
        """Store a calculation summary for a session."""

    def list_calculations(
        self, session_id: str, limit: int
    ) -> list[CalculationRecord]:
        """Return calculations for a session, most recent first."""


@dataclass
class CalculationService:
    """Application service wrapping the profile assembler."""

    repository: CalculationRepository
    history_limit: int = 10

    def calculate(
        self,
        session_id: str,
        personal_info: PersonalInfo,
        split: MacroSplit | None = None,
        climate: Climate = Climate.TEMPERATE,
    ) -> NutritionProfile:
        """Build a profile and save a summary of it.

        A failed save is logged and does not affect the returned profile.
        """
        profile = build_profile(personal_info, split, climate)
        try:
            self.repository.save_calculation(
                session_id,
                personal_info_payload(personal_info),
                results_summary(profile),
            )
        except Exception:
            _logger.exception("Failed to save calculation for session %s", session_id)
        return profile

    def get_history(self, session_id: str) -> list[CalculationRecord]:
        """Return recent calculations for the session."""
        return self.repository.list_calculations(session_id, self.history_limit)


def personal_info_payload(info: PersonalInfo) -> dict[str, object]:
    """Serialize personal info for storage."""
    return {
        "weight": info.weight_kg,
        "height": info.height_cm,
        "age": info.age,
        "gender": info.gender.value,
        "activity_level": info.activity_level.value,
        "goal": info.goal.value,
    }


def results_summary(profile: NutritionProfile) -> dict[str, object]:
    """Summarize the headline figures of a profile for storage."""
    metrics = profile.metrics
    return {
        "bmi": metrics.bmi,
        "bmr": metrics.bmr,
        "tdee": metrics.tdee,
        "target_calories": metrics.target_calories,
        "water_intake": metrics.water_intake_ml,
        "macronutrients": asdict(profile.macronutrients),
    }
