"""Supabase-backed calculation history repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from diet_planner.domain.history import CalculationRecord
from diet_planner.services.calculations import (
    CALCULATION_METHOD,
    CalculationRepository,
)


@dataclass
class SupabaseCalculationRepository(CalculationRepository):
    """Supabase implementation for calculation history."""

    client: Client

    def save_calculation(
        self,
        session_id: str,
        personal_info: dict[str, object],
        results: dict[str, object],
    ) -> None:
        """Insert a calculation row."""
        response = (
            self.client.table("calculations")
            .insert(
                {
                    "session_id": session_id,
                    "personal_info": personal_info,
                    "results": results,
                    "calculation_method": CALCULATION_METHOD,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save calculation")

    def list_calculations(
        self, session_id: str, limit: int
    ) -> list[CalculationRecord]:
        """Return calculations for a session, newest first."""
        response = (
            self.client.table("calculations")
            .select("*")
            .eq("session_id", session_id)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_calculation(row) for row in response.data or []]


def _parse_calculation(row: dict[str, object]) -> CalculationRecord:
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    return CalculationRecord(
        id=UUID(row["id"]),
        session_id=str(row.get("session_id", "")),
        personal_info=dict(row.get("personal_info") or {}),
        results=dict(row.get("results") or {}),
        calculation_method=str(row.get("calculation_method") or CALCULATION_METHOD),
        created_at=created_at,
    )
