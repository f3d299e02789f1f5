"""Domain models for calculation history."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class CalculationRecord:
    """A stored calculation for a session."""

    id: UUID
    session_id: str
    personal_info: dict[str, object]
    results: dict[str, object]
    calculation_method: str
    created_at: datetime | None
