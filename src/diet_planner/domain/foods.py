"""Food catalog domain models."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class FoodItem:
    """Catalog food with nutrients per serving."""

    id: UUID
    name: str
    category: str
    calories: float
    carbs_g: float
    protein_g: float
    fat_g: float
    fiber_g: float = 0.0
    sodium_mg: float = 0.0
    potassium_mg: float = 0.0
    calcium_mg: float = 0.0
    iron_mg: float = 0.0
    vitamin_c_mg: float = 0.0
    vitamin_a_ug: float = 0.0
    omega3_g: float = 0.0
    serving_size: str = "100g"
    notes: str | None = None
