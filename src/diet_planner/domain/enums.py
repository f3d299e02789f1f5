"""Closed value sets used by the calculation engine.

Each enum maps raw request values onto a member once, at the boundary.
Unrecognized values resolve to a documented default instead of failing.
"""

import logging
from enum import Enum

_logger = logging.getLogger(__name__)


class Gender(Enum):
    """Biological sex used by the BMR, water and RDA formulas."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, raw: object) -> "Gender":
        """Return MALE for any casing of "male", FEMALE for everything else."""
        if isinstance(raw, Gender):
            return raw
        if isinstance(raw, str) and raw.strip().lower() == cls.MALE.value:
            return cls.MALE
        if not (isinstance(raw, str) and raw.strip().lower() == cls.FEMALE.value):
            _logger.warning("Unrecognized gender %r, using female formulas", raw)
        return cls.FEMALE


class ActivityLevel(Enum):
    """Self-reported activity level."""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightlyActive"
    MODERATELY_ACTIVE = "moderatelyActive"
    VERY_ACTIVE = "veryActive"
    SUPER_ACTIVE = "superActive"

    @classmethod
    def parse(cls, raw: object) -> "ActivityLevel":
        """Return the matching level, or SEDENTARY when unknown."""
        return _parse(cls, raw, cls.SEDENTARY)


class Goal(Enum):
    """Weight goal driving the calorie adjustment."""

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"

    @classmethod
    def parse(cls, raw: object) -> "Goal":
        """Return the matching goal, or MAINTAIN when missing or unknown."""
        if raw is None or raw == "":
            return cls.MAINTAIN
        return _parse(cls, raw, cls.MAINTAIN)


class Climate(Enum):
    """Climate the water intake estimate is adjusted for."""

    COLD = "cold"
    TEMPERATE = "temperate"
    HOT = "hot"
    TROPICAL = "tropical"

    @classmethod
    def parse(cls, raw: object) -> "Climate":
        """Return the matching climate, or TEMPERATE when missing or unknown."""
        if raw is None or raw == "":
            return cls.TEMPERATE
        return _parse(cls, raw, cls.TEMPERATE)


class MealSlot(Enum):
    """Fixed meal slots of a daily plan, with their share of the calories."""

    BREAKFAST = ("breakfast", 0.25)
    LUNCH = ("lunch", 0.35)
    DINNER = ("dinner", 0.30)
    SNACKS = ("snacks", 0.10)

    def __init__(self, key: str, calorie_share: float) -> None:
        self.key = key
        self.calorie_share = calorie_share

    @classmethod
    def from_key(cls, key: str) -> "MealSlot":
        """Return the slot for a key such as "lunch"."""
        for slot in cls:
            if slot.key == key:
                return slot
        raise ValueError(f"Unknown meal slot: {key}")


def _parse(enum_cls: type[Enum], raw: object, default: Enum) -> Enum:
    if isinstance(raw, enum_cls):
        return raw
    for member in enum_cls:
        if member.value == raw:
            return member
    _logger.warning(
        "Unrecognized %s %r, using %s", enum_cls.__name__, raw, default.value
    )
    return default
