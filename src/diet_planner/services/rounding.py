"""Rounding helpers for presented values."""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, e.g. 87.5 -> 88 and 0.5 -> 1."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round half up to an integer."""
    return int(round_half_up(value))
