"""Shared numeric helpers for 0-100 scores."""

import math


def round_half_up(value: float) -> int:
    """Round .5 upward (2.5 -> 3), unlike Python's banker's rounding."""
    return math.floor(value + 0.5)


def clamp_score(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def percentage(part: int | float, whole: int | float, empty: int = 0) -> int:
    """``part / whole`` as a rounded percentage; ``empty`` when whole is 0."""
    if whole == 0:
        return empty
    return round_half_up(part / whole * 100)
