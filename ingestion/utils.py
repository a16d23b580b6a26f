import math
from typing import Optional


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def coerce_score(value) -> Optional[float]:
    """
    Permissive numeric coercion for user scores.

    Returns the value clamped to 0-100, or None when the value is not a
    number (strings, None, booleans, NaN). Callers treat None as a zero
    contribution.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if math.isnan(value):
        return None
    return clamp(float(value))


def round_half_up(value: float) -> int:
    # Scores are never negative, so this is round-half-away-from-zero
    return int(math.floor(value + 0.5))
