"""Math utilities for rating components."""


def clamp(x: float, low: float, high: float) -> float:
    """Restrict x to the closed interval [low, high]."""
    return min(max(x, low), high)
