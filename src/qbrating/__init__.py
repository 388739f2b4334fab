"""QB Rating Engine: NFL passer rating from raw passing stats."""

from qbrating.core.rating import (
    PassingStats,
    RatingResult,
    WeightedComponents,
    compute,
    passer_rating,
)
from qbrating.errors import InvalidInputError, NoAttemptsError, RatingError

__all__ = [
    "PassingStats",
    "RatingResult",
    "WeightedComponents",
    "compute",
    "passer_rating",
    "RatingError",
    "InvalidInputError",
    "NoAttemptsError",
]
