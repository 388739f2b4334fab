"""Core logic: parsing policy, rating formula, display messages."""

from qbrating.core.messages import error_message, format_rating_message, rate_player
from qbrating.core.parse import PassingStats, parse_attempts, parse_number, parse_secondary, parse_stats
from qbrating.core.rating import (
    RatingResult,
    WeightedComponents,
    compute,
    compute_components,
    passer_rating,
    rating_from_components,
)

__all__ = [
    "PassingStats",
    "RatingResult",
    "WeightedComponents",
    "compute",
    "compute_components",
    "error_message",
    "format_rating_message",
    "parse_attempts",
    "parse_number",
    "parse_secondary",
    "parse_stats",
    "passer_rating",
    "rate_player",
    "rating_from_components",
]
