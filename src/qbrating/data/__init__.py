"""Data loading via nflreadpy (nflverse)."""

from qbrating.data.errors import MissingColumnsError, SeasonNotAvailableError
from qbrating.data.load import (
    ensure_nonempty,
    filter_season_type,
    get_pbp,
    validate_pbp_for_passing,
)

__all__ = [
    "get_pbp",
    "ensure_nonempty",
    "filter_season_type",
    "validate_pbp_for_passing",
    "MissingColumnsError",
    "SeasonNotAvailableError",
]
