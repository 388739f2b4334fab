"""
Load play-by-play data via nflreadpy (nflverse).

Column meanings follow the nflverse PBP data dictionary. Only the columns needed
to build a passer's box-score line are validated; a missing one fails fast.

Uses nflreadpy's built-in caching (env: NFLREADPY_CACHE, NFLREADPY_CACHE_DIR).
Returns pandas DataFrames.
"""

import logging
from typing import List, Optional

import pandas as pd

from qbrating.config import DEFAULT_CONFIG, RatingConfig
from qbrating.data.errors import MissingColumnsError, SeasonNotAvailableError

logger = logging.getLogger(__name__)

# Alternate schema names -> names used by qb.model
COLUMN_ALIASES: dict[str, str] = {
    "passer": "passer_player_name",
    "touchdown_pass": "pass_touchdown",
}

# Needed by passing_line_from_pbp. Missing any of these raises MissingColumnsError.
REQUIRED_PBP_COLUMNS = [
    "game_id",
    "season_type",
    "posteam",
    "play_type",
    "passer_player_name",
    "complete_pass",
    "interception",
]

# Used when present; passing_line_from_pbp falls back otherwise
OPTIONAL_PBP_COLUMNS = ["pass_attempt", "sack", "passing_yards", "yards_gained", "pass_touchdown", "touchdown"]

SEASON_TYPES = ("REG", "POST", "ALL")


def _apply_aliases(df: pd.DataFrame, aliases: dict[str, str]) -> pd.DataFrame:
    """Rename columns using alias map; only renames if source exists and target missing."""
    renames = {}
    for src, tgt in aliases.items():
        if src in df.columns and tgt not in df.columns:
            renames[src] = tgt
    if renames:
        df = df.rename(columns=renames)
    return df


def ensure_nonempty(df: pd.DataFrame, years: List[int], season_type: str) -> None:
    """Raise SeasonNotAvailableError rather than rate a QB from zero plays."""
    if df.empty:
        raise SeasonNotAvailableError(years, season_type)


def validate_pbp_for_passing(df: pd.DataFrame) -> List[str]:
    """
    Passing line requires REQUIRED_PBP_COLUMNS plus passing_yards OR yards_gained.
    Returns the OPTIONAL_PBP_COLUMNS that are absent (their fallbacks will be used).
    """
    missing = [c for c in REQUIRED_PBP_COLUMNS if c not in df.columns]
    if missing:
        raise MissingColumnsError(
            f"Passing line requires: {REQUIRED_PBP_COLUMNS}. Missing: {missing}.",
            missing_columns=missing,
            context="passing",
        )
    if "passing_yards" not in df.columns and "yards_gained" not in df.columns:
        raise MissingColumnsError(
            "Passing line requires either passing_yards OR yards_gained. Neither present.",
            missing_columns=[],
            context="passing",
        )
    absent = [c for c in OPTIONAL_PBP_COLUMNS if c not in df.columns]
    if absent:
        logger.info("Optional PBP columns absent, using fallbacks: %s", absent)
    return absent


def filter_season_type(df: pd.DataFrame, season_type: str) -> pd.DataFrame:
    """Keep rows for "REG" or "POST"; "ALL" returns df unchanged."""
    if season_type not in SEASON_TYPES:
        raise ValueError(f"season_type must be one of {SEASON_TYPES}, got {season_type!r}")
    if season_type == "ALL" or "season_type" not in df.columns:
        return df
    st = df["season_type"].astype(str).str.upper()
    return df[st == season_type].copy()


def get_pbp(
    years: List[int],
    *,
    season_type: str = "POST",
    columns: Optional[List[str]] = None,
    config: Optional[RatingConfig] = None,
) -> pd.DataFrame:
    """
    Load PBP for the given years via nflreadpy; convert to pandas and filter.

    season_type: "REG", "POST", or "ALL".
    columns: subset to return; default is config.pbp_columns. Requested columns the
    data lacks are filled with NA. Raises MissingColumnsError or SeasonNotAvailableError
    if data is invalid or empty for the requested filter.
    """
    import nflreadpy as nfl  # noqa: PLC0415

    cfg = config or DEFAULT_CONFIG
    cols_use = columns or list(cfg.pbp_columns)
    logger.info("Loading PBP for years=%s (season_type=%s) via nflreadpy", years, season_type)

    pl_pbp = nfl.load_pbp(seasons=years)
    df = pl_pbp.to_pandas()
    ensure_nonempty(df, years, season_type)

    df = _apply_aliases(df, COLUMN_ALIASES)
    df = filter_season_type(df, season_type)

    ensure_nonempty(df, years, season_type)
    validate_pbp_for_passing(df)

    out_cols = [c for c in cols_use if c in df.columns]
    if out_cols != cols_use:
        missing = set(cols_use) - set(out_cols)
        logger.warning("Requested columns not in data (filled with NaN): %s", missing)
        for c in missing:
            df[c] = pd.NA
        out_cols = cols_use
    return df[out_cols].copy()
