"""
Rate every row of a game log DataFrame.

Rows that fail (bad or zero attempts) are kept with NaN components and the
error kind in the "error" column, so one bad row does not drop the table.
"""

import logging
from typing import Dict, List, Optional

import pandas as pd

from qbrating.config import RatingConfig
from qbrating.core.rating import compute
from qbrating.errors import RatingError
from qbrating.qb.model import _qb_name_matches, passing_line_from_pbp

logger = logging.getLogger(__name__)

# Logical stat name -> default column name
DEFAULT_COLUMNS: Dict[str, str] = {
    "attempts": "attempts",
    "completions": "completions",
    "passing_yards": "passing_yards",
    "touchdowns": "touchdowns",
    "interceptions": "interceptions",
}

COMPONENT_COLUMNS = ["completion", "yards_per_attempt", "touchdown", "interception"]
OUTPUT_COLUMNS = COMPONENT_COLUMNS + ["rating", "error"]


def rate_game_log(
    df: pd.DataFrame,
    columns: Optional[Dict[str, str]] = None,
    config: Optional[RatingConfig] = None,
) -> pd.DataFrame:
    """
    Return a copy of df with component columns, "rating", and "error".

    columns maps stat names (attempts, completions, passing_yards, touchdowns,
    interceptions) to df column names; a missing secondary column counts as 0.
    """
    cols = dict(DEFAULT_COLUMNS)
    if columns:
        cols.update(columns)
    if cols["attempts"] not in df.columns:
        raise KeyError(f"Game log has no attempts column {cols['attempts']!r}")

    records: List[dict] = []
    for _, row in df.iterrows():
        raw = {name: row.get(col, 0) for name, col in cols.items()}
        # NaN from pandas counts as missing
        raw = {k: (None if pd.isna(v) else v) for k, v in raw.items()}
        try:
            result = compute(
                raw["attempts"],
                raw["completions"],
                raw["touchdowns"],
                raw["interceptions"],
                raw["passing_yards"],
                config=config,
            )
        except RatingError as e:
            records.append({**{c: float("nan") for c in COMPONENT_COLUMNS}, "rating": float("nan"), "error": e.kind})
            continue
        records.append({**result.components.as_dict(), "rating": result.rating, "error": ""})

    out = df.copy()
    rated = pd.DataFrame(records, index=df.index, columns=OUTPUT_COLUMNS)
    for c in OUTPUT_COLUMNS:
        out[c] = rated[c]
    n_err = int((out["error"] != "").sum()) if len(out) else 0
    if n_err:
        logger.info("Game log: %d of %d rows could not be rated", n_err, len(out))
    return out


def game_log_from_pbp(
    pbp: pd.DataFrame,
    qb: str,
    team: str,
    config: Optional[RatingConfig] = None,
) -> pd.DataFrame:
    """Per-game passing lines for qb (one row per game_id), rated."""
    empty = pd.DataFrame(columns=["game_id"] + list(DEFAULT_COLUMNS) + OUTPUT_COLUMNS)
    if pbp.empty or "game_id" not in pbp.columns or "passer_player_name" not in pbp.columns:
        return empty
    team_pbp = pbp[pbp["posteam"] == team]
    involved = team_pbp[team_pbp["passer_player_name"].apply(lambda x: _qb_name_matches(x, qb))]
    rows = []
    for gid in involved["game_id"].dropna().unique().tolist():
        line = passing_line_from_pbp(team_pbp, qb, team, game_ids=[gid])
        if line is None:
            continue
        rows.append({
            "game_id": gid,
            "attempts": line.att,
            "completions": line.cmp,
            "passing_yards": line.yds,
            "touchdowns": line.td,
            "interceptions": line.int_,
        })
    if not rows:
        return empty
    return rate_game_log(pd.DataFrame(rows), config=config)
