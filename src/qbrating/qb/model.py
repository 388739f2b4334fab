"""
Passer box-score line from play-by-play, rated with the core formula.

Attempts exclude sacks (pass_attempt includes them in nflverse PBP). When the
pass_attempt/sack columns are missing, play_type == "pass" is used instead.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

import pandas as pd

from qbrating.config import RatingConfig
from qbrating.core.rating import RatingResult, compute

# nflverse abbreviated form: "P.Mahomes", "A.St. Brown"
_ABBREV_RE = re.compile(r"^[A-Z]{1,2}\.\S")
_SUFFIXES = {"JR", "SR", "II", "III", "IV", "V"}


@dataclass
class PassingLine:
    """Raw passing stat line for a QB (game, postseason, or segment)."""

    games: int
    att: int
    cmp: int
    yds: int
    td: int
    int_: int  # 'int' reserved

    def __post_init__(self) -> None:
        if self.games < 1:
            self.games = 1


def _split_name(name: str) -> Tuple[str, str]:
    """
    (first initial, last name) with punctuation removed and suffixes dropped.

    "P.Mahomes" -> ("P", "MAHOMES"); "A.St. Brown" -> ("A", "STBROWN");
    "T. Brady" -> ("T", "BRADY"); "Michael Penix Jr." -> ("M", "PENIX"); "Mahomes" -> ("", "MAHOMES").
    """
    s = str(name).strip().upper()
    if _ABBREV_RE.match(s):
        first, rest = s.split(".", 1)
    elif " " in s:
        first, rest = s.split(None, 1)
    else:
        first, rest = "", s
    words = [w for w in re.split(r"\s+", rest) if w]
    while len(words) > 1 and re.sub(r"[^A-Z]", "", words[-1]) in _SUFFIXES:
        words.pop()
    last = re.sub(r"[^A-Z0-9]", "", "".join(words))
    initial = re.sub(r"[^A-Z]", "", first)[:1]
    return initial, last


def _qb_name_matches(pbp_name: str, qb: str) -> bool:
    """
    True if pbp_name and qb name the same passer: last names equal, and first
    initials equal when both are given ("T. Brady" does not match "T.Hill").
    """
    if pd.isna(pbp_name) or str(pbp_name).strip() == "":
        return False
    pbp_initial, pbp_last = _split_name(pbp_name)
    qb_initial, qb_last = _split_name(qb)
    if not qb_last or pbp_last != qb_last:
        return False
    return not (pbp_initial and qb_initial) or pbp_initial == qb_initial


def _flag(df: pd.DataFrame, col: str) -> pd.Series:
    """0/1 indicator column as a boolean Series (False when the column is absent)."""
    if col not in df.columns:
        return pd.Series(False, index=df.index)
    return df[col].fillna(0).astype(float) == 1


def qb_pass_attempts(df: pd.DataFrame, qb: str) -> pd.DataFrame:
    """Rows that count as pass attempts thrown by qb (sacks excluded)."""
    if df.empty or "passer_player_name" not in df.columns:
        return df.iloc[0:0]
    by_qb = df[df["passer_player_name"].apply(lambda x: _qb_name_matches(x, qb))]
    if "pass_attempt" in by_qb.columns:
        return by_qb[_flag(by_qb, "pass_attempt") & ~_flag(by_qb, "sack")]
    if "play_type" in by_qb.columns:
        return by_qb[by_qb["play_type"] == "pass"]
    return by_qb.iloc[0:0]


def _line_from_attempts(att_plays: pd.DataFrame, games: int) -> PassingLine:
    completed = _flag(att_plays, "complete_pass")
    if "passing_yards" in att_plays.columns:
        yds = int(att_plays["passing_yards"].fillna(0).sum())
    else:
        yds = int(att_plays.loc[completed, "yards_gained"].fillna(0).sum()) if "yards_gained" in att_plays.columns else 0
    if "pass_touchdown" in att_plays.columns:
        td = int(_flag(att_plays, "pass_touchdown").sum())
    else:
        # touchdown alone would also count pick-sixes
        td = int((_flag(att_plays, "touchdown") & completed).sum())
    return PassingLine(
        games=games,
        att=len(att_plays),
        cmp=int(completed.sum()),
        yds=yds,
        td=td,
        int_=int(_flag(att_plays, "interception").sum()),
    )


def passing_line_from_pbp(
    pbp: pd.DataFrame,
    qb: str,
    team: str,
    game_ids: Optional[List[str]] = None,
) -> Optional[PassingLine]:
    """
    Build PassingLine from PBP for the given QB and team.
    Returns None if the QB has no dropbacks for that team (or passer names are missing).
    """
    df = pbp[pbp["posteam"] == team] if "posteam" in pbp.columns else pbp.iloc[0:0]
    if game_ids is not None and "game_id" in df.columns:
        df = df[df["game_id"].isin(game_ids)]
    if df.empty or "passer_player_name" not in df.columns:
        return None
    involved = df[df["passer_player_name"].apply(lambda x: _qb_name_matches(x, qb))]
    if involved.empty:
        return None
    games = involved["game_id"].nunique() if "game_id" in involved.columns else 1
    return _line_from_attempts(qb_pass_attempts(df, qb), int(games) or 1)


def rate_passing_line(line: PassingLine, config: Optional[RatingConfig] = None) -> RatingResult:
    """Rate a PassingLine; raises NoAttemptsError when line.att == 0."""
    return compute(line.att, line.cmp, line.td, line.int_, line.yds, config=config)
