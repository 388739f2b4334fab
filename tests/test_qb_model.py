"""Tests for passing lines built from play-by-play and rated with the core formula."""

import numpy as np
import pandas as pd
import pytest

from qbrating.errors import NoAttemptsError
from qbrating.qb.model import (
    PassingLine,
    _qb_name_matches,
    _split_name,
    passing_line_from_pbp,
    qb_pass_attempts,
    rate_passing_line,
)


def _play(game_id, team, passer, play_type, complete=0, yards=0, td=0, int_=0, sack=0):
    is_pass = play_type in ("pass", "sack")
    return {
        "game_id": game_id,
        "season_type": "POST",
        "posteam": team,
        "play_type": play_type,
        "passer_player_name": passer,
        "pass_attempt": 1 if is_pass else 0,
        "sack": sack,
        "complete_pass": complete,
        "passing_yards": yards if complete else np.nan,
        "yards_gained": yards,
        "pass_touchdown": td,
        "touchdown": td,
        "interception": int_,
    }


@pytest.fixture
def pbp() -> pd.DataFrame:
    rows = [
        _play("G1", "KC", "P.Mahomes", "pass", complete=1, yards=10),
        _play("G1", "KC", "P.Mahomes", "pass", complete=1, yards=25, td=1),
        _play("G1", "KC", "P.Mahomes", "pass"),
        _play("G1", "KC", "P.Mahomes", "pass", int_=1),
        _play("G1", "KC", "P.Mahomes", "sack", yards=-7, sack=1),
        _play("G1", "KC", None, "run", yards=4),
        _play("G2", "KC", "P.Mahomes", "pass", complete=1, yards=15),
        _play("G2", "KC", "P.Mahomes", "pass", complete=1, yards=5),
        _play("G2", "BUF", "J.Allen", "pass", complete=1, yards=40, td=1),
    ]
    return pd.DataFrame(rows)


def test_name_match_initial_and_last_name() -> None:
    assert _qb_name_matches("P.Mahomes", "Patrick Mahomes")
    assert _qb_name_matches("P.Mahomes", "p.mahomes")
    assert _qb_name_matches("P.Mahomes", "Mahomes")
    assert _qb_name_matches("T.Brady", "T. Brady")
    assert _qb_name_matches("A.St. Brown", "Amon-Ra St. Brown")
    assert _qb_name_matches("M.Penix", "Michael Penix Jr.")
    assert not _qb_name_matches("J.Allen", "Patrick Mahomes")
    assert not _qb_name_matches(None, "Mahomes")
    assert not _qb_name_matches("", "Mahomes")


def test_name_match_rejects_shared_initial() -> None:
    assert not _qb_name_matches("T.Hill", "T. Brady")
    assert not _qb_name_matches("T.Lawrence", "T. Brady")
    assert not _qb_name_matches("J.Brady", "T. Brady")
    assert not _qb_name_matches("K.Allen", "Josh Allen")


def test_split_name_forms() -> None:
    assert _split_name("P.Mahomes") == ("P", "MAHOMES")
    assert _split_name("T. Brady") == ("T", "BRADY")
    assert _split_name("Mahomes") == ("", "MAHOMES")


def test_passing_line_excludes_sacks(pbp) -> None:
    line = passing_line_from_pbp(pbp, "Patrick Mahomes", "KC")
    assert line == PassingLine(games=2, att=6, cmp=4, yds=55, td=1, int_=1)


def test_passing_line_for_single_game(pbp) -> None:
    line = passing_line_from_pbp(pbp, "P.Mahomes", "KC", game_ids=["G2"])
    assert line == PassingLine(games=1, att=2, cmp=2, yds=20, td=0, int_=0)


def test_passing_line_without_attempt_columns(pbp) -> None:
    """Falls back to play_type == 'pass', completed yards_gained, and completed touchdowns."""
    slim = pbp.drop(columns=["pass_attempt", "sack", "passing_yards", "pass_touchdown"])
    line = passing_line_from_pbp(slim, "Mahomes", "KC")
    assert line == PassingLine(games=2, att=6, cmp=4, yds=55, td=1, int_=1)


def test_passing_line_none_when_qb_absent(pbp) -> None:
    assert passing_line_from_pbp(pbp, "J.Allen", "KC") is None
    assert passing_line_from_pbp(pbp, "Mahomes", "SF") is None


def test_qb_pass_attempts_rows(pbp) -> None:
    att = qb_pass_attempts(pbp, "Mahomes")
    assert len(att) == 6
    assert (att["sack"] == 0).all()


def test_rate_passing_line(pbp) -> None:
    line = passing_line_from_pbp(pbp, "Mahomes", "KC")
    out = rate_passing_line(line)
    assert out.components.touchdown == 2.375
    assert out.components.interception == 0.0
    assert out.rating == 95.8


def test_rate_passing_line_sacks_only_raises() -> None:
    with pytest.raises(NoAttemptsError):
        rate_passing_line(PassingLine(games=1, att=0, cmp=0, yds=0, td=0, int_=0))


def test_passing_line_games_floor() -> None:
    assert PassingLine(games=0, att=1, cmp=0, yds=0, td=0, int_=0).games == 1
