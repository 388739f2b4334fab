"""Tests for data layer: column validation, season filter, empty-data errors."""

import pandas as pd
import pytest

from qbrating.data.errors import MissingColumnsError, SeasonNotAvailableError
from qbrating.data.load import (
    COLUMN_ALIASES,
    OPTIONAL_PBP_COLUMNS,
    REQUIRED_PBP_COLUMNS,
    _apply_aliases,
    ensure_nonempty,
    filter_season_type,
    validate_pbp_for_passing,
)


def test_validate_pbp_for_passing_ok() -> None:
    df = pd.DataFrame(columns=REQUIRED_PBP_COLUMNS + ["passing_yards"])
    validate_pbp_for_passing(df)


def test_validate_pbp_for_passing_yards_gained_ok() -> None:
    df = pd.DataFrame(columns=REQUIRED_PBP_COLUMNS + ["yards_gained"])
    validate_pbp_for_passing(df)


def test_validate_pbp_for_passing_missing() -> None:
    cols = [c for c in REQUIRED_PBP_COLUMNS if c != "passer_player_name"] + ["passing_yards"]
    with pytest.raises(MissingColumnsError, match="Passing line requires") as exc:
        validate_pbp_for_passing(pd.DataFrame(columns=cols))
    assert exc.value.missing_columns == ["passer_player_name"]
    assert exc.value.context == "passing"


def test_validate_pbp_for_passing_no_yards() -> None:
    with pytest.raises(MissingColumnsError, match="passing_yards OR yards_gained"):
        validate_pbp_for_passing(pd.DataFrame(columns=REQUIRED_PBP_COLUMNS))


def test_apply_aliases_only_when_target_missing() -> None:
    df = pd.DataFrame({"passer": ["P.Mahomes"]})
    assert "passer_player_name" in _apply_aliases(df, COLUMN_ALIASES).columns
    both = pd.DataFrame({"passer": ["a"], "passer_player_name": ["b"]})
    out = _apply_aliases(both, COLUMN_ALIASES)
    assert out["passer_player_name"].tolist() == ["b"]


def test_filter_season_type() -> None:
    df = pd.DataFrame({"season_type": ["REG", "post", "POST"], "x": [1, 2, 3]})
    assert filter_season_type(df, "POST")["x"].tolist() == [2, 3]
    assert filter_season_type(df, "REG")["x"].tolist() == [1]
    assert len(filter_season_type(df, "ALL")) == 3
    with pytest.raises(ValueError, match="season_type"):
        filter_season_type(df, "PRE")


def test_ensure_nonempty_raises() -> None:
    with pytest.raises(SeasonNotAvailableError) as exc:
        ensure_nonempty(pd.DataFrame(), [2031], "POST")
    assert exc.value.year == 2031
    assert exc.value.season_type == "POST"


def test_ensure_nonempty_passes() -> None:
    ensure_nonempty(pd.DataFrame({"a": [1]}), [2024], "REG")


def test_validate_pbp_for_passing_reports_absent_optional(caplog) -> None:
    df = pd.DataFrame(columns=REQUIRED_PBP_COLUMNS + ["yards_gained", "touchdown"])
    with caplog.at_level("INFO", logger="qbrating.data.load"):
        absent = validate_pbp_for_passing(df)
    assert absent == ["pass_attempt", "sack", "passing_yards", "pass_touchdown"]
    assert "fallbacks" in caplog.text


def test_validate_pbp_for_passing_all_optional_present() -> None:
    df = pd.DataFrame(columns=REQUIRED_PBP_COLUMNS + OPTIONAL_PBP_COLUMNS)
    assert validate_pbp_for_passing(df) == []
