"""QB passing lines from play-by-play and game-log rating."""

from qbrating.qb.game_log import game_log_from_pbp, rate_game_log
from qbrating.qb.model import (
    PassingLine,
    passing_line_from_pbp,
    qb_pass_attempts,
    rate_passing_line,
)

__all__ = [
    "PassingLine",
    "game_log_from_pbp",
    "passing_line_from_pbp",
    "qb_pass_attempts",
    "rate_game_log",
    "rate_passing_line",
]
