"""CLI entrypoint: python -m qbrating [rate|card|pbp]."""

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

# Ensure src is on path when run as python -m qbrating
if __name__ == "__main__":
    src = Path(__file__).resolve().parent.parent
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

from qbrating.config import DEFAULT_CONFIG, RatingConfig
from qbrating.core.messages import error_message, format_rating_message
from qbrating.core.parse import FIELD_LABELS
from qbrating.core.rating import RatingResult, compute
from qbrating.errors import RatingError


def _print_components(result: RatingResult) -> None:
    for name, value in result.components.as_dict().items():
        print(f"  {name:18} {value:.4f}")
    for name in result.defaulted:
        print(f"  ({FIELD_LABELS[name]} was not a number; used 0)")


def _rate(args, cfg: RatingConfig) -> int:
    try:
        result = compute(
            args.attempts,
            args.completions,
            args.touchdowns,
            args.interceptions,
            args.yards,
            config=cfg,
        )
    except RatingError as e:
        print(error_message(e))
        return 1
    print(format_rating_message(args.player, result))
    if args.components:
        _print_components(result)
    if args.cmd == "card":
        from qbrating.viz.rating_card import render_rating_card
        path = render_rating_card(args.player, result, outpath=args.out)
        print(f"Wrote {path}")
    return 0


def _pbp(args, cfg: RatingConfig) -> int:
    from qbrating.data import SeasonNotAvailableError, get_pbp
    from qbrating.qb.game_log import game_log_from_pbp
    from qbrating.qb.model import passing_line_from_pbp, rate_passing_line

    if not args.qb or not args.team:
        print("pbp requires --qb and --team")
        return 2
    try:
        pbp = get_pbp([args.year], season_type=args.season_type, config=cfg)
    except SeasonNotAvailableError as e:
        print(str(e))
        return 1
    line = passing_line_from_pbp(pbp, args.qb, args.team)
    if line is None:
        print(f"No pass plays for {args.qb} ({args.team}) in {args.year} {args.season_type}")
        return 1
    print(f"{args.qb} ({args.team}) {args.year} {args.season_type}: "
          f"{line.cmp}/{line.att}, {line.yds} yds, {line.td} TD, {line.int_} INT in {line.games} game(s)")
    try:
        result = rate_passing_line(line, config=cfg)
    except RatingError as e:
        print(error_message(e))
        return 1
    print(format_rating_message(args.qb, result))
    if args.components:
        _print_components(result)
    if args.by_game:
        log = game_log_from_pbp(pbp, args.qb, args.team, config=cfg)
        cols = ["game_id", "attempts", "completions", "passing_yards", "touchdowns", "interceptions", "rating"]
        print(log[cols].to_string(index=False))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    import argparse
    p = argparse.ArgumentParser(description="NFL passer rating")
    p.add_argument("cmd", nargs="?", default="rate", choices=["rate", "card", "pbp"],
                   help="rate: print rating; card: also render PNG; pbp: rate a QB from nflverse play-by-play")
    p.add_argument("--player", default="Player", help="Display name")
    p.add_argument("--attempts", default="", help="Pass attempts (required for rate/card)")
    p.add_argument("--completions", default="0")
    p.add_argument("--yards", default="0", help="Passing yards")
    p.add_argument("--touchdowns", default="0")
    p.add_argument("--interceptions", default="0")
    p.add_argument("--strict", action="store_true", help="Reject non-numeric secondary inputs instead of using 0")
    p.add_argument("--components", action="store_true", help="Also print the four weighted components")
    p.add_argument("--out", default="outputs/rating_card.png", help="card: output PNG path")
    p.add_argument("--year", type=int, default=DEFAULT_CONFIG.default_year)
    p.add_argument("--qb", default=None, help="pbp: QB name as in passer_player_name (e.g. 'P.Mahomes')")
    p.add_argument("--team", default=None, help="pbp: team abbr (posteam)")
    p.add_argument("--season-type", default="POST", choices=["REG", "POST", "ALL"])
    p.add_argument("--by-game", action="store_true", help="pbp: also print a per-game rating table")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s %(message)s",
    )
    cfg = replace(DEFAULT_CONFIG, secondary_policy="strict") if args.strict else DEFAULT_CONFIG
    if args.cmd == "pbp":
        return _pbp(args, cfg)
    return _rate(args, cfg)


if __name__ == "__main__":
    sys.exit(main())
