"""
NFL passer rating: four weighted components, each clamped to [0, 2.375], averaged.

  completion        = clamp(((cmp / att) * 100 - 30) * 0.05)
  yards_per_attempt = clamp((yds / att - 3) * 0.25)
  touchdown         = clamp(((td / att) * 100) * 0.2)
  interception      = clamp(2.375 - ((int / att) * 100) * 0.25)
  rating            = round_half_even(sum / 6 * 100, 1)

Arithmetic is decimal (28 significant digits, half-even), so a rating that lands
exactly on a .x5 tie such as 13.75 rounds to 13.8 instead of following the
binary float just below it. The interception term clamps the difference
(max_weight - penalty), not the raw penalty. Everything here is a pure function
of its arguments.
"""

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal, localcontext
from typing import Any, Dict, Optional, Union

from qbrating.config import DEFAULT_CONFIG, RatingConfig
from qbrating.core.parse import PassingStats, parse_number, parse_stats
from qbrating.utils.math import clamp

logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal]

# Fixed context so results do not depend on the caller's decimal settings
DECIMAL_CONTEXT = Context(prec=28, rounding=ROUND_HALF_EVEN)


@dataclass(frozen=True)
class WeightedComponents:
    """The four clamped terms of the rating (exact Decimals), each in [0, max_weight]."""

    completion: Decimal
    yards_per_attempt: Decimal
    touchdown: Decimal
    interception: Decimal

    @property
    def total(self) -> Decimal:
        return self.completion + self.yards_per_attempt + self.touchdown + self.interception

    def as_dict(self) -> Dict[str, float]:
        """Components as floats, for tables and printing."""
        return {
            "completion": float(self.completion),
            "yards_per_attempt": float(self.yards_per_attempt),
            "touchdown": float(self.touchdown),
            "interception": float(self.interception),
        }


@dataclass(frozen=True)
class RatingResult:
    """Rating plus the components and parsed stats it was computed from."""

    rating: float
    components: WeightedComponents
    stats: PassingStats

    @property
    def defaulted(self) -> tuple:
        """Secondary fields that were unparseable and treated as 0."""
        return self.stats.defaulted


def _dec(x: Number) -> Decimal:
    number = parse_number(x)
    if number is None:
        raise TypeError(f"Expected a finite number, got {x!r}")
    return number


def _clamp_weight(x: Decimal, config: RatingConfig) -> Decimal:
    return clamp(x, Decimal(0), config.max_weight)


def weighted_completion(completions: Number, attempts: Number, config: RatingConfig = DEFAULT_CONFIG) -> Decimal:
    with localcontext(DECIMAL_CONTEXT):
        pct = (_dec(completions) / _dec(attempts)) * 100
        return _clamp_weight((pct - config.completion_baseline) * config.completion_factor, config)


def weighted_yards_per_attempt(passing_yards: Number, attempts: Number, config: RatingConfig = DEFAULT_CONFIG) -> Decimal:
    with localcontext(DECIMAL_CONTEXT):
        ypa = _dec(passing_yards) / _dec(attempts)
        return _clamp_weight((ypa - config.yards_baseline) * config.yards_factor, config)


def weighted_touchdowns(touchdowns: Number, attempts: Number, config: RatingConfig = DEFAULT_CONFIG) -> Decimal:
    with localcontext(DECIMAL_CONTEXT):
        pct = (_dec(touchdowns) / _dec(attempts)) * 100
        return _clamp_weight(pct * config.touchdown_factor, config)


def weighted_interceptions(interceptions: Number, attempts: Number, config: RatingConfig = DEFAULT_CONFIG) -> Decimal:
    # Clamp after subtracting from max_weight: more than 9.5% INT floors at 0.
    with localcontext(DECIMAL_CONTEXT):
        pct = (_dec(interceptions) / _dec(attempts)) * 100
        return _clamp_weight(config.max_weight - pct * config.interception_factor, config)


def compute_components(stats: PassingStats, config: Optional[RatingConfig] = None) -> WeightedComponents:
    """Weighted components for already-parsed stats (stats.attempts > 0)."""
    cfg = config or DEFAULT_CONFIG
    att = stats.attempts
    return WeightedComponents(
        completion=weighted_completion(stats.completions, att, cfg),
        yards_per_attempt=weighted_yards_per_attempt(stats.passing_yards, att, cfg),
        touchdown=weighted_touchdowns(stats.touchdowns, att, cfg),
        interception=weighted_interceptions(stats.interceptions, att, cfg),
    )


def rating_from_components(components: WeightedComponents, config: Optional[RatingConfig] = None) -> float:
    """Average the components over the divisor, scale, and round half to even."""
    cfg = config or DEFAULT_CONFIG
    with localcontext(DECIMAL_CONTEXT):
        return float(cfg.round_rating(components.total / cfg.component_divisor * cfg.scale))


def compute(
    attempts: Any,
    completions: Any = 0,
    touchdowns: Any = 0,
    interceptions: Any = 0,
    passing_yards: Any = 0,
    *,
    config: Optional[RatingConfig] = None,
) -> RatingResult:
    """
    Compute passer rating from raw inputs (numbers or numeric text).

    Raises InvalidInputError if attempts is not a number, NoAttemptsError if it
    is <= 0. Secondary inputs follow config.secondary_policy.
    """
    cfg = config or DEFAULT_CONFIG
    stats = parse_stats(
        attempts,
        completions=completions,
        passing_yards=passing_yards,
        touchdowns=touchdowns,
        interceptions=interceptions,
        config=cfg,
    )
    components = compute_components(stats, cfg)
    rating = rating_from_components(components, cfg)
    logger.debug("Rating %.1f from %s (components=%s)", rating, stats, components.as_dict())
    return RatingResult(rating=rating, components=components, stats=stats)


def passer_rating(
    attempts: Any,
    completions: Any = 0,
    touchdowns: Any = 0,
    interceptions: Any = 0,
    passing_yards: Any = 0,
    *,
    config: Optional[RatingConfig] = None,
) -> float:
    """Same as compute() but returns only the rating."""
    return compute(attempts, completions, touchdowns, interceptions, passing_yards, config=config).rating
