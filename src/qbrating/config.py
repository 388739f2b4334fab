"""Configuration with defaults for the passer rating formula and data loading."""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_EVEN, Decimal
from typing import List, Literal

# How unparseable secondary inputs (completions, yards, TDs, INTs) are handled
SecondaryPolicy = Literal["zero", "strict"]


@dataclass(frozen=True)
class RatingConfig:
    """Formula weights, clamp bound, rounding, and input policy."""

    # Every weighted component is clamped to [0, max_weight]
    max_weight: Decimal = Decimal("2.375")

    # Completion %: (pct - baseline) * factor
    completion_baseline: Decimal = Decimal("30")
    completion_factor: Decimal = Decimal("0.05")
    # Yards per attempt: (ypa - baseline) * factor
    yards_baseline: Decimal = Decimal("3")
    yards_factor: Decimal = Decimal("0.25")
    # TD %: pct * factor
    touchdown_factor: Decimal = Decimal("0.2")
    # INT %: max_weight - pct * factor
    interception_factor: Decimal = Decimal("0.25")

    # rating = sum(components) / divisor * scale, rounded half-even to `decimals`
    component_divisor: Decimal = Decimal("6")
    scale: Decimal = Decimal("100")
    decimals: int = 1

    # "zero": bad secondary input becomes 0 (the form's behavior); "strict": raise InvalidInputError
    secondary_policy: SecondaryPolicy = "zero"

    # Play-by-play loading
    default_year: int = 2025
    pbp_columns: List[str] = field(
        default_factory=lambda: [
            "game_id",
            "season_type",
            "week",
            "posteam",
            "defteam",
            "play_type",
            "passer_player_name",
            "complete_pass",
            "incomplete_pass",
            "pass_attempt",
            "sack",
            "passing_yards",
            "yards_gained",
            "pass_touchdown",
            "touchdown",
            "interception",
        ]
    )

    @property
    def quantum(self) -> Decimal:
        """Rounding step for the rating, e.g. Decimal("0.1") for one decimal."""
        return Decimal(1).scaleb(-self.decimals)

    def round_rating(self, value: Decimal) -> Decimal:
        """Round half to even at `decimals` places (13.75 -> 13.8, 13.85 -> 13.8)."""
        return value.quantize(self.quantum, rounding=ROUND_HALF_EVEN)

    @property
    def max_rating(self) -> float:
        """Highest reachable rating (all four components at max_weight), rounded."""
        return float(self.round_rating(4 * self.max_weight / self.component_divisor * self.scale))


# Singleton default config; pass an explicit RatingConfig to override
DEFAULT_CONFIG = RatingConfig()

MAX_WEIGHT = DEFAULT_CONFIG.max_weight
MAX_RATING = DEFAULT_CONFIG.max_rating
