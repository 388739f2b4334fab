"""Display strings for a rating or a rating error, in the wording a rating form shows."""

from typing import Any, Optional

from qbrating.config import RatingConfig
from qbrating.core.parse import FIELD_LABELS
from qbrating.core.rating import RatingResult, compute
from qbrating.errors import RatingError

NO_ATTEMPTS_MESSAGE = "The player must have at least 1 pass attempt."


def format_rating_message(player_name: str, result: RatingResult) -> str:
    """
    e.g. "Tom Brady's QB Rating is: 158.3".

    Always one decimal place, so a zero rating reads "0.0" (a desktop decimal
    ToString of the same value may print a bare "0").
    """
    return f"{player_name}'s QB Rating is: {result.rating:.1f}"


def error_message(error: RatingError) -> str:
    """User-facing message for an InvalidInput or NoAttempts error."""
    if error.kind == "NoAttempts":
        return NO_ATTEMPTS_MESSAGE
    label = FIELD_LABELS.get(error.field or "attempts", error.field)
    return f"Invalid number in {label}."


def rate_player(
    player_name: str,
    attempts: Any,
    completions: Any = 0,
    touchdowns: Any = 0,
    interceptions: Any = 0,
    passing_yards: Any = 0,
    *,
    config: Optional[RatingConfig] = None,
) -> str:
    """Compute and format in one call; either error kind becomes its message."""
    try:
        result = compute(attempts, completions, touchdowns, interceptions, passing_yards, config=config)
    except RatingError as e:
        return error_message(e)
    return format_rating_message(player_name, result)
