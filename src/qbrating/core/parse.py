"""
Input parsing policy for the rating formula.

Pass attempts are parsed strictly: anything that is not a finite number raises
InvalidInputError, and a non-positive count raises NoAttemptsError (the formula
divides by attempts). Secondary fields follow RatingConfig.secondary_policy:
"zero" substitutes 0 for anything unparseable, "strict" raises InvalidInputError.
"""

import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Tuple

from qbrating.config import DEFAULT_CONFIG, RatingConfig, SecondaryPolicy
from qbrating.errors import InvalidInputError, NoAttemptsError

logger = logging.getLogger(__name__)

# Leading or trailing sign, digits with loose comma group separators, optional fraction.
_NUMBER_RE = re.compile(r"^(?P<lead>[+-])?(?P<int>\d[\d,]*)?(?:\.(?P<frac>\d*))?(?P<trail>[+-])?$")

SECONDARY_FIELDS = ("completions", "passing_yards", "touchdowns", "interceptions")

FIELD_LABELS = {
    "attempts": "Pass Attempts",
    "completions": "Pass Completions",
    "passing_yards": "Passing Yards",
    "touchdowns": "Passing Touchdowns",
    "interceptions": "Interceptions",
}


def parse_number(value: Any) -> Optional[Decimal]:
    """
    Parse a raw input value as a finite Decimal; None if it is not a number.

    Accepts int/float/Decimal and numeric text: "12", " 7.5 ", "-3", "3-",
    "1,250", "1,2" (group separators are not position-checked). Floats go through
    their shortest str, so 0.1 becomes Decimal("0.1").
    Rejects bools, empty text, exponents, NaN and infinities.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value)) if math.isfinite(value) else None
    m = _NUMBER_RE.match(str(value).strip())
    if m is None or (m.group("lead") and m.group("trail")):
        return None
    digits = (m.group("int") or "").replace(",", "")
    frac = m.group("frac") or ""
    if not digits and not frac:
        return None
    sign = m.group("lead") or m.group("trail") or ""
    return Decimal(f"{sign}{digits or 0}" + (f".{frac}" if frac else ""))


def parse_attempts(value: Any) -> Decimal:
    """Parse pass attempts; must be a number greater than zero."""
    attempts = parse_number(value)
    if attempts is None:
        raise InvalidInputError(f"Pass attempts is not a number: {value!r}", field="attempts", value=value)
    if attempts <= 0:
        raise NoAttemptsError(f"Pass attempts must be greater than 0, got {attempts:g}", value=value)
    return attempts


def parse_secondary(value: Any, field: str, policy: SecondaryPolicy = "zero") -> Tuple[Decimal, bool]:
    """
    Parse a secondary field. Returns (number, defaulted).

    With policy "zero" an unparseable value yields (Decimal(0), True); with "strict" it
    raises InvalidInputError naming the field.
    """
    number = parse_number(value)
    if number is not None:
        return number, False
    if policy == "strict":
        raise InvalidInputError(f"{FIELD_LABELS.get(field, field)} is not a number: {value!r}", field=field, value=value)
    if value is not None and str(value).strip() != "":
        logger.warning("Unparseable %s %r; using 0", field, value)
    return Decimal(0), True


@dataclass(frozen=True)
class PassingStats:
    """Parsed passing inputs plus the names of secondary fields that fell back to 0."""

    attempts: Decimal
    completions: Decimal
    passing_yards: Decimal
    touchdowns: Decimal
    interceptions: Decimal
    defaulted: Tuple[str, ...] = ()


def parse_stats(
    attempts: Any,
    completions: Any = 0,
    passing_yards: Any = 0,
    touchdowns: Any = 0,
    interceptions: Any = 0,
    config: Optional[RatingConfig] = None,
) -> PassingStats:
    """Parse all five raw inputs. Attempts are checked first, as the form did."""
    cfg = config or DEFAULT_CONFIG
    att = parse_attempts(attempts)
    raw = {
        "completions": completions,
        "passing_yards": passing_yards,
        "touchdowns": touchdowns,
        "interceptions": interceptions,
    }
    values = {}
    defaulted = []
    for name in SECONDARY_FIELDS:
        values[name], was_defaulted = parse_secondary(raw[name], name, cfg.secondary_policy)
        if was_defaulted:
            defaulted.append(name)
    return PassingStats(attempts=att, defaulted=tuple(defaulted), **values)
