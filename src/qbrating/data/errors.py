"""Play-by-play data errors: nothing published yet, or a schema without passing columns."""

from typing import List, Sequence


class SeasonNotAvailableError(Exception):
    """No PBP rows for the requested years/season_type (e.g. data not published yet)."""

    def __init__(self, years: Sequence[int], season_type: str) -> None:
        self.years = list(years)
        self.year = self.years[0] if self.years else None
        self.season_type = season_type
        super().__init__(
            f"No play-by-play rows for year(s) {self.years} and season_type={season_type!r}; "
            "data may not be published yet."
        )


class MissingColumnsError(Exception):
    """PBP lacks columns needed to build a passing line."""

    def __init__(self, message: str, *, missing_columns: List[str] | None = None, context: str = "") -> None:
        super().__init__(message)
        self.missing_columns = missing_columns or []
        self.context = context
