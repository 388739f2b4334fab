"""Rating exceptions. Exactly two kinds reach callers: InvalidInput and NoAttempts."""

from typing import Literal

ErrorKind = Literal["InvalidInput", "NoAttempts"]


class RatingError(Exception):
    """Base for recoverable rating failures; `kind` tells the caller which message to show."""

    kind: ErrorKind

    def __init__(self, message: str, *, field: str | None = None, value: object = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidInputError(RatingError):
    """Raised when pass attempts (or a secondary field under the strict policy) is not a number."""

    kind: ErrorKind = "InvalidInput"

    def __init__(self, message: str, *, field: str = "attempts", value: object = None) -> None:
        super().__init__(message, field=field, value=value)


class NoAttemptsError(RatingError):
    """Raised when pass attempts parses but is zero or negative."""

    kind: ErrorKind = "NoAttempts"

    def __init__(self, message: str, *, value: object = None) -> None:
        super().__init__(message, field="attempts", value=value)
