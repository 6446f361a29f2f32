"""Exception hierarchy."""


class SnapUIError(Exception):
    """Base class for all snapui errors."""

    pass


class ValidationError(SnapUIError):
    """Validation failed."""

    pass


class JSONParseError(SnapUIError):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


class LimitExceededError(JSONParseError):
    """JSON content is larger or deeper than allowed."""

    pass
