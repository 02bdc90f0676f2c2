"""Exception types raised by the fantasy cricket scorer."""


class FantasyError(Exception):
    """Base class for scorer errors."""


class ValidationError(FantasyError):
    """A submitted team is malformed or breaks composition rules."""

    def __init__(self, message: str, details: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or []


class IngestionError(FantasyError):
    """Match results could not be read or parsed."""


class PersistenceError(FantasyError):
    """The team store failed to read or write."""
