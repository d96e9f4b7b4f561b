"""Domain errors raised by the validation pipeline and record services."""

from typing import Any, Optional


class EventBookError(Exception):
    """Base exception for everything raised by this package."""
    pass


class ConfigurationError(EventBookError, ValueError):
    """Raised when required configuration is missing. Fatal at startup."""
    pass


class ValidationError(EventBookError):
    """Raised when a field fails validation or normalization.

    Attributes:
        field: Name of the offending field, when known
        value: The rejected value, when useful to report
    """

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value


class ReferentialError(EventBookError):
    """Raised when a booking points at an event that does not exist."""

    def __init__(self, event_id: Any):
        super().__init__("Referenced event does not exist.")
        self.event_id = event_id
        self.field = "eventId"


class ConstraintError(EventBookError):
    """Raised when the storage layer rejects a write on a unique constraint."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class RecordNotFoundError(EventBookError):
    """Raised when a record looked up by id or slug does not exist."""

    def __init__(self, kind: str, key: Any):
        super().__init__(f"{kind} not found")
        self.kind = kind
        self.key = key
