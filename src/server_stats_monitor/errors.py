"""Exception hierarchy for Server Stats Monitor."""


class StatsMonitorError(Exception):
    """Base class for all monitor errors."""


class DecodeError(StatsMonitorError):
    """The stats payload could not be turned into a snapshot."""


class SchemaError(DecodeError):
    """The payload does not have the expected number of fields."""
    
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} values, got {actual}")


class FieldParseError(DecodeError):
    """A named field is not a valid base-10 integer."""
    
    def __init__(self, field: str, text: str, reason: str = "invalid integer") -> None:
        self.field = field
        self.text = text
        self.reason = reason
        super().__init__(f"error parsing {field}: {reason} {text!r}")


class FetchError(StatsMonitorError):
    """The stats endpoint could not be read."""
    
    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class RetriesExhaustedError(StatsMonitorError):
    """Every attempt allowed by a retry policy failed."""
    
    def __init__(self, attempts: int, last_error: BaseException | None) -> None:
        self.attempts = attempts
        self.last_error = last_error
        message = f"giving up after {attempts} attempt{'s' if attempts != 1 else ''}"
        if last_error is not None:
            message += f": {last_error}"
        super().__init__(message)
