class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidClassDay(ValidationError):
    """Raised when presence is marked on a date that is not a class day."""


class NotFound(DomainError):
    """Raised when a student or record does not exist."""


class NoAttendanceRecord(NotFound):
    """Raised when a dismissal targets a date without a presence record."""


class StoreUnavailable(DomainError):
    """Raised when the persistence layer fails."""
