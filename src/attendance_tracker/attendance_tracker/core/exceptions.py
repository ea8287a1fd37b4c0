class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "DOMAIN_ERROR"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "VALIDATION_ERROR"


class LocationDenied(DomainError):
    """Raised when a coordinate is outside the permitted geofence."""

    code = "LOCATION_DENIED"


class AlreadyCheckedIn(DomainError):
    code = "ALREADY_CHECKED_IN"


class NoOpenSession(DomainError):
    code = "NO_OPEN_SESSION"


class NotPending(DomainError):
    """Raised when a leave request is no longer awaiting review."""

    code = "NOT_PENDING"


class InsufficientBalance(DomainError):
    code = "INSUFFICIENT_BALANCE"


class NotFound(DomainError):
    code = "NOT_FOUND"
