class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidDateError(ValidationError):
    """Raised when a date cannot be normalized to YYYY-MM-DD."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class UnauthenticatedError(DomainError):
    """Raised when a bearer token is missing, unknown or expired."""


class ConflictError(DomainError):
    """Raised when a unique identity is already taken."""


class NotFoundError(DomainError):
    """Raised when the addressed resource does not exist."""


class RouteNotFoundError(NotFoundError):
    pass


class ProfileMissingError(NotFoundError):
    pass


class NoRecordsForMonthError(NotFoundError):
    pass


class RecordNotFoundError(NotFoundError):
    pass


class RateLimitedError(DomainError):
    """Raised when a caller exceeds the per-minute request budget."""
