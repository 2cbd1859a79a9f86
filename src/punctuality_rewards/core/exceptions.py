from .enums import ErrorKind


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind = ErrorKind.PROCESSING_FAILED
    status_code = 500


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    kind = ErrorKind.INVALID_REQUEST
    status_code = 400


class OutsideWindowError(DomainError):
    """Raised when a check-in arrives outside the morning window."""

    kind = ErrorKind.OUTSIDE_WINDOW
    status_code = 400


class DuplicateCheckInError(DomainError):
    """Raised when the user already checked in on the current civil day."""

    kind = ErrorKind.DUPLICATE_CHECK_IN
    status_code = 409


class InvalidTokenError(DomainError):
    """Raised when no QR token matches the code, the instant and the company."""

    kind = ErrorKind.INVALID_TOKEN
    status_code = 400


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    kind = ErrorKind.FORBIDDEN
    status_code = 403


class NotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND
    status_code = 404
