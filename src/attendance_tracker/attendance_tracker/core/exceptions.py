class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class EmptyResultError(DomainError):
    """Raised when a report or export matches no attendance records."""
