# core/exceptions.py

class DomainError(Exception):
    """Base class for curve-s domain errors."""
    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when input data is invalid (negative amounts, inverted dates...)."""


class NotFoundError(DomainError):
    """Raised when a project, schedule or valorization does not exist."""


class BusinessRuleError(DomainError):
    """Raised when the data is well-formed but the operation is not allowed
    (e.g. a project without contractual total, deleting the baseline schedule)."""


class ConcurrencyError(DomainError):
    """Raised when optimistic locking detects a stale update."""
