class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a caller lacks permission for an action."""


class InvalidTokenError(AuthorizationError):
    """Raised when a session token has a bad signature or is expired."""


class NotFoundError(DomainError):
    """Raised when an employee or leave request is unknown."""


class StoreError(DomainError):
    """Raised when the spreadsheet store cannot be read or written."""
