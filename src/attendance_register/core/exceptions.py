class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a required field is missing or input is malformed."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class ImportParseError(DomainError):
    """Raised when a roster upload yields zero valid records."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class StoreError(DomainError):
    """Raised when the record store cannot be read or written."""
