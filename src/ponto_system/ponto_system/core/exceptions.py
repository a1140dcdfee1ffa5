class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MissingContractProfileError(DomainError):
    """Raised when hours are evaluated without a contract profile."""
