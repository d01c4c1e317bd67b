class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(ValidationError):
    """Raised when login credentials or role are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NoOpenPunchError(ValidationError):
    """Raised on punch-out when there is no punch-in for today."""


class ConfigurationError(ValidationError):
    """Raised when pay-period settings cannot be used (empty start-day set)."""
