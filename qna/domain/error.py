"""Domain layer errors."""

from dataclasses import dataclass


class DomainError(Exception):
    """Base domain error."""

    pass


@dataclass(frozen=True)
class FieldError:
    """A single invalid or missing field."""

    path: str
    message: str
    error_code: str = "invalid"


class ValidationError(DomainError):
    """Domain validation error.

    Carries every field error found, not just the first one.
    """

    def __init__(self, errors: list[FieldError], message: str = "Validation failed"):
        self.errors = errors
        super().__init__(message)


class ConflictError(DomainError):
    """Raised when a unique field is already taken."""

    pass


class AuthenticationError(DomainError):
    """Raised when credentials do not match."""

    pass


class AuthorizationError(DomainError):
    """Raised when a request lacks a usable session."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
