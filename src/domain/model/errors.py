"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""

    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DomainError):
    """Input violates a format or strength rule."""

    default_message = "Validation error"


class InvalidCredentialsError(DomainError):
    """Unknown username or wrong password. Deliberately indistinguishable."""

    default_message = "Invalid credentials"


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""

    default_message = "User already exists"


class InvalidTokenError(DomainError):
    """Bearer token is malformed, badly signed or expired."""

    default_message = "Invalid or expired token"


class TokenExpiredError(InvalidTokenError):
    """Bearer token signature is valid but its lifetime has passed."""


class StorageError(DomainError):
    """Storage backend failed for a reason other than a uniqueness conflict."""

    default_message = "Database error"


class InternalError(DomainError):
    """Unexpected failure inside the service (hashing, signing)."""


class PasswordHashError(InternalError):
    """Stored password hash could not be parsed or checked."""
