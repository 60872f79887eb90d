from typing import Protocol

from domain.model.user import NewUser, User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Lookups return None when nothing matches. Storage failures raise
    StorageError; a uniqueness conflict on create raises DuplicateError.
    """
    def create(self, candidate: NewUser, password_hash: str) -> User:
        """Persist a new user and return the stored record."""
        ...

    def find_by_email(self, email: str) -> User | None:
        """Find a user by exact email."""
        ...

    def find_by_username(self, username: str) -> User | None:
        """Find a user by exact username."""
        ...

    def find_by_id(self, user_id: str) -> User | None:
        """Find a user by ID."""
        ...

    def ping(self) -> bool:
        """Return True if the backing store is reachable."""
        ...
