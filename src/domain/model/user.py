from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class NewUser:
    """Registration candidate. The password never reaches a repository."""
    username: str
    email: str


@dataclass
class User:
    """Domain model representing a registered user."""
    id: str
    username: str
    email: str
    created_at: datetime
    updated_at: datetime
    password_hash: str = field(default='', repr=False)
    is_active: bool = True

    def to_public(self) -> dict:
        """Outward view of the user, without the password hash."""
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
            'is_active': self.is_active,
        }
