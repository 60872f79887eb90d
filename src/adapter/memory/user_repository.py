"""In-memory implementation of UserRepository.

Data lives for the lifetime of the process. Uniqueness is not enforced on
insert; callers check availability with the lookups first.
"""

import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone

from domain.model.user import NewUser, User


class InMemoryUserRepository:
    def __init__(self):
        self._lock = threading.Lock()
        self._store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, candidate: NewUser, password_hash: str) -> User:
        now = datetime.now(timezone.utc)
        user = User(
            id=str(uuid.uuid4()),
            username=candidate.username,
            email=candidate.email,
            created_at=now,
            updated_at=now,
            password_hash=password_hash,
            is_active=True,
        )
        with self._lock:
            self._store[user.id] = user
        return replace(user)

    # ── read operations ──────────────────────────────────────

    def find_by_email(self, email: str) -> User | None:
        with self._lock:
            for user in self._store.values():
                if user.email == email:
                    return replace(user)
        return None

    def find_by_username(self, username: str) -> User | None:
        with self._lock:
            for user in self._store.values():
                if user.username == username:
                    return replace(user)
        return None

    def find_by_id(self, user_id: str) -> User | None:
        with self._lock:
            user = self._store.get(user_id)
        return replace(user) if user else None

    def ping(self) -> bool:
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
