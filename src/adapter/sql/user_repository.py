"""SQL implementation of UserRepository (PostgreSQL, MySQL, SQLite).

Dialect differences are absorbed by SQLAlchemy; the unique constraints on
``username`` and ``email`` back the registration pre-checks.
"""

import uuid
from datetime import datetime, timezone
from logging import getLogger

from sqlalchemy import select, text
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from adapter.sql.tables import users
from domain.model.errors import DuplicateError, StorageError
from domain.model.user import NewUser, User

logger = getLogger(__name__)


def _describe(error: SQLAlchemyError) -> str:
    # str(error) embeds bound parameters, which include the password hash
    return str(getattr(error, "orig", None) or type(error).__name__)[:200]


def _as_utc(value: datetime) -> datetime:
    # SQLite and MySQL hand back naive datetimes; every stored value is UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlUserRepository:
    def __init__(self, engine: Engine):
        self.engine = engine

    def _to_domain(self, row: RowMapping) -> User:
        """Convert a users row to User domain model."""
        return User(
            id=row['id'],
            username=row['username'],
            email=row['email'],
            created_at=_as_utc(row['created_at']),
            updated_at=_as_utc(row['updated_at']),
            password_hash=row['password_hash'],
            is_active=bool(row['is_active']),
        )

    def create(self, candidate: NewUser, password_hash: str) -> User:
        """Insert a new row and return the User."""
        now = datetime.now(timezone.utc)
        values = {
            'id': str(uuid.uuid4()),
            'username': candidate.username,
            'email': candidate.email,
            'password_hash': password_hash,
            'created_at': now,
            'updated_at': now,
            'is_active': True,
        }
        try:
            with self.engine.begin() as conn:
                conn.execute(users.insert().values(**values))
        except IntegrityError:
            logger.warning("User creation failed: unique constraint", extra={"username": candidate.username})
            raise DuplicateError()
        except SQLAlchemyError as e:
            logger.error("Failed to create user", extra={"username": candidate.username, "error": _describe(e)})
            raise StorageError() from e

        logger.info("User created", extra={"userId": values['id']})
        return User(**values)

    def _find_one(self, column, value: str) -> User | None:
        query = select(users).where(column == value)
        try:
            with self.engine.connect() as conn:
                row = conn.execute(query).mappings().first()
        except SQLAlchemyError as e:
            logger.error("Failed to query users", extra={"column": column.name, "error": _describe(e)})
            raise StorageError() from e
        return self._to_domain(row) if row else None

    def find_by_email(self, email: str) -> User | None:
        return self._find_one(users.c.email, email)

    def find_by_username(self, username: str) -> User | None:
        return self._find_one(users.c.username, username)

    def find_by_id(self, user_id: str) -> User | None:
        return self._find_one(users.c.id, user_id)

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning("SQL ping failed", extra={"error": _describe(e)})
            return False
