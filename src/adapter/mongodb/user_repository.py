"""MongoDB implementation of UserRepository."""

import uuid
from datetime import datetime, timezone
from logging import getLogger

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from adapter.mongodb import USERS_COLLECTION_NAME
from adapter.mongodb.indexes import create_index_safe
from domain.model.errors import DuplicateError, StorageError
from domain.model.user import NewUser, User

logger = getLogger(__name__)


class MongoUserRepository:
    def __init__(self, db: Database):
        self.db = db
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create unique indexes backing the username/email invariants."""
        try:
            results = [
                create_index_safe(self.collection, [('email', 1)], 'idx_users_email', unique=True),
                create_index_safe(self.collection, [('username', 1)], 'idx_users_username', unique=True),
            ]
            return all(results)
        except Exception as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=doc['_id'],
            username=doc['username'],
            email=doc['email'],
            created_at=doc['created_at'],
            updated_at=doc['updated_at'],
            password_hash=doc['password_hash'],
            is_active=doc.get('is_active', True),
        )

    def create(self, candidate: NewUser, password_hash: str) -> User:
        """Insert a new user document and return the User."""
        user_id = str(uuid.uuid4())
        now = datetime.now(timezone.utc)
        user_doc = {
            '_id': user_id,
            'username': candidate.username,
            'email': candidate.email,
            'password_hash': password_hash,
            'created_at': now,
            'updated_at': now,
            'is_active': True,
        }
        try:
            self.collection.insert_one(user_doc)
        except DuplicateKeyError:
            logger.warning("User creation failed: duplicate key", extra={"username": candidate.username})
            raise DuplicateError()
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"username": candidate.username, "error": str(e)})
            raise StorageError() from e

        logger.info("User created", extra={"userId": user_id})
        return self._to_domain(user_doc)

    def _find_one(self, query: dict) -> User | None:
        try:
            doc = self.collection.find_one(query)
        except PyMongoError as e:
            logger.error("Failed to query users", extra={"fields": list(query), "error": str(e)})
            raise StorageError() from e
        return self._to_domain(doc) if doc else None

    def find_by_email(self, email: str) -> User | None:
        return self._find_one({'email': email})

    def find_by_username(self, username: str) -> User | None:
        return self._find_one({'username': username})

    def find_by_id(self, user_id: str) -> User | None:
        return self._find_one({'_id': user_id})

    def ping(self) -> bool:
        try:
            self.db.client.admin.command('ping')
            return True
        except PyMongoError as e:
            logger.warning("MongoDB ping failed", extra={"error": str(e)[:200]})
            return False
