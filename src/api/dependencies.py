"""Storage backend wiring and FastAPI dependency providers."""

import logging

from fastapi import Request

from adapter.memory.user_repository import InMemoryUserRepository
from adapter.mongodb.connection import create_mongodb_client
from adapter.mongodb.user_repository import MongoUserRepository
from adapter.sql.connection import create_sql_engine, ensure_schema
from adapter.sql.user_repository import SqlUserRepository
from api.config import SQL_BACKENDS, Settings
from port.user_repository import UserRepository
from services.token_service import TokenService

logger = logging.getLogger(__name__)


def build_user_repository(settings: Settings) -> UserRepository:
    """Create the repository for the configured backend. Called once at startup."""
    backend = settings.storage_backend
    if backend == "memory":
        repo: UserRepository = InMemoryUserRepository()
    elif backend in SQL_BACKENDS:
        repo = SqlUserRepository(create_sql_engine(settings.database_url, backend))
    elif backend == "mongodb":
        client = create_mongodb_client(settings.mongodb_uri)
        repo = MongoUserRepository(client[settings.mongodb_database])
    else:
        raise ValueError(f"Unknown storage backend: {backend}")

    logger.info("User repository ready", extra={"backend": backend})
    return repo


def init_storage(repo: UserRepository) -> None:
    """Create the schema or indexes the backend's uniqueness rules rely on."""
    if isinstance(repo, SqlUserRepository):
        ensure_schema(repo.engine)
    elif isinstance(repo, MongoUserRepository):
        if repo.ensure_indexes():
            logger.info("MongoDB indexes verified/created successfully")
        else:
            logger.warning("Failed to create some MongoDB indexes")


def close_storage(repo: UserRepository) -> None:
    if isinstance(repo, SqlUserRepository):
        repo.engine.dispose()
    elif isinstance(repo, MongoUserRepository):
        repo.db.client.close()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_user_repo(request: Request) -> UserRepository:
    return request.app.state.user_repo


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service
