import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from adapter.sql.tables import metadata

logger = logging.getLogger(__name__)

# Backend name -> SQLAlchemy dialect name of the DATABASE_URL it accepts
SQL_DIALECTS = {
    "postgres": "postgresql",
    "mysql": "mysql",
    "sqlite": "sqlite",
}


def create_sql_engine(database_url: str, backend: str | None = None) -> Engine:
    """Create a pooled engine for DATABASE_URL.

    When ``backend`` is given, the URL dialect must match it, so that
    STORAGE_BACKEND=mysql never silently talks to a PostgreSQL URL.
    """
    url = make_url(database_url)
    if url.drivername == "postgres":
        # Heroku-style scheme, dropped by SQLAlchemy 1.4
        url = url.set(drivername="postgresql")
    if backend is not None and url.get_backend_name() != SQL_DIALECTS[backend]:
        raise ValueError(
            f"DATABASE_URL dialect '{url.get_backend_name()}' does not match "
            f"STORAGE_BACKEND '{backend}'"
        )

    if url.get_backend_name() == "sqlite":
        kwargs: dict[str, object] = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            # A single shared connection keeps an in-memory database alive
            kwargs["poolclass"] = StaticPool
    else:
        kwargs = {"pool_size": 5, "max_overflow": 5, "pool_recycle": 3600}

    engine = create_engine(url, echo=False, pool_pre_ping=True, **kwargs)
    logger.info("SQL engine created", extra={"dialect": url.get_backend_name()})
    return engine


def ensure_schema(engine: Engine) -> None:
    """Create the users table and its unique indexes if missing."""
    metadata.create_all(engine)
    logger.info("SQL schema ensured")
