"""Process configuration, read once from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

STORAGE_BACKENDS = ("memory", "postgres", "mysql", "sqlite", "mongodb")
SQL_BACKENDS = ("postgres", "mysql", "sqlite")


@dataclass(frozen=True)
class Settings:
    jwt_secret: str
    storage_backend: str = "memory"
    database_url: str | None = None
    mongodb_uri: str | None = None
    mongodb_database: str = "auth_db"
    cors_origins: str = "*"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    def __repr__(self) -> str:
        # Keep the signing secret and connection credentials out of logs
        return f"Settings(storage_backend={self.storage_backend!r}, port={self.port})"

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "Settings":
        """Build settings from an environment mapping.

        Raises:
            ValueError: JWT_SECRET missing, unknown STORAGE_BACKEND, or the
                connection string the chosen backend needs is missing
        """
        jwt_secret = environ.get("JWT_SECRET")
        if not jwt_secret:
            raise ValueError(
                "JWT_SECRET environment variable is required. "
                "Generate a secure key with: openssl rand -hex 32"
            )

        backend = environ.get("STORAGE_BACKEND", "memory").strip().lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Unknown STORAGE_BACKEND '{backend}'. "
                f"Expected one of: {', '.join(STORAGE_BACKENDS)}"
            )

        database_url = environ.get("DATABASE_URL") or None
        if backend in SQL_BACKENDS and not database_url:
            raise ValueError(f"DATABASE_URL is required for STORAGE_BACKEND={backend}")

        mongodb_uri = environ.get("MONGODB_URI") or None
        if backend == "mongodb" and not mongodb_uri:
            raise ValueError("MONGODB_URI is required for STORAGE_BACKEND=mongodb")

        return cls(
            jwt_secret=jwt_secret,
            storage_backend=backend,
            database_url=database_url,
            mongodb_uri=mongodb_uri,
            mongodb_database=environ.get("MONGODB_DATABASE", "auth_db"),
            cors_origins=environ.get("CORS_ORIGINS", "*"),
            log_level=environ.get("LOG_LEVEL", "INFO"),
            host=environ.get("HOST", "0.0.0.0"),
            port=int(environ.get("PORT", "3000")),
        )


def load_settings() -> Settings:
    """Load ``.env`` (without overriding real env vars) and build Settings."""
    load_dotenv()
    return Settings.from_env(os.environ)
