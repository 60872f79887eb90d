"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from importlib.metadata import PackageNotFoundError, version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import Settings, load_settings
from api.dependencies import build_user_repository, close_storage, init_storage
from api.errors import register_exception_handlers
from api.routes import auth, health, private
from port.user_repository import UserRepository
from services.token_service import TokenService
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)

SERVICE_NAME = "Auth System"

try:
    VERSION = version("auth-system")
except PackageNotFoundError:
    VERSION = "0.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: storage schema/indexes on startup, pool teardown on shutdown."""
    init_storage(app.state.user_repo)
    logger.info(
        "Auth System started",
        extra={"backend": app.state.settings.storage_backend, "version": VERSION},
    )

    yield  # App runs here

    close_storage(app.state.user_repo)


def _configure_cors(app: FastAPI, cors_origins_env: str) -> None:
    # Browsers don't support credentials with a wildcard origin
    if cors_origins_env == "*":
        cors_origins = ["*"]
        allow_credentials = False
        logger.warning(
            "CORS configured with wildcard origin ('*'). "
            "For production, set CORS_ORIGINS to specific domains (e.g., 'https://app.example.com')"
        )
    else:
        cors_origins = [origin.strip() for origin in cors_origins_env.split(",") if origin.strip()]
        allow_credentials = True
        logger.info("CORS configured with specific origins", extra={"origins": cors_origins})

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def create_app(
    settings: Settings | None = None,
    user_repo: UserRepository | None = None,
) -> FastAPI:
    """Build the application.

    Settings default to the process environment (JWT_SECRET is required).
    ``user_repo`` overrides the configured backend, which tests use to
    inject a repository directly.
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title=SERVICE_NAME,
        description="Username/email/password registration and JWT login",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.user_repo = user_repo if user_repo is not None else build_user_repository(settings)
    app.state.token_service = TokenService(settings.jwt_secret)

    _configure_cors(app, settings.cors_origins)
    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(private.router)
    app.include_router(health.router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": SERVICE_NAME,
            "version": VERSION,
            "status": "running",
        }

    return app


def main():
    """Console entry point: ``auth-system``."""
    import uvicorn

    settings = load_settings()
    setup_structured_logging(settings.log_level)
    app = create_app(settings)

    # Access logs are handled by structured logging
    uvicorn.run(app, host=settings.host, port=settings.port, access_log=False)


if __name__ == "__main__":
    main()
