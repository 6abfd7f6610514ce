"""
FastAPI Application Entry Point.

This is the main entry point for the Notepad API.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notepad.api import health
from notepad.api import router as api_router
from notepad.core.concurrency import shutdown_pools
from notepad.core.config import get_app_config
from notepad.core.database import Database
from notepad.core.exception_handlers import register_exception_handlers
from notepad.core.logging import get_logger, setup_logging
from notepad.core.middleware import RequestContextMiddleware

logger = get_logger(__name__)

_app: FastAPI | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Owns the storage handle unless one was injected through `create_app`.
    """
    app_config = get_app_config()
    setup_logging(level=app_config.logging.level)

    if app_config.features.security_startup_checks_enabled:
        from notepad.core.startup_checks import run_startup_checks
        run_startup_checks()

    owns_database = getattr(app.state, "database", None) is None
    if owns_database:
        app.state.database = Database.from_config()

    database: Database = app.state.database
    if app_config.database.init_on_startup:
        await database.create_tables()

    logger.info(
        "Application starting",
        extra={
            "app_name": app_config.application.name,
            "env": app_config.application.environment,
        },
    )
    try:
        yield
    finally:
        logger.info("Application shutting down")
        await shutdown_pools()
        if owns_database:
            await database.dispose()
            app.state.database = None


def create_app(database: Database | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: Storage handle to use instead of building one from
            config. The caller keeps ownership and disposes it.
    """
    app_config = get_app_config()
    app_settings = app_config.application
    docs_enabled = app_settings.docs_enabled

    app = FastAPI(
        title=app_settings.name,
        description=app_settings.description,
        version=app_settings.version,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.database = database

    app.add_middleware(RequestContextMiddleware)

    cors_origins = app_settings.cors.origins
    if cors_origins:
        # Browsers reject credentialed responses for a wildcard origin
        allow_credentials = "*" not in cors_origins
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=allow_credentials,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    app.include_router(health.router, tags=["health"], include_in_schema=False)
    app.include_router(api_router, prefix=app_settings.api_prefix)

    return app


def get_app() -> FastAPI:
    """
    Get the application instance (lazy initialization).

    This function creates the app on first call and caches it.
    Use this instead of importing `app` directly to avoid
    import-time configuration errors.
    """
    global _app
    if _app is None:
        _app = create_app()
    return _app


# For uvicorn: `uvicorn notepad.main:app`
def __getattr__(name: str) -> FastAPI:
    """Support lazy access to `app` for uvicorn compatibility."""
    if name == "app":
        return get_app()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
