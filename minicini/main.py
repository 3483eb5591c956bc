"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from minicini.config import Settings, get_settings
from minicini.infrastructure.database import Database
from minicini.infrastructure.logging.log_config import setup_logging
from minicini.presentation.api.error_handlers import register_error_handlers
from minicini.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — open the connection pool and create tables."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    database = Database(
        settings.database_url,
        echo=settings.sql_echo,
        pool_size=settings.db_pool_size,
    )
    await database.create_tables()
    app.state.database = database
    logger.info("Store ready (%s)", database.engine.url.render_as_string(hide_password=True))

    yield

    # Shutdown
    await database.dispose()
    logger.info("Store connections closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    setup_logging(settings)
    logger.info("Mini_Cini API listening on http://localhost:%d", settings.port)
    logger.info("Health check: http://localhost:%d/health", settings.port)
    uvicorn.run(
        "minicini.main:app",
        host=settings.host,
        port=settings.port,
        reload=(settings.app_env == "development"),
    )


if __name__ == "__main__":
    run()
