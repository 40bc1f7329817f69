import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from blogger import __version__
from blogger.adapters.sqlite.migrator import SQLiteMigrator
from blogger.api.deps import get_config, get_settings
from blogger.api.error_handlers import register_error_handlers
from blogger.api.routes import backend_posts
from blogger.domain.errors import ConfigError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load config on startup (fail-fast)
    try:
        get_config(settings)
    except ConfigError:
        logger.critical("Config load failed from %s", settings.config_path, exc_info=True)
        raise

    if settings.auto_migrate:
        applied = SQLiteMigrator(settings.db_path).run_migrations()
        if applied:
            logger.info("Applied %d migration(s) to %s", len(applied), settings.db_path)

    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Blogger Backend",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url=None,
    )

    # --- Routers ---
    app.include_router(backend_posts.router, prefix="/backend/posts", tags=["Backend Posts"])

    register_error_handlers(app)

    @app.get("/health")
    def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "service": "blogger", "version": __version__}

    return app


app = create_app()
