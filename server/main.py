from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
import uvicorn

from server.core.config import Settings, get_settings
from server.core.context import QuoteContext, build_context
from server.routers import api_router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events"""
    context: QuoteContext = app.state.context

    # Startup: a store that cannot be opened aborts the server
    await context.startup()
    logger.info("Quote context initialized")

    yield

    # Shutdown
    await context.shutdown()


def create_app(
    context: QuoteContext | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        context: Pre-built QuoteContext (tests inject doubles here)
        settings: Settings used to build the context when none is given
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="USD/BRL quote service",
        lifespan=lifespan,
    )
    app.state.context = context or build_context(settings)

    app.include_router(api_router)

    return app


def run() -> None:
    """Start the HTTP server"""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    logger.info(f"Server starting on port {settings.port}")
    uvicorn.run(
        create_app(settings=settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
