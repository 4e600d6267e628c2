"""FastAPI application for the HexNote REST API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hexnote import __version__
from hexnote.api.middleware import api_key_middleware
from hexnote.api.routes import cards, health
from hexnote.core.config import (
    HEXNOTE_API_KEY,
    HEXNOTE_CORS_ORIGINS,
    HEXNOTE_HOST,
    HEXNOTE_PORT,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("HexNote API starting up...")
    if not HEXNOTE_API_KEY:
        logger.warning("HEXNOTE_API_KEY not set - API is running without authentication")
    yield
    logger.info("HexNote API shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="HexNote API",
        description="REST API for HexNote sticky-note cards",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=HEXNOTE_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.middleware("http")(api_key_middleware)

    app.include_router(health.router, prefix="/api/v1", tags=["Health"])
    app.include_router(cards.router, prefix="/api/v1", tags=["Cards"])

    return app


# Create the default app instance
app = create_app()


def run_server(host: str | None = None, port: int | None = None):
    """Run the API server."""
    import uvicorn

    uvicorn.run(
        "hexnote.api.app:app",
        host=host or HEXNOTE_HOST or "127.0.0.1",
        port=port or HEXNOTE_PORT,
        reload=False,
    )


if __name__ == "__main__":
    run_server()
