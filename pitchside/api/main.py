"""FastAPI application for the Pitchside match feed."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from pitchside.api.routers import match_websocket_router
from pitchside.api.services.match_service import MatchSessionManager
from pitchside.config import PitchsideConfig, get_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Pitchside API starting up (tick %dms)", app.state.config.tick_ms)
    yield
    logger.info("Pitchside API shutting down...")
    await app.state.session_manager.cleanup_all()


def create_app(config: Optional[PitchsideConfig] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or get_config()

    app = FastAPI(
        title="Pitchside API",
        description="Live football match simulation feed",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.session_manager = MatchSessionManager(
        tick_interval=config.tick_interval,
        seed=config.seed,
    )

    # Configure CORS for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(match_websocket_router)

    @app.get("/")
    async def root() -> dict:
        """Root endpoint - API info."""
        return {
            "name": "Pitchside API",
            "version": "0.1.0",
            "description": "Live football match simulation feed",
            "feed": "/ws/match",
        }

    @app.get("/health")
    async def health(request: Request) -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "active_matches": len(request.app.state.session_manager.active_sessions),
        }

    return app


# Create app instance
app = create_app()


def run_api(host: str = "127.0.0.1", port: int = 8080, reload: bool = False) -> None:
    """Run the API server."""
    uvicorn.run(
        "pitchside.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    config = get_config()
    run_api(host=config.host, port=config.port, reload=True)
