"""
PodScript Studio — FastAPI app factory.

Use: uvicorn podscript.app:app
Or:  from podscript import app
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from .config import ServerConfig, get_config
from .routes import register_routes
from .state import AppState

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Root logger setup; a no-op when handlers are already installed."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


def create_app(config: Optional[ServerConfig] = None, state: Optional[AppState] = None) -> FastAPI:
    """Build FastAPI app with compression, CORS, routes, and startup."""
    config = config or (state.config if state else get_config())
    configure_logging(config.log_level)

    app = FastAPI(
        title="PodScript Studio API",
        description="Podcast feed normalization, YouTube lookup, transcription jobs, and book export",
        version="1.0.0",
    )
    app.add_middleware(GZipMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.studio = state or AppState(config)
    register_routes(app)

    @app.on_event("startup")
    async def _startup_logging():
        ok, errors = config.validate()
        print("PodScript Studio API starting...")
        print(f"Server: http://{config.host}:{config.port}")
        print(f"Feed cache TTL: {config.cache_ttl_ms}ms, episode limit: {config.episode_limit}")
        print(f"Static: {config.static_dir}")
        if not ok:
            for error in errors:
                print(f"[startup] WARNING: {error}")

    return app


app = create_app()
