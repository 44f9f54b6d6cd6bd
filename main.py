"""
Meeting Relay — application entry point.
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import register_middleware
from config.settings import config
from connectors.registry import ConnectorRegistry
from connectors.routes import router as meetings_router

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("httpcore", "httpx", "urllib3"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Meeting Relay",
        version="1.0.0",
        description="Stateless OAuth2 relay for Google Meet, Teams and Zoom meetings.",
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)

    # Routes
    app.include_router(meetings_router, prefix="/api/v1")

    @app.on_event("startup")
    async def on_startup():
        logger.info("Discovering meeting connectors…")
        registry = ConnectorRegistry()
        # ConfigurationError aborts startup.
        registry.discover()
        logger.info(
            "Application ready; providers enabled: %s",
            ", ".join(registry.list_enabled()) or "none",
        )

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
