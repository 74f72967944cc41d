"""FastAPI application factory."""

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from recipe_builder.api.recipes import router as recipes_router
from recipe_builder.app_logging import configure_logging
from recipe_builder.config import parse_cors_origins
from recipe_builder.containers import AppContainer

# Taken at import, which happens once at server start.
_PROCESS_STARTED_AT = time.monotonic()


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Recipe Builder starting: environment=%s", container.settings.environment
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(recipes_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Homepage check."""
        return "Recipe Builder Backend is running"

    @app.get("/health")
    async def health() -> dict[str, object]:
        """Health check with process uptime in seconds."""
        return {"status": "ok", "uptime": time.monotonic() - _PROCESS_STARTED_AT}

    return app
