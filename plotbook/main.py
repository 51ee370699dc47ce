import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from plotbook.api.router import api_router
from plotbook.core.config import Settings, get_settings
from plotbook.core.errors import register_exception_handlers
from plotbook.core.logging_config import setup_logging
from plotbook.db.session import Database
from plotbook.hosts import HostDispatcher, create_frontend_app

logger = logging.getLogger(__name__)


def create_api_app(database: Database, origins: Optional[list[str]] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        await database.create_all()
        yield
        # Shutdown
        await database.dispose()

    app = FastAPI(
        title="Plotbook API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or [],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        latency_ms = int((time.monotonic() - start) * 1000)
        logger.info(
            "%s %s %d %dms", request.method, request.url.path, response.status_code, latency_ms
        )
        return response

    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "ok"}

    app.include_router(api_router)
    return app


def create_app(settings: Optional[Settings] = None) -> HostDispatcher:
    """ASGI factory: the API and the frontend bundle behind one host dispatcher."""
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    database = Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    api = create_api_app(database, origins=settings.origins)
    frontend = create_frontend_app(settings.FRONTEND_PATH)

    logger.info("API will be served for host: %s", settings.API_DOMAIN)
    logger.info("Frontend will be served for host: %s", settings.FRONTEND_DOMAIN)
    return HostDispatcher(api, frontend, settings.API_DOMAIN, settings.FRONTEND_DOMAIN)
