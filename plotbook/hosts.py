"""Serve the API and the frontend bundle from one process, dispatching on the Host header."""
import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)


class SPAStaticFiles(StaticFiles):
    """Static files that answer unknown GET paths with ``index.html``."""

    async def get_response(self, path: str, scope: Scope):
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404 or scope["method"] not in ("GET", "HEAD"):
                raise
            return await super().get_response("index.html", scope)


def create_frontend_app(directory: str) -> FastAPI:
    frontend_dir = Path(directory).resolve()
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)
    app.mount("/", SPAStaticFiles(directory=str(frontend_dir), html=True), name="frontend")
    logger.info("frontend: serving %s", frontend_dir)
    return app


def _hostname(scope: Scope) -> str:
    for key, value in scope.get("headers", []):
        if key == b"host":
            host = value.decode("latin-1").lower()
            # Strip the port, leaving bracketed IPv6 literals intact
            if host.startswith("["):
                return host.split("]")[0] + "]"
            return host.split(":")[0]
    return ""


class HostDispatcher:
    def __init__(self, api: ASGIApp, frontend: ASGIApp, api_domain: str, frontend_domain: str):
        self.api = api
        self.frontend = frontend
        self.api_domain = api_domain.lower()
        self.frontend_domain = frontend_domain.lower()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self.api(scope, receive, send)
            return

        host = _hostname(scope)
        if host == self.api_domain:
            await self.api(scope, receive, send)
        elif host == self.frontend_domain:
            await self.frontend(scope, receive, send)
        else:
            await self._unconfigured(host, scope, receive, send)

    async def _unconfigured(self, host: str, scope: Scope, receive: Receive, send: Send) -> None:
        method = scope.get("method", "")
        path = scope.get("path", "")
        logger.warning("unhandled request: %s %s from host %s", method, path, host)
        if scope["type"] == "http" and method == "GET" and path == "/":
            response = PlainTextResponse("OK")
        else:
            response = PlainTextResponse(f'Hostname "{host}" not configured.', status_code=404)
        if scope["type"] == "http":
            await response(scope, receive, send)
        else:
            # Websocket to an unknown host
            await send({"type": "websocket.close", "code": 1008})
