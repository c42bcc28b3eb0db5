from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from time import perf_counter

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response

from roblox_status.api.router import api_router
from roblox_status.core.errors import add_exception_handlers
from roblox_status.core.logging import configure_logging
from roblox_status.core.settings import Settings, get_settings

settings = get_settings()
configure_logging(debug=settings.debug, cookie_name=settings.auth_cookie_name)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup started")
    owns_client = getattr(app.state, "http_client", None) is None
    if owns_client:
        app.state.http_client = httpx.Client()
    logger.info("Application startup completed")
    yield
    if owns_client:
        app.state.http_client.close()
        app.state.http_client = None
    logger.info("Application shutdown completed")


def create_app(settings: Settings | None = None, *, http_client: httpx.Client | None = None) -> FastAPI:
    settings = settings or get_settings()
    logger.debug("Creating FastAPI app with API prefix: %s", settings.api_prefix)
    app = FastAPI(
        title=settings.app_name,
        lifespan=lifespan,
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=settings.cors_origins,
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            )
        ],
    )
    app.state.settings = settings
    app.state.http_client = http_client
    logger.debug("CORS configured for origins: %s", settings.cors_origins)

    if settings.debug:
        @app.middleware("http")
        async def request_debug_logger(request: Request, call_next) -> Response:
            start = perf_counter()
            client_ip = request.client.host if request.client else "unknown"
            logger.debug("HTTP request started method=%s path=%s client_ip=%s", request.method, request.url.path, client_ip)
            response = await call_next(request)
            duration_ms = (perf_counter() - start) * 1000
            logger.debug(
                "HTTP request completed method=%s path=%s status=%s duration_ms=%.2f",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
            )
            return response

    add_exception_handlers(app)
    app.include_router(api_router, prefix=settings.api_prefix)
    logger.debug("API routers registered")

    @app.get("/", response_class=PlainTextResponse)
    def health_check() -> str:
        logger.debug("Health check called")
        return settings.health_message

    return app


app = create_app(settings)


def run() -> None:
    logger.info("Starting server host=%s port=%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
