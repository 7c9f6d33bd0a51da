"""
Main Application - Main Layer

Builds the FastAPI app that serves smart home fulfillment, the OAuth stubs,
device and actuation diagnostics and the health endpoints.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from src.main.config import AppSettings, get_settings
from src.main.container import app_lifespan, init_container
from src.presentation.controllers import (
    actuations_router,
    auth_router,
    devices_router,
    smart_home_router,
    system_router,
)
from src.shared import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

# Bootstrap logging from the environment until settings are loaded
configure_logging()
update_logging_from_settings(get_settings())

logger = get_logger(__name__)

_ROUTERS = (
    smart_home_router,
    auth_router,
    devices_router,
    actuations_router,
    system_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the state store and background workers for the app's lifetime."""
    app.state.started_at = datetime.now(timezone.utc)

    async with app_lifespan() as container:
        app.state.container = container
        logger.info(
            "app.startup",
            environment=container.config.environment(),
            store_backend=container.config.store.backend(),
            devices=len(container.device_catalog().list_devices()),
        )
        yield

    logger.info(
        "app.shutdown",
        uptime_seconds=(datetime.now(timezone.utc) - app.state.started_at).total_seconds(),
    )


async def _request_log_context(request: Request, call_next):
    bind_request_context(http_method=request.method, http_path=request.url.path)
    try:
        return await call_next(request)
    finally:
        clear_request_context()


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """Wire the container and build the FastAPI application."""
    settings = settings or get_settings()
    init_container(settings)

    app = FastAPI(
        title=settings.service.title,
        description=settings.service.description,
        version=settings.service.version,
        debug=settings.service.debug,
        lifespan=lifespan,
    )

    app.middleware("http")(_request_log_context)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    for router in _ROUTERS:
        app.include_router(router)

    return app


app = create_app()
