"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
Each app owns its DI container (and with it the update store and broadcast
hub); dependencies resolve from app.state.container through AppProvide.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.constant.route_constant import API_BASE, EVENT_BASE, MEMBER_BASE
from src.platform.exception.exception_handlers import register_exception_handlers
from src.service.club_portal.driving_adapter.http_controller.club_controller import (
    router as club_router,
)
from src.service.club_portal.driving_adapter.http_controller.event_controller import (
    router as event_router,
)
from src.service.club_portal.driving_adapter.http_controller.member_controller import (
    router as member_router,
)
from src.service.live_update.driving_adapter.http_controller.live_update_controller import (
    router as live_update_router,
)
from src.service.live_update.driving_adapter.http_controller.live_update_controller import (
    ws_router as live_update_ws_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    container: Optional[Container] = None,
    title_suffix: str = '',
    description: str = 'Campus Events',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        container: DI container to serve from; a fresh one is built when omitted
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    title = f'{settings.PROJECT_NAME}{title_suffix}'

    app = FastAPI(
        title=title,
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.container = container or Container()

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers (all services)
    app.include_router(club_router, prefix=API_BASE, tags=['club'])
    app.include_router(event_router, prefix=EVENT_BASE, tags=['event'])
    app.include_router(member_router, prefix=MEMBER_BASE, tags=['member'])
    app.include_router(live_update_router, prefix=API_BASE, tags=['live-update'])
    app.include_router(live_update_ws_router, prefix='/ws', tags=['live-update'])

    # Register common endpoints
    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    """Register health and metrics endpoints."""

    @app.get('/health')
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    @app.get('/metrics')
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
