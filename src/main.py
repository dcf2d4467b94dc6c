"""
Production FastAPI Application

Single-worker service: the update store and broadcast hub live in this
process, so granian must run with one worker:

    granian src.main:app --interface asgi --host 0.0.0.0 --port 8000 --workers 1
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Campus Events] Starting up...')

    app_container: Container = app.state.container

    # Build the update store eagerly so the seed (if enabled) is in place before any observer
    store = app_container.announcement_store()
    app_container.broadcast_hub()
    Logger.base.info(f'🗂️  [Campus Events] Update store ready ({len(store)} announcements)')

    Logger.base.info('✅ [Campus Events] All services initialized')

    yield

    Logger.base.info('🛑 [Campus Events] Shutting down...')

    app_container.reset_singletons()

    Logger.base.info('👋 [Campus Events] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(
    lifespan=lifespan,
    container=Container(),
    description='Campus Events - club accounts, events, members and live announcements',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
