"""
Test-specific FastAPI Application

Every call builds a fresh DI container, so each test gets its own update
store, broadcast hub and repositories. Dependencies resolve from
app.state.container, so several test apps can run side by side.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    """Minimal lifespan for testing - no seed, no eager construction."""
    Logger.base.info('🧪 [Test App] Starting up...')

    yield

    Logger.base.info('👋 [Test App] Shutdown complete')


def create_test_app(container: Container | None = None) -> FastAPI:
    return create_app(
        lifespan=lifespan_for_tests,
        container=container or Container(),
        title_suffix=' (Test)',
        description='Test Application - in-memory store and repositories',
    )
