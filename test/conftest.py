"""
Test Configuration and Fixtures

This module provides:
- Test environment variables (set before any application import)
- A fresh app, DI container and TestClient per test
- Club registration helpers

Architecture:
- Unit tests (test/**/unit/): build their collaborators directly or with mocks
- Integration tests: drive the FastAPI app through TestClient
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# settings and the loguru sinks are configured at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['SECRET_KEY'] = 'test_secret_key'
    # Cheap hashing keeps registration fast
    os.environ['BCRYPT_ROUNDS'] = '4'
    # Tests assert on exact store contents
    os.environ['LIVE_UPDATE_SEED_ENABLED'] = 'false'
    os.environ.setdefault('LIVE_UPDATE_OUTBOUND_BUFFER', '100')
    os.environ.setdefault('ANNOUNCE_EVENT_CHANGES', 'true')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import Container  # noqa: E402
from test.shared.utils import auth_headers, register_club  # noqa: E402
from test.test_main import create_test_app  # noqa: E402
from test.util_constant import (  # noqa: E402
    ANOTHER_CLUB_EMAIL,
    ANOTHER_CLUB_NAME,
    DEFAULT_PASSWORD,
    TEST_CLUB_EMAIL,
    TEST_CLUB_NAME,
)


# =============================================================================
# Pytest Hooks: default marker by location
# =============================================================================
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = {m.name for m in item.iter_markers()}
        if markers & {'unit', 'integration'}:
            continue
        path = str(item.fspath)
        if f'{os.sep}unit{os.sep}' in path:
            item.add_marker(pytest.mark.unit)
        elif f'{os.sep}integration{os.sep}' in path:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# App Fixtures
# =============================================================================
@pytest.fixture
def container() -> Container:
    return Container()


@pytest.fixture
def app(container: Container) -> FastAPI:
    return create_test_app(container)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


# =============================================================================
# Club Fixtures
# =============================================================================
@pytest.fixture
def club(client: TestClient) -> dict[str, Any]:
    """Registered club with its bearer token; cookies are cleared afterwards"""
    return register_club(client, TEST_CLUB_NAME, TEST_CLUB_EMAIL, DEFAULT_PASSWORD)


@pytest.fixture
def another_club(client: TestClient) -> dict[str, Any]:
    return register_club(client, ANOTHER_CLUB_NAME, ANOTHER_CLUB_EMAIL, DEFAULT_PASSWORD)


@pytest.fixture
def club_headers(club: dict[str, Any]) -> dict[str, str]:
    return auth_headers(club['token'])


@pytest.fixture
def another_club_headers(another_club: dict[str, Any]) -> dict[str, str]:
    return auth_headers(another_club['token'])
