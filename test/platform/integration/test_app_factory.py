from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import ConflictError
from src.platform.exception.exception_handlers import register_exception_handlers
from test.shared.utils import assert_response_status, publish_update


@pytest.mark.integration
class TestCommonEndpoints:
    def test_health(self, client: TestClient):
        response = client.get('/health')

        assert_response_status(response, 200)
        assert response.json() == {'status': 'healthy', 'service': settings.PROJECT_NAME}

    def test_metrics_exposes_live_update_counters(self, client: TestClient, club):
        publish_update(client, club['token'], 'Seminar', 'Starts at 5 PM')

        response = client.get('/metrics')

        assert_response_status(response, 200)
        assert 'live_update_announcements_published_total' in response.text
        assert 'live_update_observers_connected' in response.text


@pytest.mark.unit
class TestExceptionHandlers:
    @pytest.fixture
    def error_client(self) -> TestClient:
        app = FastAPI()
        register_exception_handlers(app)

        @app.get('/conflict')
        async def conflict():
            raise ConflictError('Already there')

        @app.get('/value')
        async def value():
            raise ValueError('bad value')

        @app.get('/boom')
        async def boom():
            raise RuntimeError('secret detail')

        @app.get('/typed')
        async def typed(count: int):
            return {'count': count}

        return TestClient(app, raise_server_exceptions=False)

    def test_custom_error_keeps_status_and_message(self, error_client):
        response = error_client.get('/conflict')

        assert response.status_code == 409
        assert response.json() == {'error': 'Already there'}

    def test_value_error_is_bad_request(self, error_client):
        response = error_client.get('/value')

        assert response.status_code == 400
        assert response.json() == {'error': 'bad value'}

    def test_request_validation_is_bad_request(self, error_client):
        response = error_client.get('/typed', params={'count': 'many'})

        assert response.status_code == 400
        assert response.json()['error'].startswith('query.count:')

    def test_unhandled_error_hides_detail(self, error_client):
        response = error_client.get('/boom')

        assert response.status_code == 500
        assert response.json() == {'error': 'Internal server error'}
