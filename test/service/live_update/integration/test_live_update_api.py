from typing import Any

from fastapi.testclient import TestClient
import pytest

from src.platform.config.di import Container
from src.platform.constant.route_constant import (
    LIVE_UPDATE_ADD,
    LIVE_UPDATE_LIST,
    LIVE_UPDATE_WS,
)
from test.shared.utils import auth_headers, publish_update
from test.util_constant import SEMINAR_EVENT, SEMINAR_UPDATE


@pytest.mark.integration
class TestAddUpdateAPI:
    def test_add_update_returns_stored_record(self, client: TestClient, club: dict[str, Any]):
        response = client.post(
            LIVE_UPDATE_ADD,
            json={'event': SEMINAR_EVENT, 'update': SEMINAR_UPDATE},
            headers=auth_headers(club['token']),
        )

        assert response.status_code == 200
        assert response.json() == {
            'success': True,
            'update': {'id': 1, 'event': SEMINAR_EVENT, 'update': SEMINAR_UPDATE},
        }

    def test_add_update_accepts_message_key(self, client: TestClient, club: dict[str, Any]):
        response = client.post(
            LIVE_UPDATE_ADD,
            json={'event': 'Chess', 'message': 'Finals today'},
            headers=auth_headers(club['token']),
        )

        assert response.status_code == 200
        assert response.json()['update']['update'] == 'Finals today'

    def test_add_update_with_auth_cookie(self, client: TestClient, club: dict[str, Any]):
        client.cookies.set('clubauth', club['token'])

        response = client.post(LIVE_UPDATE_ADD, json={'event': 'A', 'update': 'B'})

        assert response.status_code == 200

    @pytest.mark.parametrize(
        'payload',
        [
            {'event': '', 'update': 'x'},
            {'event': 'x', 'update': ''},
            {'event': '  ', 'update': 'x'},
            {'update': 'x'},
            {},
        ],
    )
    def test_blank_fields_return_400(
        self, client: TestClient, club: dict[str, Any], container: Container, payload
    ):
        response = client.post(LIVE_UPDATE_ADD, json=payload, headers=auth_headers(club['token']))

        assert response.status_code == 400
        assert 'error' in response.json()
        assert len(container.announcement_store()) == 0

    @pytest.mark.parametrize(
        'headers',
        [
            {},
            {'Authorization': 'Bearer not-a-jwt'},
            {'Authorization': 'Basic dXNlcjpwYXNz'},
        ],
    )
    def test_unauthorized_publish_returns_401_and_stores_nothing(
        self, client: TestClient, container: Container, headers
    ):
        response = client.post(
            LIVE_UPDATE_ADD,
            json={'event': SEMINAR_EVENT, 'update': SEMINAR_UPDATE},
            headers=headers,
        )

        assert response.status_code == 401
        assert 'error' in response.json()
        assert len(container.announcement_store()) == 0


@pytest.mark.integration
class TestListUpdatesAPI:
    def test_empty_list(self, client: TestClient):
        response = client.get(LIVE_UPDATE_LIST)

        assert response.status_code == 200
        assert response.json() == []

    def test_list_is_oldest_first(self, client: TestClient, club: dict[str, Any]):
        publish_update(client, club['token'], 'A', 'first')
        publish_update(client, club['token'], 'B', 'second')

        response = client.get(LIVE_UPDATE_LIST)

        assert [r['id'] for r in response.json()] == [1, 2]
        assert [r['event'] for r in response.json()] == ['A', 'B']


@pytest.mark.integration
class TestLiveUpdateWebSocket:
    def test_first_frame_is_snapshot(self, client: TestClient, club: dict[str, Any]):
        publish_update(client, club['token'], SEMINAR_EVENT, SEMINAR_UPDATE)

        with client.websocket_connect(LIVE_UPDATE_WS) as ws:
            frame = ws.receive_json()

        assert frame == {
            'kind': 'snapshot',
            'records': [{'id': 1, 'event': SEMINAR_EVENT, 'update': SEMINAR_UPDATE}],
        }

    def test_two_observers_end_to_end(
        self, client: TestClient, club: dict[str, Any], container: Container
    ):
        token = club['token']

        with client.websocket_connect(LIVE_UPDATE_WS) as observer_a:
            assert observer_a.receive_json() == {'kind': 'snapshot', 'records': []}

            publish_update(client, token, 'Seminar', 'Starts at 5 PM')
            assert observer_a.receive_json() == {
                'kind': 'increment',
                'record': {'id': 1, 'event': 'Seminar', 'update': 'Starts at 5 PM'},
            }

            with client.websocket_connect(LIVE_UPDATE_WS) as observer_b:
                assert observer_b.receive_json() == {
                    'kind': 'snapshot',
                    'records': [{'id': 1, 'event': 'Seminar', 'update': 'Starts at 5 PM'}],
                }
                assert container.broadcast_hub().connection_count == 2

                publish_update(client, token, 'Workshop', 'Room 204')
                expected = {
                    'kind': 'increment',
                    'record': {'id': 2, 'event': 'Workshop', 'update': 'Room 204'},
                }
                assert observer_a.receive_json() == expected
                assert observer_b.receive_json() == expected

    def test_disconnect_unregisters_observer(
        self, client: TestClient, club: dict[str, Any], container: Container
    ):
        with client.websocket_connect(LIVE_UPDATE_WS) as ws:
            ws.receive_json()

        # Publishing after the observer left must still succeed
        record = publish_update(client, club['token'], 'A', 'after close')

        assert record['id'] == 1
        assert container.broadcast_hub().connection_count == 0
