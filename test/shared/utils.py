from typing import Any, Dict

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import CLUB_LOGIN, CLUB_REGISTER, LIVE_UPDATE_ADD


def auth_headers(token: str) -> Dict[str, str]:
    return {'Authorization': f'Bearer {token}'}


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def register_club(client: TestClient, name: str, email: str, password: str) -> Dict[str, Any]:
    """
    Register a club and return {'id', 'name', 'email', 'token'}

    The auth cookie set by the response is cleared so every later request
    has to authenticate explicitly.
    """
    response = client.post(CLUB_REGISTER, json={'name': name, 'email': email, 'password': password})
    assert_response_status(response, 201, f'Failed to register club {email}')
    client.cookies.clear()
    data = response.json()
    return {**data['club'], 'token': data['token']}


def login_club(client: TestClient, email: str, password: str) -> Any:
    """Login and keep the auth cookie on the client."""
    response = client.post(CLUB_LOGIN, json={'email': email, 'password': password})
    assert_response_status(response, 200, f'Login failed: {response.text}')
    return response


def publish_update(
    client: TestClient, token: str, event: str, update: str
) -> Dict[str, Any]:
    response = client.post(
        LIVE_UPDATE_ADD, json={'event': event, 'update': update}, headers=auth_headers(token)
    )
    assert_response_status(response, 200)
    return response.json()['update']
