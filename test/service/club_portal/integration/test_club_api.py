from fastapi.testclient import TestClient
import pytest

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import CLUB_DASHBOARD, CLUB_LOGIN, CLUB_REGISTER
from test.shared.utils import assert_response_status, auth_headers, login_club
from test.util_constant import DEFAULT_PASSWORD, TEST_CLUB_EMAIL, TEST_CLUB_NAME


@pytest.mark.integration
class TestClubRegistration:
    def test_register_returns_token_and_sets_cookie(self, client: TestClient):
        response = client.post(
            CLUB_REGISTER,
            json={'name': TEST_CLUB_NAME, 'email': TEST_CLUB_EMAIL, 'password': DEFAULT_PASSWORD},
        )

        assert_response_status(response, 201)
        data = response.json()
        assert data['message'] == 'Club registered successfully'
        assert data['token']
        assert data['club'] == {'id': 1, 'name': TEST_CLUB_NAME, 'email': TEST_CLUB_EMAIL}
        assert 'password' not in response.text
        assert response.cookies.get(settings.AUTH_COOKIE_NAME) == data['token']

    def test_duplicate_email_is_rejected(self, client: TestClient, club):
        response = client.post(
            CLUB_REGISTER,
            json={'name': 'Copycat', 'email': TEST_CLUB_EMAIL, 'password': DEFAULT_PASSWORD},
        )

        assert_response_status(response, 409)
        assert response.json() == {'error': 'Club already exists'}

    def test_missing_field_is_bad_request(self, client: TestClient):
        response = client.post(CLUB_REGISTER, json={'name': TEST_CLUB_NAME})

        assert_response_status(response, 400)
        assert 'error' in response.json()

    def test_blank_name_is_bad_request(self, client: TestClient):
        response = client.post(
            CLUB_REGISTER,
            json={'name': '  ', 'email': TEST_CLUB_EMAIL, 'password': DEFAULT_PASSWORD},
        )

        assert_response_status(response, 400)
        assert response.json() == {'error': 'All fields are required'}


@pytest.mark.integration
class TestClubLogin:
    def test_login_returns_token(self, client: TestClient, club):
        response = login_club(client, TEST_CLUB_EMAIL, DEFAULT_PASSWORD)

        data = response.json()
        assert data['message'] == 'Login successful'
        assert data['club']['id'] == club['id']
        assert response.cookies.get(settings.AUTH_COOKIE_NAME) == data['token']

    @pytest.mark.parametrize(
        'email,password',
        [(TEST_CLUB_EMAIL, 'wrong-password'), ('nobody@campus.edu', DEFAULT_PASSWORD)],
    )
    def test_bad_credentials(self, client: TestClient, club, email, password):
        response = client.post(CLUB_LOGIN, json={'email': email, 'password': password})

        assert_response_status(response, 401)
        assert response.json() == {'error': 'Invalid credentials'}


@pytest.mark.integration
class TestClubDashboard:
    def test_dashboard_with_bearer_token(self, client: TestClient, club):
        response = client.get(CLUB_DASHBOARD, headers=auth_headers(club['token']))

        assert_response_status(response, 200)
        assert response.json()['message'] == f'Welcome {TEST_CLUB_NAME}!'

    def test_dashboard_with_login_cookie(self, client: TestClient, club):
        login_club(client, TEST_CLUB_EMAIL, DEFAULT_PASSWORD)

        response = client.get(CLUB_DASHBOARD)

        assert_response_status(response, 200)
        assert response.json()['club']['email'] == TEST_CLUB_EMAIL

    def test_dashboard_without_token(self, client: TestClient):
        response = client.get(CLUB_DASHBOARD)

        assert_response_status(response, 401)
        assert response.json() == {'error': 'Not authenticated'}

    def test_dashboard_with_garbage_token(self, client: TestClient):
        response = client.get(CLUB_DASHBOARD, headers=auth_headers('not-a-jwt'))

        assert_response_status(response, 401)
        assert response.json() == {'error': 'Invalid token'}
