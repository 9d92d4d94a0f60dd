"""Tests for Google login, the JWT session cookie and identity extraction."""

from unittest.mock import MagicMock
from urllib.parse import parse_qs, urlparse

import pytest
import requests

from camera_catalog.middlewares.auth_middleware import Identity, current_identity
from camera_catalog.services.auth_service import AuthService

USERINFO = {'sub': '1234567890', 'name': 'Grace Hopper', 'picture': 'https://example.com/grace.png'}


def _response(status_code, payload):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    return response


@pytest.fixture
def google(monkeypatch):
    """Stub the token and userinfo endpoints."""
    post = MagicMock(return_value=_response(200, {'access_token': 'google-token'}))
    get = MagicMock(return_value=_response(200, USERINFO))
    monkeypatch.setattr('camera_catalog.services.auth_service.requests.post', post)
    monkeypatch.setattr('camera_catalog.services.auth_service.requests.get', get)
    return post, get


def _start_login(client, state='expected-state', return_to='/cameras/mine'):
    with client.session_transaction() as session:
        session['oauth2_state'] = state
        session['oauth2_return'] = return_to


class TestLogin:
    def test_login_redirects_to_google(self, client):
        response = client.get('/auth/login?return=/cameras/mine')

        assert response.status_code == 302
        location = urlparse(response.headers['Location'])
        assert location.netloc == 'accounts.google.com'
        params = parse_qs(location.query)
        assert params['client_id'] == ['test-client-id']
        assert params['response_type'] == ['code']

        with client.session_transaction() as session:
            assert session['oauth2_state'] == params['state'][0]
            assert session['oauth2_return'] == '/cameras/mine'

    @pytest.mark.parametrize('target', ['//evil.example.com/', 'https://evil.example.com/'])
    def test_login_refuses_offsite_return(self, client, target):
        client.get('/auth/login', query_string={'return': target})
        with client.session_transaction() as session:
            assert session['oauth2_return'] == '/cameras/'

    def test_callback_sets_session_cookie(self, client, google):
        post, get = google
        _start_login(client)

        response = client.get('/auth/google/callback?code=abc&state=expected-state')

        assert response.status_code == 302
        assert response.headers['Location'].endswith('/cameras/mine')
        assert 'access_token_cookie=' in ' '.join(response.headers.getlist('Set-Cookie'))
        assert post.call_args.kwargs['data']['code'] == 'abc'
        assert get.call_args.kwargs['headers'] == {'Authorization': 'Bearer google-token'}

        mine = client.get('/cameras/mine')
        assert mine.status_code == 200
        assert b'Grace Hopper' in mine.data

    def test_callback_with_wrong_state(self, client, google):
        post, _ = google
        _start_login(client)

        response = client.get('/auth/google/callback?code=abc&state=forged')

        assert response.status_code == 400
        post.assert_not_called()

    def test_callback_when_user_cancels(self, client):
        _start_login(client)
        response = client.get('/auth/google/callback?error=access_denied&state=expected-state')
        assert response.status_code == 401

    def test_callback_with_rejected_code(self, client, google):
        post, _ = google
        post.return_value = _response(400, {'error': 'invalid_grant'})
        _start_login(client)

        response = client.get('/auth/google/callback?code=abc&state=expected-state')

        assert response.status_code == 401
        assert b'Authorization code was rejected' in response.data

    def test_callback_when_google_is_down(self, client, google):
        post, _ = google
        post.side_effect = requests.ConnectionError('down')
        _start_login(client)

        response = client.get('/auth/google/callback?code=abc&state=expected-state')

        assert response.status_code == 401
        assert b'Login provider unavailable' in response.data

    def test_logout_clears_cookie(self, client, login):
        login()
        response = client.get('/auth/logout')

        assert response.status_code == 302
        cookies = ' '.join(response.headers.getlist('Set-Cookie'))
        assert 'access_token_cookie=;' in cookies
        assert client.get('/cameras/mine').status_code == 302


class TestIdentity:
    def test_anonymous_request(self, app):
        with app.test_request_context('/cameras/'):
            assert current_identity() is None

    def test_identity_from_cookie(self, app, login, client):
        token = login(user_id='user-9', display_name='Ada')
        with app.test_request_context('/cameras/', headers={'Cookie': f'access_token_cookie={token}'}):
            assert current_identity() == Identity(id='user-9', display_name='Ada', image_url=None)

    def test_extract_profile(self):
        assert AuthService.extract_profile(USERINFO) == {
            'id': '1234567890',
            'displayName': 'Grace Hopper',
            'image': 'https://example.com/grace.png',
        }

    def test_extract_profile_falls_back_to_email(self):
        profile = AuthService.extract_profile({'sub': 7, 'email': 'ada@example.com'})
        assert profile == {'id': '7', 'displayName': 'ada@example.com', 'image': None}
