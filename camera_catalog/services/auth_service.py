import logging
import secrets
from urllib.parse import urlencode

import requests
from flask import current_app
from flask_jwt_extended import create_access_token

logger = logging.getLogger(__name__)

GOOGLE_AUTH_URL = 'https://accounts.google.com/o/oauth2/v2/auth'
GOOGLE_TOKEN_URL = 'https://oauth2.googleapis.com/token'
GOOGLE_USERINFO_URL = 'https://openidconnect.googleapis.com/v1/userinfo'
OAUTH2_SCOPES = 'openid email profile'


class AuthService:
    @staticmethod
    def authorization_url():
        """Return (url, state) for sending the browser to Google's consent screen."""
        state = secrets.token_urlsafe(32)
        params = {
            'client_id': current_app.config['GOOGLE_OAUTH2_CLIENT_ID'],
            'redirect_uri': current_app.config['GOOGLE_OAUTH2_REDIRECT_URI'],
            'response_type': 'code',
            'scope': OAUTH2_SCOPES,
            'state': state,
        }
        return f"{GOOGLE_AUTH_URL}?{urlencode(params)}", state

    @staticmethod
    def login(code):
        """
        Exchange an authorization code for the user's profile and a JWT.
        """
        try:
            resp = requests.post(
                GOOGLE_TOKEN_URL,
                data={
                    'code': code,
                    'client_id': current_app.config['GOOGLE_OAUTH2_CLIENT_ID'],
                    'client_secret': current_app.config['GOOGLE_OAUTH2_CLIENT_SECRET'],
                    'redirect_uri': current_app.config['GOOGLE_OAUTH2_REDIRECT_URI'],
                    'grant_type': 'authorization_code',
                },
                timeout=5
            )
            if resp.status_code != 200:
                return {
                    'success': False,
                    'message': 'Authorization code was rejected'
                }
            access_token = resp.json().get('access_token')

            resp = requests.get(
                GOOGLE_USERINFO_URL,
                headers={'Authorization': f'Bearer {access_token}'},
                timeout=5
            )
            if resp.status_code != 200:
                return {
                    'success': False,
                    'message': 'Could not load the user profile'
                }
            profile = AuthService.extract_profile(resp.json())
        except requests.RequestException as e:
            logger.error("OAuth2 provider unreachable: %s", e)
            return {
                'success': False,
                'message': 'Login provider unavailable'
            }

        token = create_access_token(
            identity=profile['id'],
            additional_claims={
                'displayName': profile['displayName'],
                'image': profile['image'],
            }
        )
        logger.info("User %s logged in", profile['id'])
        return {
            'success': True,
            'token': token,
            'user': profile
        }

    @staticmethod
    def extract_profile(userinfo):
        return {
            'id': str(userinfo['sub']),
            'displayName': userinfo.get('name') or userinfo.get('email') or 'Unknown',
            'image': userinfo.get('picture'),
        }
