"""Shared pytest fixtures for the camera catalog test suite."""

from unittest.mock import MagicMock

import pytest
from flask_jwt_extended import create_access_token

from camera_catalog import create_app
from camera_catalog.config.test_config import TestConfig
from camera_catalog.storage import get_storage


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest.fixture
def config():
    """Return the configuration used to build ``app``; override per module."""
    return TestConfig()


@pytest.fixture
def app(config):
    app = create_app(config)
    with app.app_context():
        get_storage().init_schema()
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def storage(app):
    with app.app_context():
        yield get_storage()


@pytest.fixture
def make_camera(app):
    """Insert a record straight into storage and return it."""
    def _make(**fields):
        with app.app_context():
            return get_storage().create(fields)
    return _make


# =============================================================================
# Collaborator Fixtures
# =============================================================================

@pytest.fixture
def gcs_client(monkeypatch):
    """Replace the Cloud Storage client with a mock."""
    client = MagicMock()
    monkeypatch.setattr("camera_catalog.utils.get_gcs_client", lambda: client)
    return client


@pytest.fixture
def login(app, client):
    """Put a JWT cookie for the given user on the test client, return the token."""
    def _login(user_id="user-1", display_name="Ada Lovelace", **token_kwargs):
        with app.app_context():
            token = create_access_token(
                identity=user_id,
                additional_claims={"displayName": display_name, "image": None},
                **token_kwargs
            )
        client.set_cookie("access_token_cookie", token)
        return token
    return _login
