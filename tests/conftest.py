"""Shared fixtures for the resolver tests."""

import pytest

from purl_resolver.routes import app as flask_app


@pytest.fixture
def app():
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
