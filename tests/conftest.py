# tests/conftest.py

from contextlib import contextmanager

import pytest
from flask import template_rendered

from portal import create_app

ENV_KEYS = ("SECRET_KEY", "TEMPLATE_FOLDER", "STATIC_FOLDER", "VIEW_SUFFIX", "LOG_LEVEL")

TESTING_CONFIG = {
    "TESTING": True,
    "SECRET_KEY": "testing-secret-key",
}


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """
    Runs every test with the portal settings unset and an empty PORTAL_HOME,
    so .env files on the host never leak into the app config.
    """
    for key in ENV_KEYS:
        # set first so monkeypatch also undoes values written later by dotenv
        monkeypatch.setenv(key, "unset")
        monkeypatch.delenv(key)
    monkeypatch.setenv("PORTAL_HOME", str(tmp_path))
    return tmp_path


@pytest.fixture(scope='function')
def app():
    """Function-scoped test Flask application."""
    return create_app(TESTING_CONFIG)


@pytest.fixture(scope='function')
def client(app):
    """Provides a Flask test client for the function-scoped app."""
    return app.test_client()


@pytest.fixture(scope='function')
def runner(app):
    """Provides a Flask test CLI runner for the function-scoped app."""
    return app.test_cli_runner()


@contextmanager
def captured_templates(app):
    """Records the names of templates rendered by `app` while active."""
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append(template.name)

    template_rendered.connect(record, app)
    try:
        yield recorded
    finally:
        template_rendered.disconnect(record, app)
