import os

os.environ.setdefault("APP_ENV", "test")

import pytest
from fastapi.testclient import TestClient

from config import load_settings
from main import create_app


@pytest.fixture
def app():
    return create_app(load_settings({"APP_ENV": "test"}))


@pytest.fixture
def client(app):
    """Client that keeps the session cookie but does not follow redirects."""
    with TestClient(app, follow_redirects=False) as c:
        yield c
