"""
Test configuration and fixtures for the URL shortener.
Every test gets its own SQLite file under pytest's tmp_path.
"""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from shortlink_app.config import Settings
from shortlink_app.storage import SQLURLStorage


@pytest.fixture(scope="function")
def db_path(tmp_path):
    return str(tmp_path / "url_shortener.db")


@pytest.fixture(scope="function")
def store(db_path):
    """A fresh store on an empty database file"""
    return SQLURLStorage(db_path)


@pytest.fixture(scope="function")
def test_settings(db_path):
    return Settings(
        env="local",
        storage_path=db_path,
        base_url="http://testserver",
        alias_length=6,
        max_retries=5,
    )


@pytest.fixture(scope="function")
def client(test_settings):
    """
    Create a test client for an app backed by a fresh database.
    Entering the client runs the lifespan, which opens the store.
    """
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client
