"""
pytest Fixtures for Bookshelf GraphQL Tests

Every test that needs the HTTP API gets its own application instance from
create_app(), and with it a freshly seeded record store. Mutations made in
one test are therefore never visible in another.
"""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bookshelf.config import Settings
from bookshelf.main import create_app
from bookshelf.store import RecordStore, create_store

# =============================================================================
# APPLICATION FIXTURES
# =============================================================================


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the cached process settings."""
    return Settings()


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """A new application with its own seeded store."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Create a test client for the application.

    Using the client as a context manager runs the lifespan events.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def app_store(app: FastAPI) -> RecordStore:
    """The record store behind the test client."""
    return app.state.store


# =============================================================================
# STORE FIXTURES
# =============================================================================


@pytest.fixture
def seeded_store() -> RecordStore:
    """A store loaded with the seed authors and books."""
    return create_store(seed=True)


@pytest.fixture
def empty_store() -> RecordStore:
    """A store with no records at all."""
    return create_store(seed=False)
