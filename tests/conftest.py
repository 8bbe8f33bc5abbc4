"""
Test configuration and fixtures for the shortlink client.
This centralizes all test setup, making individual tests clean.

The client talks to an in-process FastAPI fake (tests/fake_api.py)
through httpx.ASGITransport; nothing leaves the process.
"""

import httpx
import pytest

from shortlink_client.api.client import APIClient
from shortlink_client.session.manager import SessionManager
from shortlink_client.session.navigator import Navigator
from shortlink_client.storage.factory import SessionStorageFactory
from shortlink_client.storage.strategies import InMemorySessionStorage
from tests.fake_api import create_fake_api

BASE_URL = "http://testserver"


@pytest.fixture(scope="function")
def fake_api():
    """Fresh fake API (empty users and links) for each test."""
    return create_fake_api()


@pytest.fixture(scope="function")
def storage():
    return InMemorySessionStorage()


@pytest.fixture(scope="function")
def session_manager(storage):
    return SessionManager(storage, token_key="auth_token", user_key="user_data")


@pytest.fixture(scope="function")
def navigator(session_manager):
    """Navigator that starts on the dashboard (not an auth page) and follows sign-ins."""
    navigator = Navigator(current_path="/dashboard", auth_paths=["/login", "/register"])
    session_manager.subscribe(navigator.follow_session)
    return navigator


@pytest.fixture(scope="function")
def make_client(fake_api, session_manager, navigator):
    """
    Factory for API clients bound to the fake API.

    Call it inside the coroutine that uses the client, so the underlying
    httpx.AsyncClient lives on that event loop:

        async def scenario():
            async with make_client() as client:
                ...
    """
    def _make(transport=None, debug=False):
        return APIClient(
            session=session_manager,
            navigator=navigator,
            base_url=BASE_URL,
            timeout=5,
            transport=transport or httpx.ASGITransport(app=fake_api),
            debug=debug,
        )

    return _make


@pytest.fixture(autouse=True)
def reset_storage_factory():
    """Storage factory caches a singleton; isolate tests from each other."""
    SessionStorageFactory.clear_instance()
    yield
    SessionStorageFactory.clear_instance()
