"""
Shared client instances (dependency injection).

This module provides singleton instances of session storage, session
manager, navigator and API client, and builds services on top of them.

Pattern: Dependency Injection
- Loose coupling between components
- Easy to test (construct the classes directly with fakes)
- Flexible (swap storage backend via config)
"""

from functools import lru_cache

from shortlink_client.api.client import APIClient
from shortlink_client.config import settings
from shortlink_client.services.auth_service import AuthService
from shortlink_client.services.link_service import LinkService
from shortlink_client.session.manager import SessionManager
from shortlink_client.session.navigator import Navigator
from shortlink_client.storage.factory import SessionStorageFactory, SessionBackend
from shortlink_client.storage.strategies import SessionStorageStrategy


@lru_cache()
def get_session_storage() -> SessionStorageStrategy:
    """
    Get session storage instance (singleton).

    Factory gets config from settings internally.
    """
    backend = SessionBackend(settings.session_backend)
    return SessionStorageFactory.create(backend)


@lru_cache()
def get_session_manager() -> SessionManager:
    return SessionManager(
        get_session_storage(),
        token_key=settings.token_key,
        user_key=settings.user_key,
    )


def _print_login_hint(path: str) -> None:
    if path == settings.login_path:
        print(f"⚠️  Session expired or invalid - please sign in again ({path})")


@lru_cache()
def get_navigator() -> Navigator:
    navigator = Navigator(
        auth_paths=[settings.login_path, settings.register_path],
        on_navigate=_print_login_hint,
        home_path=settings.dashboard_path,
    )
    get_session_manager().subscribe(navigator.follow_session)
    return navigator


def get_api_client() -> APIClient:
    """
    Build an API client bound to the shared session and navigator.

    Not cached: an httpx.AsyncClient belongs to the event loop it is used
    in, so each asyncio.run() needs its own. Close it with ``aclose``.
    """
    return APIClient(session=get_session_manager(), navigator=get_navigator())


def get_auth_service(client: APIClient) -> AuthService:
    return AuthService(client=client, session=get_session_manager())


def get_link_service(client: APIClient) -> LinkService:
    return LinkService(client=client)
