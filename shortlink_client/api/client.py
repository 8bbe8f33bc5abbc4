"""
HTTP client wrapper for the URL shortener REST API.

Every outbound call goes through APIClient.request, which:
1. Sends JSON to ``<api_base_url><path>`` with a fixed timeout
2. Adds ``Authorization: Bearer <token>`` when a token is stored
3. Turns any non-2xx response or transport failure into an APIError subclass
4. On 401, clears the session and redirects to the login entry point

Failed calls are never retried; the first failure reaches the caller.
"""

from typing import Any, Optional

import httpx

from shortlink_client.config import settings
from shortlink_client.errors import APIError, NetworkError, error_for_status
from shortlink_client.session.manager import SessionManager
from shortlink_client.session.navigator import Navigator


class APIClient:
    """Authenticated JSON client (one httpx.AsyncClient per instance)"""

    def __init__(
        self,
        session: SessionManager,
        navigator: Navigator,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        debug: Optional[bool] = None
    ):
        """
        Initialize the client.

        Args:
            session: Session manager the bearer token is read from
            navigator: Receives the login redirect on 401
            base_url: API root (defaults to settings.api_base_url)
            timeout: Seconds before a call fails with NetworkError
            transport: Custom httpx transport (tests mount a fake API here)
            debug: Trace every request/response (defaults to settings.debug)
        """
        self.session = session
        self.navigator = navigator
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.debug = settings.debug if debug is None else debug

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=settings.request_timeout if timeout is None else timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
            event_hooks={
                "request": [self._inject_auth_header],
                "response": [self._log_response],
            },
        )

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _inject_auth_header(self, request: httpx.Request) -> None:
        """Request hook: read the token fresh on every call."""
        token = self.session.get_token()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

        if self.debug:
            print(f"🚀 {request.method} {request.url.path}")

    async def _log_response(self, response: httpx.Response) -> None:
        if self.debug and response.is_success:
            print(f"✅ {response.status_code} {response.request.url.path}")

    async def request(self, method: str, path: str, json: Any = None) -> Any:
        """
        Send a request and return the decoded body.

        Returns:
            Parsed JSON body, or None for 204/empty responses

        Raises:
            NetworkError: timeout or unreachable host
            APIError: any non-2xx response (subclass chosen by status)
        """
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.TimeoutException as e:
            print("❌ Network error - request timed out")
            raise NetworkError("Request timed out") from e
        except httpx.TransportError as e:
            print("❌ Network error - please check your connection")
            raise NetworkError(f"Network error: {e}") from e

        if response.is_success:
            return self._decode(response)

        raise self._handle_error_response(response)

    async def get(self, path: str) -> Any:
        return await self.request("GET", path)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    def short_url(self, short_code: str) -> str:
        """Public redirect URL for a short code (resolved by the server, not here)"""
        return f"{self.base_url}/{short_code}"

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def _handle_error_response(self, response: httpx.Response) -> APIError:
        status = response.status_code
        payload = self._decode(response)
        error = error_for_status(status, payload)

        if self.debug:
            print(f"❌ {status} {response.request.url.path} {payload}")

        if status == 401:
            # Token expired or invalid
            self.session.clear()
            if not self.navigator.is_on_auth_page():
                self.navigator.navigate(settings.login_path)
        elif status == 403:
            print("❌ Access forbidden - insufficient permissions")
        elif status >= 500:
            print("❌ Server error - please try again later")

        return error
