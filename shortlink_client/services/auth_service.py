from typing import Optional

import pydantic

from shortlink_client.api import endpoints
from shortlink_client.api.client import APIClient
from shortlink_client.errors import APIError
from shortlink_client.schemas.auth import AuthResponse, Credentials, User
from shortlink_client.services.error_messages import normalize_error
from shortlink_client.session.manager import SessionManager

AUTH_ERROR_FALLBACK = "An unexpected error occurred"


class AuthService:
    """
    Sign-up, sign-in and sign-out on top of the API client.

    Both dependencies are injected:
    - client sends the requests
    - session persists the token and user on success
    """

    def __init__(self, client: APIClient, session: SessionManager):
        self.client = client
        self.session = session

    async def register(self, email: str, password: str) -> AuthResponse:
        """Create an account; stores the session if a token comes back"""
        return await self._authenticate(endpoints.REGISTER, email, password)

    async def login(self, email: str, password: str) -> AuthResponse:
        """Sign in; stores the session if a token comes back"""
        return await self._authenticate(endpoints.LOGIN, email, password)

    def logout(self) -> None:
        self.session.clear()

    def get_current_user(self) -> Optional[User]:
        return self.session.get_user()

    def is_authenticated(self) -> bool:
        """
        True iff a token is stored.

        The token is not validated: an expired token still reads as
        authenticated until the next API call comes back 401.
        """
        return self.session.has_token()

    async def _authenticate(self, path: str, email: str, password: str) -> AuthResponse:
        credentials = Credentials(email=email, password=password)
        try:
            data = await self.client.post(path, json=credentials.model_dump())
        except APIError as e:
            raise normalize_error(e, AUTH_ERROR_FALLBACK) from e

        try:
            response = AuthResponse.model_validate(data or {})
        except pydantic.ValidationError as e:
            raise APIError(AUTH_ERROR_FALLBACK, payload=data) from e

        if response.access_token:
            if not self.session.save(response.access_token, response.user):
                raise APIError("Signed in, but the session could not be saved")

        return response
