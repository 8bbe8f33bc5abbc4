"""
Single access point for the persisted session.

Every component that needs the token or the signed-in user goes through
SessionManager rather than reading storage keys directly. Components that
must react to sign-in/sign-out register a listener with ``subscribe``.
"""

import json
from typing import Callable, List, Optional

from shortlink_client.schemas.auth import Session, User
from shortlink_client.storage.strategies import SessionStorageStrategy

SessionListener = Callable[[Optional[Session]], None]


class SessionManager:
    """Reads, writes and clears the two session keys (token, user)."""

    def __init__(
        self,
        storage: SessionStorageStrategy,
        token_key: str = "auth_token",
        user_key: str = "user_data"
    ):
        self.storage = storage
        self.token_key = token_key
        self.user_key = user_key
        self._listeners: List[SessionListener] = []

    def get_token(self) -> Optional[str]:
        return self.storage.get_item(self.token_key) or None

    def get_user(self) -> Optional[User]:
        raw = self.storage.get_item(self.user_key)
        if not raw:
            return None
        try:
            data = json.loads(raw)
        except ValueError:
            return None
        return User.model_validate(data) if isinstance(data, dict) else None

    def get(self) -> Optional[Session]:
        token = self.get_token()
        if token is None:
            return None
        return Session(token=token, user=self.get_user())

    def has_token(self) -> bool:
        """Presence check only; the token is never validated locally."""
        return self.get_token() is not None

    def save(self, token: str, user: Optional[User]) -> bool:
        """
        Persist token and user as one unit.

        If the backend reports a failed write, both keys are removed so a
        token is never left behind without its user (or the reverse).

        Returns:
            True if the session was committed
        """
        user_json = json.dumps(user.model_dump(mode="json") if user else None)
        committed = self.storage.set_items({
            self.token_key: token,
            self.user_key: user_json,
        })
        if not committed:
            self.storage.remove_items([self.token_key, self.user_key])
            return False

        self._notify(Session(token=token, user=user))
        return True

    def clear(self) -> None:
        """Remove both keys. Listeners are only notified if a token was present."""
        had_token = self.has_token()
        self.storage.remove_items([self.token_key, self.user_key])
        if had_token:
            self._notify(None)

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a listener called with the new session (or None on sign-out).

        Returns:
            A function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, session: Optional[Session]) -> None:
        for listener in list(self._listeners):
            listener(session)
