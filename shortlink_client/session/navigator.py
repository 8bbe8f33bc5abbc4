from typing import Callable, List, Optional

from shortlink_client.schemas.auth import Session


class Navigator:
    """
    Tracks where the user currently is and performs redirects.

    The HTTP client only knows that a rejected session must send the user
    to the login entry point; what "navigating" means is decided by the
    ``on_navigate`` callback (a CLI prints a hint, a GUI switches screens).
    """

    def __init__(
        self,
        current_path: str = "/",
        auth_paths: Optional[List[str]] = None,
        on_navigate: Optional[Callable[[str], None]] = None,
        home_path: str = "/dashboard"
    ):
        self.current_path = current_path
        self.auth_paths = auth_paths if auth_paths is not None else ["/login", "/register"]
        self.on_navigate = on_navigate
        self.home_path = home_path
        self.history: List[str] = []

    def is_on_auth_page(self) -> bool:
        return any(path in self.current_path for path in self.auth_paths)

    def navigate(self, path: str) -> None:
        self.current_path = path
        self.history.append(path)
        if self.on_navigate:
            self.on_navigate(path)

    def follow_session(self, session: Optional[Session]) -> None:
        """
        Session listener: a saved session moves the user off the auth pages,
        so the next rejected token redirects to login again.
        """
        if session is not None and self.is_on_auth_page():
            self.navigate(self.home_path)
