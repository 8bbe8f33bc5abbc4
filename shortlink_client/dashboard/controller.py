"""
Dashboard view state.

Owns the server-confirmed link collection and everything derived from it:

- links: only ever changed after a service call succeeds
- search_term / sort_key / sort_order: inputs of the projection
- visible_links: derive_projection(...) of the above, recomputed on change
- error / success: inline banners (success clears itself after a delay)

Search input is debounced; overlapping loads are sequenced so only the
response to the most recently issued load is applied.
"""

from typing import Callable, List, Optional, Union

from pydantic import BaseModel

from shortlink_client.config import settings
from shortlink_client.dashboard.debounce import Debouncer
from shortlink_client.dashboard.projection import SortKey, SortOrder, derive_projection
from shortlink_client.errors import APIError, AuthError
from shortlink_client.schemas.auth import Session
from shortlink_client.schemas.link import Link
from shortlink_client.services.link_service import LinkService, changed_fields
from shortlink_client.session.manager import SessionManager

LinkId = Union[int, str]


class CreateLinkForm(BaseModel):
    original_url: str = ""
    custom_short_code: str = ""
    error: str = ""


class DashboardController:
    """State and actions behind the "My Links" screen."""

    def __init__(
        self,
        link_service: LinkService,
        session: Optional[SessionManager] = None,
        debounce_seconds: Optional[float] = None,
        banner_seconds: Optional[float] = None
    ):
        """
        Initialize dashboard state.

        Args:
            link_service: Service all mutations go through
            session: If given, the collection is emptied on sign-out
            debounce_seconds: Quiet period before a search term applies
            banner_seconds: Lifetime of the success banner
        """
        self.link_service = link_service

        self.links: List[Link] = []
        self.visible_links: List[Link] = []
        self.recompute_count = 0

        self.search_term = ""
        self.pending_search_term = ""
        self.sort_key = SortKey.CREATED
        self.sort_order = SortOrder.DESC

        self.loading = False
        self.error = ""
        self.success = ""

        self.create_form = CreateLinkForm()
        self.editing_link: Optional[Link] = None
        self.edit_error = ""

        self._load_seq = 0
        self._closed = False

        self._search_debouncer = Debouncer(
            settings.search_debounce_seconds if debounce_seconds is None else debounce_seconds,
            self._apply_search_term,
        )
        self._success_timer = Debouncer(
            settings.banner_timeout_seconds if banner_seconds is None else banner_seconds,
            self.dismiss_success,
        )

        self._unsubscribe: Optional[Callable[[], None]] = None
        if session is not None:
            self._unsubscribe = session.subscribe(self._on_session_change)

    async def load_links(self) -> bool:
        """
        Fetch the full collection.

        Returns:
            True if this call's response was applied. A response is dropped
            when a newer load was issued meanwhile or the dashboard was closed.
        """
        self._load_seq += 1
        seq = self._load_seq
        self.loading = True

        try:
            links = await self.link_service.get_links()
        except APIError as e:
            if self._is_current_load(seq):
                self.loading = False
                self._show_error(e)
            return False

        if not self._is_current_load(seq):
            return False

        self.loading = False
        self.links = list(links)
        self._recompute()
        return True

    def _is_current_load(self, seq: int) -> bool:
        return not self._closed and seq == self._load_seq

    async def create_link(
        self,
        original_url: str,
        custom_short_code: Optional[str] = None
    ) -> Link:
        """
        Create a link and put it at the head of the collection.

        Failures are shown on the create form and re-raised.
        """
        try:
            link = await self.link_service.create_link(original_url, custom_short_code or None)
        except APIError as e:
            if not self._closed and not isinstance(e, AuthError):
                self.create_form.error = e.message
            raise

        if self._closed:
            return link

        self.links = [link] + [item for item in self.links if item.id != link.id]
        self.create_form = CreateLinkForm()
        self._recompute()
        self._show_success("Link created successfully!")
        return link

    async def submit_create_form(self) -> Link:
        return await self.create_link(
            self.create_form.original_url,
            self.create_form.custom_short_code,
        )

    def start_edit(self, link: Link) -> None:
        self.editing_link = link
        self.edit_error = ""

    def cancel_edit(self) -> None:
        self.editing_link = None
        self.edit_error = ""

    async def update_link(
        self,
        link_id: LinkId,
        original_url: Optional[str] = None,
        short_code: Optional[str] = None
    ) -> Optional[Link]:
        """
        Save an edit. Only changed fields are sent; with no changes the
        edit is closed without a request.

        Returns:
            The confirmed link, or the unchanged one when nothing was sent
        """
        current = self._find(link_id) or self.editing_link
        if current is None or current.id != link_id:
            raise KeyError(f"Link {link_id} is not loaded")

        fields = changed_fields(current, original_url=original_url, short_code=short_code)
        if not fields:
            self.cancel_edit()
            return current

        try:
            updated = await self.link_service.update_link(link_id, fields)
        except APIError as e:
            if not self._closed and not isinstance(e, AuthError):
                self.edit_error = e.message
            raise

        if self._closed:
            return updated

        self.links = [updated if item.id == link_id else item for item in self.links]
        self.cancel_edit()
        self._recompute()
        self._show_success("Link updated successfully!")
        return updated

    async def delete_link(
        self,
        link_id: LinkId,
        confirm: Optional[Callable[[], bool]] = None
    ) -> bool:
        """
        Delete a link after the user confirms.

        Errors go to the error banner instead of being raised.

        Returns:
            True if the link was deleted
        """
        if confirm is not None and not confirm():
            return False

        try:
            await self.link_service.delete_link(link_id)
        except APIError as e:
            if not self._closed:
                self._show_error(e)
            return False

        if self._closed:
            return True

        self.links = [item for item in self.links if item.id != link_id]
        self._recompute()
        self._show_success("Link deleted successfully!")
        return True

    def set_search_term(self, term: str) -> None:
        """Record a keystroke; the projection updates after the quiet period."""
        self.pending_search_term = term
        self._search_debouncer.trigger(term)

    def flush_search(self) -> None:
        self._search_debouncer.flush()

    def set_sort(
        self,
        sort_key: Optional[Union[SortKey, str]] = None,
        sort_order: Optional[Union[SortOrder, str]] = None
    ) -> None:
        if sort_key is not None:
            self.sort_key = SortKey(sort_key)
        if sort_order is not None:
            self.sort_order = SortOrder(sort_order)
        self._recompute()

    def _apply_search_term(self, term: str) -> None:
        if self._closed:
            return
        self.search_term = term
        self._recompute()

    def _recompute(self) -> None:
        self.visible_links = derive_projection(
            self.links, self.search_term, self.sort_key, self.sort_order
        )
        self.recompute_count += 1

    def dismiss_error(self) -> None:
        self.error = ""

    def dismiss_success(self) -> None:
        self._success_timer.cancel()
        self.success = ""

    def _show_error(self, error: APIError) -> None:
        # A rejected session is handled by the login redirect, not a banner
        if isinstance(error, AuthError):
            return
        self.error = error.message

    def _show_success(self, message: str) -> None:
        self.success = message
        self._success_timer.trigger()

    def _on_session_change(self, session: Optional[Session]) -> None:
        if session is None and not self._closed:
            self.links = []
            self.cancel_edit()
            self._recompute()

    def close(self) -> None:
        """Tear down timers and subscriptions; late responses are ignored afterwards."""
        self._closed = True
        self._search_debouncer.cancel()
        self._success_timer.cancel()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _find(self, link_id: LinkId) -> Optional[Link]:
        for link in self.links:
            if link.id == link_id:
                return link
        return None
