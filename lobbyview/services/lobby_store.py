"""
lobby_store.py - Lobby store
Single responsibility: own the fetched lobby records and the refresh lifecycle.
"""
import asyncio
import functools
import logging
from typing import Callable, Optional

from lobbyview.config import API_URL, PAGE_SIZE
from lobbyview.datasource.lobby_client import FetchError, fetch_lobbies
from lobbyview.domain.filters import ALL_REGIONS
from lobbyview.domain.models import LobbyRecord, PageView
from lobbyview.services import view_service
from lobbyview.utils.time import now_clock

logger = logging.getLogger(__name__)

FAILURE_PREFIX = "Failed to load lobbies: "


def compute_regions(records: list[LobbyRecord], selected: str = ALL_REGIONS) -> tuple[list[str], str]:
    """
    Distinct regions sorted ascending, headed by the "all regions" option.
    Returns (options, selection); the selection survives only if still offered,
    matched case-insensitively and spelled as the offered option.
    """
    regions = sorted({r.region for r in records})
    options = [ALL_REGIONS] + regions
    wanted = (selected or "").strip().lower()
    selected = next((r for r in regions if wanted and r.lower() == wanted), ALL_REGIONS)
    return options, selected


class LobbyStore:
    """
    Holds the last fetched records on a ViewState and refreshes them.

    Overlapping refresh() calls are not serialized: whichever response
    arrives last overwrites state.items.
    """

    def __init__(
        self,
        state,
        fetcher: Optional[Callable[[], list]] = None,
        *,
        url: str = API_URL,
        page_size: int = PAGE_SIZE,
        on_update: Optional[Callable[[PageView], None]] = None,
        on_failure: Optional[Callable[[str], None]] = None,
    ):
        self.state = state
        self.url = url
        self.page_size = page_size
        self._fetcher = fetcher or functools.partial(fetch_lobbies, url)
        self.on_update = on_update
        self.on_failure = on_failure

    async def refresh(self) -> None:
        """Fetch off the event loop, then apply the outcome. Never raises FetchError."""
        logger.debug("Refreshing lobbies from %s", self.url)
        try:
            payload = await asyncio.to_thread(self._fetcher)
        except FetchError as exc:
            self.apply_failure(str(exc))
            return
        self.apply_payload(payload)

    def apply_payload(self, payload) -> PageView:
        if not isinstance(payload, list):
            payload = []
        self.state.items = [LobbyRecord.from_raw(entry) for entry in payload]
        self.state.status_message = None
        self.state.last_refreshed_at = now_clock()
        self.refresh_regions()
        view = view_service.reconcile(self.state, self.page_size)
        logger.info(
            "Loaded %d lobbies (%d after filters)",
            view.discovered_count,
            view.filtered_count,
        )
        if self.on_update:
            self.on_update(view)
        return view

    def apply_failure(self, message: str) -> str:
        # state.items is kept; only the rendered list is cleared by the listener
        status = FAILURE_PREFIX + message
        self.state.status_message = status
        logger.warning("Lobby refresh failed: %s", message)
        if self.on_failure:
            self.on_failure(status)
        return status

    def refresh_regions(self) -> list[str]:
        options, selected = compute_regions(self.state.items, self.state.region_filter)
        if selected == ALL_REGIONS and self.state.region_filter:
            logger.debug("Region %r no longer listed; showing all regions", self.state.region_filter)
            self.state.page = 1
        self.state.regions = options
        self.state.region_filter = selected
        return options
