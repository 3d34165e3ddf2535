"""
commands.py - User command dispatch
Single responsibility: map named user actions to state transitions.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from lobbyview.config import PAGE_SIZE
from lobbyview.domain.filters import SortKey
from lobbyview.domain.models import PageView
from lobbyview.services import view_service
from lobbyview.services.auto_refresh import AutoRefresher
from lobbyview.services.lobby_store import LobbyStore
from lobbyview.ui_state import ViewState

logger = logging.getLogger(__name__)


@dataclass
class BrowserSession:
    state: ViewState
    store: LobbyStore
    refresher: Optional[AutoRefresher] = None
    page_size: int = PAGE_SIZE


async def refresh_now(session: BrowserSession) -> None:
    await session.store.refresh()


def set_search_text(session: BrowserSession, text: str | None) -> PageView:
    session.state.search_text = text or ""
    session.state.page = 1
    return view_service.reconcile(session.state, session.page_size)


def set_region_filter(session: BrowserSession, region: str | None) -> PageView:
    session.state.region_filter = region or ""
    session.state.page = 1
    return view_service.reconcile(session.state, session.page_size)


def set_sort_order(session: BrowserSession, sort: str | None) -> PageView:
    if sort not in SortKey.ALL:
        logger.debug("Unknown sort key %r; leaving order untouched", sort)
    session.state.sort = sort or SortKey.UNORDERED
    return view_service.reconcile(session.state, session.page_size)


def toggle_auto_refresh(session: BrowserSession, enabled: bool) -> bool:
    session.state.auto_refresh = bool(enabled)
    if session.refresher is not None:
        session.refresher.set_enabled(session.state.auto_refresh)
    return session.state.auto_refresh


def previous_page(session: BrowserSession) -> PageView:
    return view_service.go_to_previous_page(session.state, session.page_size)


def next_page(session: BrowserSession) -> PageView:
    return view_service.go_to_next_page(session.state, session.page_size)


COMMANDS = {
    "refresh-now": refresh_now,
    "set-search-text": set_search_text,
    "set-region-filter": set_region_filter,
    "set-sort-order": set_sort_order,
    "toggle-auto-refresh": toggle_auto_refresh,
    "previous-page": previous_page,
    "next-page": next_page,
}


def dispatch(session: BrowserSession, name: str, *args):
    """Run a named command. Unknown names raise KeyError."""
    try:
        command = COMMANDS[name]
    except KeyError:
        raise KeyError(f"Unknown command: {name}") from None
    logger.debug("Command %s%r", name, args)
    return command(session, *args)
