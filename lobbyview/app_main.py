"""
app_main.py - Lobby Browser main application
Lobby Browser v1.0
"""

import logging

import flet as ft

from lobbyview.config import (
    API_URL,
    APP_TITLE,
    AUTO_REFRESH_INTERVAL_MS,
    COLOR_BG,
    COLOR_PRIMARY,
    PAGE_SIZE,
)
from lobbyview.services.auto_refresh import AutoRefresher
from lobbyview.services.commands import BrowserSession, dispatch
from lobbyview.services.lobby_store import LobbyStore
from lobbyview.ui import actions, views
from lobbyview.ui_state import ViewState

logger = logging.getLogger(__name__)


def build_session(page: ft.Page, state: ViewState) -> BrowserSession:
    store = LobbyStore(state, url=API_URL, page_size=PAGE_SIZE)
    refresher = AutoRefresher(
        store.refresh,
        interval_ms=AUTO_REFRESH_INTERVAL_MS,
        spawn=page.run_task,
    )
    return BrowserSession(state=state, store=store, refresher=refresher, page_size=PAGE_SIZE)


# ==========================================================================
# Main app
# ==========================================================================


def main(page: ft.Page):
    page.title = APP_TITLE
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(color_scheme_seed=COLOR_PRIMARY)

    state = ViewState()
    session = build_session(page, state)

    async def refresh_task():
        await dispatch(session, "refresh-now")

    def refresh_now():
        page.run_task(refresh_task)

    def copy_steam_id(steam_id: str):
        page.run_task(actions.copy_steam_id, page, steam_id)

    try:
        lobby_view = views.build_lobby_list_view(
            page=page,
            session=session,
            on_refresh=refresh_now,
            on_copy_steam_id=copy_steam_id,
        )
    except Exception as exc:
        logger.exception("Failed to build lobby list view")
        page.overlay.append(
            ft.AlertDialog(
                title=ft.Text("Something went wrong"),
                content=ft.Text(f"Details: {exc}"),
                open=True,
            )
        )
        page.update()
        return

    session.store.on_update = lobby_view.render
    session.store.on_failure = lobby_view.render_failure

    page.views.clear()
    page.views.append(lobby_view.view)
    page.update()

    async def on_window_event(e: ft.WindowEvent):
        if e.type == ft.WindowEventType.CLOSE:
            logger.debug("Window close event, stopping auto-refresh")
            session.refresher.stop()
            page.window.prevent_close = False
            await page.window.close()

    page.window.prevent_close = True
    page.window.on_event = on_window_event

    async def startup():
        await refresh_task()
        if state.auto_refresh:
            dispatch(session, "toggle-auto-refresh", True)

    page.run_task(startup)


# ==========================================================================
# Entry point
# ==========================================================================


if __name__ == "__main__":
    ft.app(main)
