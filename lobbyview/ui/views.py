"""
views.py - UI view builders
Single responsibility: build the lobby list View and render PageViews into it.
"""

import asyncio
from dataclasses import dataclass
from typing import Callable

import flet as ft

from lobbyview.config import (
    APP_TITLE,
    COLOR_BG,
    COLOR_CARD,
    COLOR_DANGER,
    COLOR_TEXT_MUTED,
    COLOR_TEXT_MAIN,
    COLOR_PRIMARY,
    COLOR_APPBAR_BG,
    COLOR_APPBAR_FG,
    BORDER_RADIUS_BTN,
    SHADOW_ELEVATION,
    SEARCH_DEBOUNCE_SECONDS,
)
from lobbyview.domain.filters import SortKey
from lobbyview.domain.models import PageView
from lobbyview.services.commands import BrowserSession, dispatch
from lobbyview.ui.components.lobby_card import LobbyCard
from lobbyview.ui.helpers import SORT_LABELS, region_label, status_line


@dataclass
class LobbyListView:
    view: ft.View
    render: Callable[[PageView], None]
    render_failure: Callable[[str], None]


def build_appbar(endpoint: str) -> ft.AppBar:
    return ft.AppBar(
        title=ft.Text(
            APP_TITLE,
            color=COLOR_APPBAR_FG,
            weight=ft.FontWeight.BOLD,
            size=20,
        ),
        bgcolor=COLOR_APPBAR_BG,
        center_title=False,
        elevation=SHADOW_ELEVATION,
        shadow_color=ft.Colors.BLACK12,
        automatically_imply_leading=False,
        actions=[
            ft.Container(
                content=ft.Text(endpoint, color=COLOR_TEXT_MUTED, size=12),
                padding=ft.Padding.only(right=24),
                alignment=ft.Alignment.CENTER_LEFT,
            ),
        ],
    )


def _empty_placeholder(text: str) -> ft.Container:
    return ft.Container(
        content=ft.Column(
            [
                ft.Icon(ft.Icons.INBOX, size=64, color="#d0d7de"),
                ft.Text(text, color=COLOR_TEXT_MUTED, size=16),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
        alignment=ft.Alignment.CENTER,
        padding=60,
        col={"xs": 12},
    )


def build_lobby_list_view(
    page: ft.Page,
    session: BrowserSession,
    on_refresh,
    on_copy_steam_id,
) -> LobbyListView:
    state = session.state
    search_task: asyncio.Task | None = None

    status_text = ft.Text("Loading lobbies...", size=13, color=COLOR_TEXT_MUTED)
    page_info = ft.Text("Page 1 / 1", size=13, color=COLOR_TEXT_MAIN)
    region_row = ft.Row(spacing=6, run_spacing=6, wrap=True)
    sort_row = ft.Row(spacing=0)
    cards_grid = ft.ResponsiveRow(controls=[], spacing=12, run_spacing=0)

    def render(view: PageView):
        status_text.value = status_line(view.status_text, state.last_refreshed_at, state.status_message)
        status_text.color = COLOR_DANGER if state.status_message else COLOR_TEXT_MUTED
        page_info.value = view.page_label
        prev_btn.disabled = not view.has_previous
        next_btn.disabled = not view.has_next
        if view.items:
            cards_grid.controls = [LobbyCard(record, on_copy_steam_id) for record in view.items]
        else:
            cards_grid.controls = [_empty_placeholder("No lobbies match the current filters")]
        _rebuild_regions()
        _rebuild_sort()
        page.update()

    def render_failure(message: str):
        # held records stay in the store; only the visible list is blanked
        status_text.value = message
        status_text.color = COLOR_DANGER
        cards_grid.controls = []
        page.update()

    # --- handlers -----------------------------------------------------

    async def _debounced_search(term_snapshot: str):
        # Debounce to avoid re-filtering on every keystroke
        try:
            await asyncio.sleep(SEARCH_DEBOUNCE_SECONDS)
        except asyncio.CancelledError:
            return
        if term_snapshot == (search_field.value or ""):
            render(dispatch(session, "set-search-text", term_snapshot))

    def on_search(e):
        nonlocal search_task
        if search_task and not search_task.done():
            search_task.cancel()

        async def runner(term: str):
            await _debounced_search(term)

        search_task = page.run_task(runner, e.control.value or "")

    def on_region_click(region: str):
        render(dispatch(session, "set-region-filter", region))

    def on_sort_click(sort_key: str):
        render(dispatch(session, "set-sort-order", sort_key))

    def on_auto_refresh_change(e):
        dispatch(session, "toggle-auto-refresh", bool(e.control.value))

    # --- builders -----------------------------------------------------

    def build_region_chip(region: str) -> ft.Container:
        selected = state.region_filter == region
        return ft.Container(
            content=ft.Text(
                region_label(region),
                size=12,
                color="white" if selected else COLOR_PRIMARY,
                weight=ft.FontWeight.W_500,
            ),
            bgcolor=COLOR_PRIMARY if selected else "#E6F2FF",
            padding=ft.Padding.symmetric(horizontal=10, vertical=4),
            border_radius=10,
            on_click=lambda _, r=region: on_region_click(r),
            ink=True,
        )

    def build_sort_btn(sort_key: str):
        selected = state.sort == sort_key
        color = COLOR_PRIMARY if selected else COLOR_TEXT_MUTED
        return ft.Container(
            content=ft.Text(
                SORT_LABELS[sort_key],
                color=color,
                weight=ft.FontWeight.BOLD if selected else ft.FontWeight.NORMAL,
            ),
            padding=ft.Padding.symmetric(vertical=10, horizontal=16),
            border=ft.border.only(
                bottom=ft.BorderSide(2, COLOR_PRIMARY if selected else "transparent")
            ),
            on_click=lambda _, k=sort_key: on_sort_click(k),
            ink=True,
            border_radius=ft.border_radius.only(top_left=6, top_right=6),
        )

    def _rebuild_regions():
        region_row.controls = [build_region_chip(r) for r in state.regions]

    def _rebuild_sort():
        sort_row.controls = [build_sort_btn(k) for k in SortKey.ALL]

    search_field = ft.TextField(
        prefix_icon=ft.Icons.SEARCH,
        hint_text="Search IP, port or Steam ID...",
        value=state.search_text,
        on_change=on_search,
        border_radius=BORDER_RADIUS_BTN,
        border_color="transparent",
        bgcolor=COLOR_CARD,
        content_padding=ft.Padding.symmetric(horizontal=12, vertical=12),
        text_size=14,
    )

    auto_switch = ft.Switch(
        label="Auto refresh",
        value=state.auto_refresh,
        on_change=on_auto_refresh_change,
        active_color=COLOR_PRIMARY,
    )

    refresh_btn = ft.FilledButton(
        "Refresh",
        icon=ft.Icons.REFRESH,
        style=ft.ButtonStyle(
            bgcolor=COLOR_PRIMARY,
            color="white",
            shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
        ),
        on_click=lambda e: on_refresh(),
    )

    prev_btn = ft.IconButton(
        icon=ft.Icons.CHEVRON_LEFT,
        tooltip="Previous page",
        disabled=True,
        on_click=lambda e: render(dispatch(session, "previous-page")),
    )
    next_btn = ft.IconButton(
        icon=ft.Icons.CHEVRON_RIGHT,
        tooltip="Next page",
        disabled=True,
        on_click=lambda e: render(dispatch(session, "next-page")),
    )

    _rebuild_regions()
    _rebuild_sort()

    header_row = ft.ResponsiveRow(
        controls=[
            ft.Container(content=search_field, col={"xs": 12, "md": 6}),
            ft.Container(
                content=ft.Row(
                    controls=[auto_switch, refresh_btn],
                    spacing=12,
                    alignment=ft.MainAxisAlignment.END,
                ),
                col={"xs": 12, "md": 6},
            ),
        ],
        spacing=12,
        run_spacing=12,
        vertical_alignment=ft.CrossAxisAlignment.CENTER,
    )

    pager_row = ft.Row(
        controls=[prev_btn, page_info, next_btn],
        alignment=ft.MainAxisAlignment.CENTER,
        vertical_alignment=ft.CrossAxisAlignment.CENTER,
    )

    list_content = ft.Column(
        controls=[cards_grid],
        scroll=ft.ScrollMode.AUTO,
        expand=True,
        spacing=0,
    )

    view = ft.View(
        route="/",
        appbar=build_appbar(session.store.url),
        bgcolor=COLOR_BG,
        padding=ft.Padding.symmetric(horizontal=24, vertical=16),
        controls=[
            header_row,
            ft.Container(height=12),
            sort_row,
            ft.Container(height=8),
            region_row,
            ft.Container(height=12),
            status_text,
            ft.Container(height=8),
            list_content,
            pager_row,
        ],
    )
    return LobbyListView(view=view, render=render, render_failure=render_failure)
