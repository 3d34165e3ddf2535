"""
actions.py - UI-side actions and dialogs
Single responsibility: handle modal flows triggered from lobby cards.
"""
import logging

import flet as ft

from lobbyview.config import (
    COLOR_BORDER,
    COLOR_PRIMARY,
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
)
from lobbyview.ui.helpers import has_steam_id

logger = logging.getLogger(__name__)


async def _set_clipboard(page: ft.Page, value: str) -> None:
    await ft.Clipboard().set(value)


def show_message(page: ft.Page, title: str, text: str) -> ft.AlertDialog:
    def on_close(_e=None):
        dialog.open = False
        page.update()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(title, weight=ft.FontWeight.BOLD),
        content=ft.Text(text, selectable=True),
        actions=[ft.TextButton("OK", on_click=on_close)],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()
    return dialog


def show_manual_copy_dialog(page: ft.Page, steam_id: str) -> ft.AlertDialog:
    """Fallback when the clipboard is unavailable: show the value for manual copying."""
    value_field = ft.TextField(
        label="Steam ID",
        value=steam_id,
        read_only=True,
        autofocus=True,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
    )

    def on_close(_e=None):
        dialog.open = False
        page.update()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Copy Steam ID manually", weight=ft.FontWeight.BOLD),
        content=ft.Container(
            content=ft.Column(
                controls=[
                    ft.Text("Select the value below and copy it."),
                    value_field,
                ],
                spacing=16,
                tight=True,
            ),
            width=420,
        ),
        actions=[ft.TextButton("Close", on_click=on_close)],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()
    return dialog


async def copy_steam_id(page: ft.Page, steam_id: str | None, set_clipboard=_set_clipboard) -> str:
    """
    Copy a lobby host's Steam ID and tell the user what happened.

    Returns "missing", "copied" or "manual" for the path taken.
    """
    if not has_steam_id(steam_id):
        show_message(page, "Steam ID", "No Steam ID available for this lobby.")
        return "missing"

    try:
        await set_clipboard(page, steam_id)
    except Exception:
        logger.warning("Clipboard copy failed; offering manual copy", exc_info=True)
        show_manual_copy_dialog(page, steam_id)
        return "manual"

    show_message(
        page,
        "Steam ID copied",
        f"Steam ID copied:\n{steam_id}\nUse this Steam ID in-game to connect.",
    )
    return "copied"
