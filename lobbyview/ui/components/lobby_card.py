import flet as ft
from lobbyview.config import (
    COLOR_CARD,
    COLOR_TEXT_MUTED,
    COLOR_TEXT_MAIN,
    COLOR_PRIMARY,
    BORDER_RADIUS_CARD,
    BORDER_RADIUS_BTN,
)
from lobbyview.domain.models import LobbyRecord
from lobbyview.ui.helpers import occupancy_color, occupancy_text


class LobbyCard(ft.Container):
    def __init__(self, record: LobbyRecord, on_copy_callback):
        super().__init__()
        self.record = record
        self.on_copy_callback = on_copy_callback

        self.padding = ft.Padding.all(16)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.border = ft.border.all(1, "transparent")
        self.shadow = ft.BoxShadow(
            blur_radius=2,
            color=ft.Colors.BLACK12,
            offset=ft.Offset(0, 1),
        )
        self.margin = ft.margin.only(bottom=12)
        self.col = {"xs": 12, "md": 6, "lg": 4}

        self.content = self._build_content()

    def _handle_copy(self, e):
        if self.on_copy_callback:
            self.on_copy_callback(self.record.display_steam_id)

    def _build_content(self):
        record = self.record
        accent_color = occupancy_color(record)

        def small(text: str) -> ft.Text:
            return ft.Text(text, size=12, color=COLOR_TEXT_MUTED, selectable=True)

        return ft.Column(
            controls=[
                ft.Row(
                    controls=[
                        ft.Text(
                            record.address,
                            weight=ft.FontWeight.BOLD,
                            size=16,
                            color=COLOR_TEXT_MAIN,
                            max_lines=1,
                            overflow=ft.TextOverflow.ELLIPSIS,
                            expand=True,
                        ),
                        ft.Container(
                            content=ft.Text(
                                occupancy_text(record),
                                size=11,
                                color="white",
                                weight=ft.FontWeight.BOLD,
                            ),
                            bgcolor=accent_color,
                            border_radius=12,
                            padding=ft.Padding.symmetric(horizontal=10, vertical=2),
                        ),
                    ],
                    spacing=8,
                ),
                small(f"Region: {record.region}"),
                small(f"Host SteamID (use this to connect): {record.display_steam_id}"),
                small(f"Lobby ID: {record.lobby_id}"),
                small(f"Version: {record.version}"),
                ft.Row(
                    controls=[
                        small(f"Players: {record.players}/{record.max_players}"),
                        ft.Container(expand=True),
                        ft.OutlinedButton(
                            "Show / Copy",
                            icon=ft.Icons.CONTENT_COPY,
                            style=ft.ButtonStyle(
                                color=COLOR_PRIMARY,
                                shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
                            ),
                            on_click=self._handle_copy,
                        ),
                    ],
                    vertical_alignment=ft.CrossAxisAlignment.CENTER,
                ),
            ],
            spacing=4,
        )
