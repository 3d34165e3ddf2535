"""
helpers.py - UI helper functions
Single responsibility: small formatting helpers used across UI.
"""
from lobbyview.config import COLOR_FULL, COLOR_OPEN
from lobbyview.domain.filters import ALL_REGIONS, SortKey
from lobbyview.domain.models import UNKNOWN, LobbyRecord

SORT_LABELS = {
    SortKey.PLAYERS_DESC: "Players ↓",
    SortKey.PLAYERS_ASC: "Players ↑",
    SortKey.UNORDERED: "Unsorted",
}


def occupancy_text(record: LobbyRecord) -> str:
    return f"{record.players} / {record.max_players}"


def occupancy_color(record: LobbyRecord) -> str:
    return COLOR_FULL if record.is_full else COLOR_OPEN


def region_label(region: str) -> str:
    return "All regions" if region == ALL_REGIONS else region


def has_steam_id(steam_id: str | None) -> bool:
    return bool(steam_id) and steam_id != UNKNOWN


def status_line(status_text: str, last_refreshed_at: str | None, failure: str | None = None) -> str:
    """Counts line; a pending refresh failure is appended until the next success."""
    line = status_text
    if last_refreshed_at:
        line = f"{line} Updated {last_refreshed_at}."
    if failure:
        line = f"{line} {failure}"
    return line
