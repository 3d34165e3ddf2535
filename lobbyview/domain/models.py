"""
models.py - Domain models
Single responsibility: typed containers for lobby records and page views.
"""
from dataclasses import dataclass, field
from typing import Any, Optional

UNKNOWN = "unknown"
DEFAULT_REGION = "global"


# ---------------------------------------------------------------------------
# Per-field defaulting (applied once, at the read boundary)
# ---------------------------------------------------------------------------


def _text_or_none(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def default_ip(value: Any) -> Optional[str]:
    return _text_or_none(value)


def default_port(value: Any) -> str:
    """Port as text; absent or zero means empty, integral floats drop ".0"."""
    if value is None or value == "" or value == 0:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def default_count(value: Any) -> int:
    """Player counts: absent, unparsable, non-finite or negative means 0."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        count = int(value)
    except (TypeError, ValueError, OverflowError):
        try:
            count = int(float(value))
        except (TypeError, ValueError, OverflowError):
            return 0
    return max(count, 0)


def default_region(value: Any) -> str:
    return _text_or_none(value) or DEFAULT_REGION


def default_steam_id(value: Any) -> Optional[str]:
    return _text_or_none(value)


def default_version(value: Any) -> str:
    return _text_or_none(value) or UNKNOWN


@dataclass(frozen=True)
class LobbyRecord:
    lobby_id: Any = None
    ip: Optional[str] = None
    port: str = ""
    players: int = 0
    max_players: int = 0
    region: str = DEFAULT_REGION
    steam_id: Optional[str] = None
    version: str = UNKNOWN
    raw: dict = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_raw(cls, raw: Any) -> "LobbyRecord":
        """Build a record from one payload entry; non-mappings get all defaults."""
        if not isinstance(raw, dict):
            return cls()
        return cls(
            lobby_id=raw.get("lobbyId"),
            ip=default_ip(raw.get("ip")),
            port=default_port(raw.get("port")),
            players=default_count(raw.get("players")),
            max_players=default_count(raw.get("maxPlayers")),
            region=default_region(raw.get("region")),
            steam_id=default_steam_id(raw.get("steamId")),
            version=default_version(raw.get("version")),
            raw=raw,
        )

    @property
    def display_ip(self) -> str:
        return self.ip or UNKNOWN

    @property
    def display_steam_id(self) -> str:
        return self.steam_id or UNKNOWN

    @property
    def address(self) -> str:
        return f"{self.display_ip}:{self.port}"

    @property
    def is_full(self) -> bool:
        return self.max_players > 0 and self.players >= self.max_players

    def __getitem__(self, key):
        return getattr(self, key)


@dataclass(frozen=True)
class PageView:
    """Everything the presentation layer needs after one reconciliation."""

    items: list[LobbyRecord]
    filtered_count: int
    discovered_count: int
    page: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def status_text(self) -> str:
        return (
            f"Showing {self.filtered_count} server(s). "
            f"Total discovered: {self.discovered_count}. Page {self.page}."
        )

    @property
    def page_label(self) -> str:
        return f"Page {self.page} / {self.total_pages}"
