"""
config.py - endpoint, polling and UI constants
Lobby Browser v1.0
"""

import logging
import os

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Environment overrides
# ---------------------------------------------------------------------------


def _env_int(name: str, default: int) -> int:
    """Positive integer from the environment; anything else yields default."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r, using %s", name, raw, default)
        return default
    return value


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# ---------------------------------------------------------------------------
# Data source / polling
# ---------------------------------------------------------------------------

API_URL = os.environ.get("LOBBY_API_URL", "https://server.ctksystem.com/lobby/list")
AUTO_REFRESH_INTERVAL_MS = _env_int("LOBBY_REFRESH_INTERVAL_MS", 5000)
AUTO_REFRESH_DEFAULT = _env_flag("LOBBY_AUTO_REFRESH")
REQUEST_TIMEOUT = _env_int("LOBBY_REQUEST_TIMEOUT", 10)  # seconds
PAGE_SIZE = _env_int("LOBBY_PAGE_SIZE", 12)
LOG_LEVEL = os.environ.get("LOBBY_LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# App constants
# ---------------------------------------------------------------------------

APP_TITLE = "Lobby Browser"
APP_VERSION = "0.1.0"
DEFAULT_SORT = "players_desc"
SEARCH_DEBOUNCE_SECONDS = 0.3

# ---------------------------------------------------------------------------
# Color palette
# ---------------------------------------------------------------------------

COLOR_OPEN = "#2da44e"  # has free slots
COLOR_FULL = "#8250df"  # lobby is full
COLOR_BG = "#F0F2F5"
COLOR_CARD = "#FFFFFF"
COLOR_BORDER = "#D0D7DE"
COLOR_TEXT_MUTED = "#656D76"
COLOR_TEXT_MAIN = "#1F2328"
COLOR_PRIMARY = "#0969DA"
COLOR_DANGER = "#CF222E"

# AppBar
COLOR_APPBAR_BG = "#FFFFFF"
COLOR_APPBAR_FG = "#1F2328"

# UI constants
BORDER_RADIUS_CARD = 10
BORDER_RADIUS_BTN = 6
SHADOW_ELEVATION = 2
