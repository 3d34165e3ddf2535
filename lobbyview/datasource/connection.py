"""
connection.py - HTTP session helpers
Single responsibility: build requests sessions with shared defaults.
"""

import requests

from lobbyview.config import APP_TITLE, APP_VERSION

DEFAULT_REQUEST_HEADERS = {
    "User-Agent": f"{APP_TITLE.replace(' ', '')}/{APP_VERSION}",
    "Accept": "application/json",
}


def get_session() -> requests.Session:
    """Open a session carrying the default headers."""
    session = requests.Session()
    session.headers.update(DEFAULT_REQUEST_HEADERS)
    return session
