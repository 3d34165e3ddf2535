"""
lobby_client.py - Lobby listing client
Single responsibility: fetch the raw lobby payload from the listing endpoint.
"""
import logging

import requests

from lobbyview.config import API_URL, REQUEST_TIMEOUT
from lobbyview.datasource.connection import get_session

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """Any failed fetch; callers only see the message text."""


def fetch_lobbies(
    url: str = API_URL,
    *,
    timeout: float = REQUEST_TIMEOUT,
    session: requests.Session | None = None,
) -> list:
    """
    GET the listing endpoint and return the decoded JSON array.

    A successful response whose body is not a JSON array yields [].
    Non-2xx statuses, transport errors and undecodable bodies raise FetchError.
    """
    own_session = session is None
    session = session or get_session()
    try:
        try:
            response = session.get(url, timeout=timeout)
        except requests.RequestException as exc:
            raise FetchError(str(exc) or exc.__class__.__name__) from exc

        if not response.ok:
            raise FetchError(f"Network error {response.status_code}")

        try:
            data = response.json()
        except ValueError as exc:
            raise FetchError(f"Malformed response body: {exc}") from exc
    finally:
        if own_session:
            session.close()

    if not isinstance(data, list):
        logger.warning("Listing endpoint returned %s, expected a list", type(data).__name__)
        return []
    return data
