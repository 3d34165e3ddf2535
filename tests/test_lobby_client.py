import json

import pytest
import requests

from lobbyview.datasource.lobby_client import FetchError, fetch_lobbies


class FakeResponse:
    def __init__(self, status_code=200, body="[]"):
        self.status_code = status_code
        self._body = body

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        return json.loads(self._body)


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error:
            raise self.error
        return self.response


def test_returns_decoded_list():
    session = FakeSession(FakeResponse(body='[{"ip": "1.2.3.4"}]'))
    assert fetch_lobbies("http://lobbies.test/list", timeout=3, session=session) == [{"ip": "1.2.3.4"}]
    assert session.calls == [("http://lobbies.test/list", 3)]


@pytest.mark.parametrize("body", ['{"ip": "1.2.3.4"}', "null", '"text"', "42"])
def test_non_list_body_becomes_empty(body):
    assert fetch_lobbies("http://lobbies.test/list", session=FakeSession(FakeResponse(body=body))) == []


def test_http_error_status_is_reported():
    session = FakeSession(FakeResponse(status_code=503))
    with pytest.raises(FetchError, match="Network error 503"):
        fetch_lobbies("http://lobbies.test/list", session=session)


def test_transport_error_message_is_kept():
    session = FakeSession(error=requests.ConnectionError("connection refused"))
    with pytest.raises(FetchError, match="connection refused"):
        fetch_lobbies("http://lobbies.test/list", session=session)


def test_malformed_body_is_a_failure():
    session = FakeSession(FakeResponse(body="<html>oops</html>"))
    with pytest.raises(FetchError, match="Malformed response body"):
        fetch_lobbies("http://lobbies.test/list", session=session)
