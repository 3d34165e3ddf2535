import pytest

from lobbyview.domain.models import LobbyRecord
from lobbyview.ui_state import ViewState

from payloads import make_payload


@pytest.fixture
def fifteen_eu_records() -> list[LobbyRecord]:
    return [LobbyRecord.from_raw(raw) for raw in make_payload(15)]


@pytest.fixture
def state() -> ViewState:
    return ViewState(sort="players_desc", auto_refresh=False)
