import asyncio
import json

from lobbyview.datasource.lobby_client import FetchError
from lobbyview.domain.models import LobbyRecord
from lobbyview.services.lobby_store import LobbyStore, compute_regions

from payloads import make_payload


class Recorder:
    def __init__(self):
        self.views = []
        self.failures = []

    def on_update(self, view):
        self.views.append(view)

    def on_failure(self, message):
        self.failures.append(message)


def _store(state, fetcher, recorder):
    return LobbyStore(
        state,
        fetcher,
        url="http://lobbies.test/list",
        on_update=recorder.on_update,
        on_failure=recorder.on_failure,
    )


def test_refresh_replaces_items_and_renders(state):
    recorder = Recorder()
    store = _store(state, lambda: make_payload(15), recorder)

    asyncio.run(store.refresh())

    assert len(state.items) == 15
    assert all(isinstance(r, LobbyRecord) for r in state.items)
    assert state.status_message is None
    assert state.last_refreshed_at is not None
    assert state.regions == ["", "eu"]
    assert len(recorder.views) == 1
    assert recorder.views[0].discovered_count == 15
    assert recorder.failures == []


def test_refresh_replaces_wholesale(state):
    payloads = iter([make_payload(15), make_payload(2, region="na")])
    store = _store(state, lambda: next(payloads), Recorder())

    asyncio.run(store.refresh())
    asyncio.run(store.refresh())

    assert [r.region for r in state.items] == ["na", "na"]


def test_http_failure_keeps_items_and_reports_status(state):
    recorder = Recorder()
    outcomes = iter([make_payload(3)])

    def fetcher():
        try:
            return next(outcomes)
        except StopIteration:
            raise FetchError("Network error 500")

    store = _store(state, fetcher, recorder)
    asyncio.run(store.refresh())
    before = list(state.items)

    asyncio.run(store.refresh())

    assert state.items == before
    assert "500" in state.status_message
    assert recorder.failures == ["Failed to load lobbies: Network error 500"]
    assert len(recorder.views) == 1


def test_non_list_payload_is_treated_as_empty(state):
    store = _store(state, lambda: {"unexpected": True}, Recorder())
    asyncio.run(store.refresh())
    assert state.items == []
    assert state.page == 1


def test_compute_regions_sorted_with_all_option():
    records = [LobbyRecord.from_raw(raw) for raw in ({"region": "na"}, {}, {"region": "eu"}, {"region": "na"})]
    options, selected = compute_regions(records, "na")
    assert options == ["", "eu", "global", "na"]
    assert selected == "na"


def test_stale_region_selection_falls_back_to_all(state):
    recorder = Recorder()
    payloads = iter([make_payload(3, region="eu"), make_payload(3, region="na")])
    store = _store(state, lambda: next(payloads), recorder)

    asyncio.run(store.refresh())
    state.region_filter = "eu"
    asyncio.run(store.refresh())

    assert state.regions == ["", "na"]
    assert state.region_filter == ""
    assert recorder.views[-1].filtered_count == 3


def test_selected_region_survives_refresh(state):
    store = _store(state, lambda: make_payload(2, region="eu") + make_payload(1, region="na"), Recorder())
    asyncio.run(store.refresh())
    state.region_filter = "na"
    asyncio.run(store.refresh())
    assert state.region_filter == "na"
    assert len(state.filtered) == 1


def test_overflowing_player_count_still_loads(state):
    recorder = Recorder()
    payload = json.loads('[{"ip": "1.2.3.4", "players": 1e400}, {"ip": "5.6.7.8", "players": 2}]')
    store = _store(state, lambda: payload, recorder)

    asyncio.run(store.refresh())

    assert [r.players for r in state.items] == [0, 2]
    assert recorder.failures == []
    assert recorder.views[-1].discovered_count == 2


def test_region_selection_matches_case_insensitively(state):
    store = _store(state, lambda: make_payload(2, region="eu") + make_payload(1, region="na"), Recorder())
    asyncio.run(store.refresh())
    state.region_filter = "EU"
    asyncio.run(store.refresh())
    assert state.region_filter == "eu"
    assert len(state.filtered) == 2


def test_compute_regions_keeps_option_spelling():
    records = [LobbyRecord.from_raw({"region": "EU"})]
    assert compute_regions(records, " eu ") == (["", "EU"], "EU")
    assert compute_regions(records, "na") == (["", "EU"], "")


def test_failure_message_cleared_by_next_success(state):
    outcomes = iter([FetchError("Network error 503"), make_payload(1)])

    def fetcher():
        outcome = next(outcomes)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    store = _store(state, fetcher, Recorder())
    asyncio.run(store.refresh())
    assert state.status_message == "Failed to load lobbies: Network error 503"
    asyncio.run(store.refresh())
    assert state.status_message is None
