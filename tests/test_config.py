import pytest

from lobbyview import config


@pytest.mark.parametrize("raw", ["abc", "0", "-5", "", "  "])
def test_invalid_int_override_falls_back(monkeypatch, raw):
    monkeypatch.setenv("LOBBY_PAGE_SIZE", raw)
    assert config._env_int("LOBBY_PAGE_SIZE", 12) == 12


def test_valid_int_override(monkeypatch):
    monkeypatch.setenv("LOBBY_PAGE_SIZE", "20")
    assert config._env_int("LOBBY_PAGE_SIZE", 12) == 20


def test_unset_int_uses_default(monkeypatch):
    monkeypatch.delenv("LOBBY_PAGE_SIZE", raising=False)
    assert config._env_int("LOBBY_PAGE_SIZE", 12) == 12


@pytest.mark.parametrize("raw, expected", [("1", True), ("true", True), ("ON", True), ("0", False), ("no", False)])
def test_flag_override(monkeypatch, raw, expected):
    monkeypatch.setenv("LOBBY_AUTO_REFRESH", raw)
    assert config._env_flag("LOBBY_AUTO_REFRESH") is expected


def test_defaults():
    assert config.PAGE_SIZE > 0
    assert config.AUTO_REFRESH_INTERVAL_MS > 0
    assert config.API_URL.startswith("http")
