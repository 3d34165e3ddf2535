import asyncio

from lobbyview.ui import actions


class FakePage:
    def __init__(self):
        self.overlay = []
        self.updates = 0

    def update(self):
        self.updates += 1


def test_missing_steam_id_is_reported():
    page = FakePage()

    async def never_called(_page, _value):
        raise AssertionError("clipboard must not be touched")

    for steam_id in (None, "", "unknown"):
        assert asyncio.run(actions.copy_steam_id(page, steam_id, set_clipboard=never_called)) == "missing"
    assert len(page.overlay) == 3


def test_copy_success():
    page = FakePage()
    copied = []

    async def set_clipboard(_page, value):
        copied.append(value)

    result = asyncio.run(actions.copy_steam_id(page, "76561190000000001", set_clipboard=set_clipboard))

    assert result == "copied"
    assert copied == ["76561190000000001"]
    assert page.overlay[-1].open


def test_clipboard_failure_falls_back_to_manual_copy():
    page = FakePage()

    async def broken_clipboard(_page, _value):
        raise RuntimeError("clipboard unavailable")

    result = asyncio.run(actions.copy_steam_id(page, "76561190000000001", set_clipboard=broken_clipboard))

    assert result == "manual"
    dialog = page.overlay[-1]
    assert dialog.open
    assert page.updates == 1
