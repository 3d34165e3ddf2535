from lobbyview.ui.helpers import status_line


def test_status_line_plain():
    assert status_line("Showing 2 server(s).", None) == "Showing 2 server(s)."


def test_status_line_with_refresh_time_and_failure():
    line = status_line("Showing 2 server(s).", "10:00:00", "Failed to load lobbies: Network error 500")
    assert line == "Showing 2 server(s). Updated 10:00:00. Failed to load lobbies: Network error 500"
