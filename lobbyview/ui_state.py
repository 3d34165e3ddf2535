"""
ui_state.py - view state container
"""
from lobbyview.config import AUTO_REFRESH_DEFAULT, DEFAULT_SORT
from lobbyview.domain.filters import ALL_REGIONS, ViewFilter


class ViewState:
    def __init__(self, sort: str = DEFAULT_SORT, auto_refresh: bool = AUTO_REFRESH_DEFAULT):
        self.items: list = []  # LobbyRecord, replaced wholesale on each fetch
        self.filtered: list = []  # derived by view_service.reconcile
        self.page: int = 1
        self.sort: str = sort  # "players_desc" | "players_asc" | "unordered"
        self.search_text: str = ""
        self.region_filter: str = ALL_REGIONS
        self.auto_refresh: bool = auto_refresh
        self.regions: list[str] = [ALL_REGIONS]
        self.status_message: str | None = None
        self.last_refreshed_at: str | None = None

    def view_filter(self) -> ViewFilter:
        return ViewFilter(
            region=self.region_filter,
            search_text=self.search_text,
            sort=self.sort,
        )
