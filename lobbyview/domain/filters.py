"""
filters.py - Filter DTOs
Single responsibility: carry view parameters into the reconciler.
"""
from dataclasses import dataclass

ALL_REGIONS = ""  # synthetic "no filter" option


class SortKey:
    PLAYERS_DESC = "players_desc"
    PLAYERS_ASC = "players_asc"
    UNORDERED = "unordered"

    ALL = (PLAYERS_DESC, PLAYERS_ASC, UNORDERED)


@dataclass(frozen=True)
class ViewFilter:
    region: str = ALL_REGIONS
    search_text: str = ""
    sort: str = SortKey.PLAYERS_DESC

    @property
    def normalized_region(self) -> str:
        return (self.region or "").strip().lower()

    @property
    def normalized_query(self) -> str:
        return (self.search_text or "").strip().lower()
