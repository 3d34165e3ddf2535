"""
view_service.py - View reconciliation
Single responsibility: derive the displayed subset, order and page from
the held records and the current view parameters. No network, no timers.
"""
import math
from typing import Iterable

from lobbyview.config import PAGE_SIZE
from lobbyview.domain.filters import SortKey, ViewFilter
from lobbyview.domain.models import LobbyRecord, PageView


def _matches_region(record: LobbyRecord, region: str) -> bool:
    return record.region.lower() == region


def _matches_query(record: LobbyRecord, query: str) -> bool:
    return (
        query in (record.ip or "").lower()
        or query in record.port
        or query in (record.steam_id or "").lower()
    )


def filter_and_sort(records: Iterable[LobbyRecord], view_filter: ViewFilter) -> list[LobbyRecord]:
    """Region filter, then text filter, then a stable sort. Never mutates input."""
    items = list(records)

    region = view_filter.normalized_region
    if region:
        items = [r for r in items if _matches_region(r, region)]

    query = view_filter.normalized_query
    if query:
        items = [r for r in items if _matches_query(r, query)]

    # sorted() is stable, so ties keep their filtered order in both directions
    if view_filter.sort == SortKey.PLAYERS_DESC:
        items = sorted(items, key=lambda r: r.players, reverse=True)
    elif view_filter.sort == SortKey.PLAYERS_ASC:
        items = sorted(items, key=lambda r: r.players)
    return items


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int, pages: int) -> int:
    return max(1, min(page, pages))


def paginate(
    filtered: list[LobbyRecord],
    page: int,
    *,
    discovered_count: int | None = None,
    page_size: int = PAGE_SIZE,
) -> PageView:
    pages = total_pages(len(filtered), page_size)
    page = clamp_page(page, pages)
    start = (page - 1) * page_size
    return PageView(
        items=filtered[start:start + page_size],
        filtered_count=len(filtered),
        discovered_count=len(filtered) if discovered_count is None else discovered_count,
        page=page,
        total_pages=pages,
    )


def reconcile(state, page_size: int = PAGE_SIZE) -> PageView:
    """Recompute state.filtered from scratch and clamp state.page."""
    state.filtered = filter_and_sort(state.items, state.view_filter())
    view = paginate(
        state.filtered,
        state.page,
        discovered_count=len(state.items),
        page_size=page_size,
    )
    state.page = view.page
    return view


def current_page(state, page_size: int = PAGE_SIZE) -> PageView:
    """Re-slice the held filtered list without filtering again."""
    view = paginate(
        state.filtered,
        state.page,
        discovered_count=len(state.items),
        page_size=page_size,
    )
    state.page = view.page
    return view


def go_to_previous_page(state, page_size: int = PAGE_SIZE) -> PageView:
    if state.page > 1:
        state.page -= 1
    return current_page(state, page_size)


def go_to_next_page(state, page_size: int = PAGE_SIZE) -> PageView:
    if state.page < total_pages(len(state.filtered), page_size):
        state.page += 1
    return current_page(state, page_size)
