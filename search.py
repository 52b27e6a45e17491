# search.py

from typing import Iterable

from config import CATEGORY_FILTER_ALL
from shared_types import Ticket


def matches(ticket: Ticket, search_term: str = "", category_filter: str = CATEGORY_FILTER_ALL) -> bool:
    term = (search_term or "").lower()
    matches_search = (
        not term
        or term in ticket.text.lower()
        or term in ticket.user.lower()
    )
    matches_category = category_filter == CATEGORY_FILTER_ALL or ticket.category == category_filter
    return matches_search and matches_category


def filter_tickets(
    tickets: Iterable[Ticket],
    search_term: str = "",
    category_filter: str = CATEGORY_FILTER_ALL,
) -> list[Ticket]:
    """Tickets whose text or user contains ``search_term`` (case-insensitive)
    and whose category equals ``category_filter`` ("All" matches any).
    Input order is kept."""
    return [t for t in tickets if matches(t, search_term, category_filter)]
