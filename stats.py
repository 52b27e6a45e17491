# stats.py
# Per-category distribution of the current ticket set. Recomputed on demand.

from collections import Counter
from typing import Iterable

from categories import DEFAULT_REGISTRY, CategoryRegistry
from shared_types import CategoryStats, Ticket, round_half_up


def percentage(count: int, total: int) -> int:
    if total <= 0:
        return 0
    return round_half_up(count / total * 100)


def category_counts(tickets: Iterable[Ticket]) -> dict[str, int]:
    return dict(Counter(t.category for t in tickets))


def category_stats(
    tickets: Iterable[Ticket],
    registry: CategoryRegistry = DEFAULT_REGISTRY,
) -> dict[str, CategoryStats]:
    """
    Count and percentage per category.

    Only categories with at least one ticket are listed, in registry
    declaration order.
    """
    counts = category_counts(tickets)
    total = sum(counts.values())

    return {
        name: CategoryStats(count=counts[name], percentage=percentage(counts[name], total))
        for name in registry.names()
        if name in counts
    }
