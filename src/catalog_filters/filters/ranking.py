"""Filters – rank sorter for the values of a single facet."""
from __future__ import annotations

import dataclasses
from collections.abc import Sequence

from catalog_filters.filters.values import FacetValue


@dataclasses.dataclass(frozen=True)
class RankedValues:
    """Rank-sorted values plus the counters the short-list pass needs."""

    values: tuple[FacetValue, ...]
    rank_count: int = 0
    rank_active_count: int = 0


def sort_values_by_rank(values: Sequence[FacetValue], with_counts: bool = True) -> RankedValues:
    """Move rank-eligible values to the front, highest rank first.

    Values without ``is_rank`` keep their relative order after the ranked
    ones. ``sorted`` is stable, so equal ranks keep input order; titles are
    never consulted. With ``with_counts=False`` both counters stay at zero.
    """
    ranked = sorted((v for v in values if v.is_rank), key=lambda v: v.rank, reverse=True)
    plain = [v for v in values if not v.is_rank]

    rank_count = rank_active_count = 0
    if with_counts:
        rank_count = len(ranked)
        rank_active_count = sum(1 for v in ranked if not v.disabled)

    return RankedValues(
        values=tuple(ranked + plain),
        rank_count=rank_count,
        rank_active_count=rank_active_count,
    )


__all__ = ["RankedValues", "sort_values_by_rank"]
