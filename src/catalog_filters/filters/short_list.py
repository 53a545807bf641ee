"""Filters – ShortListComposer.

Bounds how many values of a facet are shown by default ("short list") and
fixes a deterministic order for the remaining ones ("rest").

Two paths:

* **no-ranking** (``Facet.disallow_auto_ranking``): values keep their order,
  the short list is the first *K* of them.
* **ranked**: values are rank-sorted, a window of ``min(K, S)`` values is
  taken where *S* is the number of ranked values (or *K* when nothing is
  ranked or the facet does not rank automatically). The window is split into
  ranked and non-ranked parts, each sorted by title, ranked part first. The
  rest is sorted enabled-before-disabled, then by title.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Sequence

from catalog_filters.config.validation import InvalidSettingValueError
from catalog_filters.filters.ranking import sort_values_by_rank
from catalog_filters.filters.values import SENTINEL_IDS, Facet, FacetValue


def title_key(value: FacetValue) -> tuple[str, str]:
    """Case-insensitive title order with the raw title as tie-breaker."""
    return (value.title.casefold(), value.title)


class ShortListComposer:
    """Compose ``short_list``/``values`` and the counters of a built facet."""

    def __init__(self, default_short_list_size: int = 10) -> None:
        valid = isinstance(default_short_list_size, int) and not isinstance(default_short_list_size, bool)
        if not valid or default_short_list_size <= 0:
            raise InvalidSettingValueError(
                "default_short_list_size", default_short_list_size, "must be a positive integer"
            )
        self._size = default_short_list_size

    @property
    def default_short_list_size(self) -> int:
        return self._size

    def compose(self, facet: Facet) -> Facet:
        if facet.disallow_auto_ranking:
            return self._without_auto_ranking(facet)
        return self._with_ranking(facet)

    def _without_auto_ranking(self, facet: Facet) -> Facet:
        values = facet.values
        return dataclasses.replace(
            facet,
            short_list=values[: self._size],
            total_found=len(values),
            total_filtered=sum(1 for v in values if not v.disabled),
        )

    def _with_ranking(self, facet: Facet) -> Facet:
        ranked = sort_values_by_rank(facet.values)
        auto = facet.with_auto_ranking

        window = self._size
        if auto and ranked.rank_count > 0:
            window = min(self._size, ranked.rank_count)

        total_found = 0
        total_filtered = 0
        candidates: list[FacetValue] = []
        for value in ranked.values:
            if not value.disabled:
                total_filtered += 1
            if total_found < window:
                candidates.append(value)
            total_found += 1

        short_list = self._sort_short_list(candidates)
        rest = self._rest(facet.values, short_list)

        return dataclasses.replace(
            facet,
            values=tuple(short_list) + tuple(rest),
            short_list=tuple(short_list),
            total_found=total_found,
            total_filtered=total_filtered,
        )

    @staticmethod
    def _sort_short_list(candidates: Sequence[FacetValue]) -> list[FacetValue]:
        ranked = sorted((v for v in candidates if v.is_rank), key=title_key)
        plain = sorted((v for v in candidates if not v.is_rank), key=title_key)
        return ranked + plain

    @staticmethod
    def _rest(values: Sequence[FacetValue], short_list: Sequence[FacetValue]) -> list[FacetValue]:
        taken = {v.id for v in short_list}
        rest = [v for v in values if v.id not in SENTINEL_IDS and v.id not in taken]
        return sorted(rest, key=lambda v: (v.disabled, *title_key(v)))


__all__ = ["ShortListComposer", "title_key"]
