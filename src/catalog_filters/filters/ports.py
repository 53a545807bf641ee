"""Filters – ports consumed by the filters build pass."""
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from catalog_filters.filters.values import FacetValue

if TYPE_CHECKING:
    from catalog_filters.filters.condition import Condition


@runtime_checkable
class Searcher(Protocol):
    """Aggregation backend that counts candidate values per facet.

    ``count_values`` may raise
    :class:`~catalog_filters.kernel.errors.AggregationUnavailableError`.
    Retries belong to the searcher's own client.
    """

    def set_filters(self, condition: "Condition") -> None: ...
    def count_values(
        self, condition: "Condition", category_id: int, facet_key: str
    ) -> Sequence[FacetValue]: ...


@runtime_checkable
class RegionPolicy(Protocol):
    """Region-specific switches evaluated by the orchestrator."""

    def is_seller_facet_enabled(self) -> bool: ...


class StaticRegionPolicy:
    """RegionPolicy with a fixed answer, e.g. read from deployment config."""

    def __init__(self, seller_facet_enabled: bool = True) -> None:
        self._seller_facet_enabled = seller_facet_enabled

    def is_seller_facet_enabled(self) -> bool:
        return self._seller_facet_enabled


__all__ = ["RegionPolicy", "Searcher", "StaticRegionPolicy"]
