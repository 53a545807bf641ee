"""Filters – FacetValue, Facet and FilterSet value objects."""
from __future__ import annotations

import dataclasses

ValueId = int | str

#: Ids the searcher uses for placeholder values that never reach the rest list.
SENTINEL_IDS: frozenset[ValueId | None] = frozenset({0, None})


@dataclasses.dataclass(frozen=True, slots=True)
class FacetValue:
    """One selectable option of a facet, as returned by the searcher.

    ``disabled`` means selecting the value would yield zero results under the
    current condition. ``rank`` only matters when ``is_rank`` is set; higher
    is more relevant.
    """

    id: ValueId | None
    title: str
    is_rank: bool = False
    disabled: bool = False
    rank: float = 0
    count: int = 0


@dataclasses.dataclass(frozen=True)
class Facet:
    """A filterable attribute group with its values.

    Builders produce a raw facet (``values`` only); the short-list composer
    fills ``short_list`` and the counters; the orchestrator assigns ``order``.
    """

    option_name: str
    values: tuple[FacetValue, ...]
    short_list: tuple[FacetValue, ...] = ()
    total_found: int = 0
    total_filtered: int = 0
    order: int | None = None
    disallow_auto_ranking: bool = False
    with_auto_ranking: bool = True
    option_title: str = ""

    def __post_init__(self) -> None:
        # builders may hand over lists
        object.__setattr__(self, "values", tuple(self.values))
        object.__setattr__(self, "short_list", tuple(self.short_list))

    @property
    def value_ids(self) -> list[ValueId | None]:
        return [v.id for v in self.values]

    @property
    def short_list_ids(self) -> list[ValueId | None]:
        return [v.id for v in self.short_list]

    def with_order(self, order: int) -> "Facet":
        """Return a copy of this facet positioned at *order*."""
        return dataclasses.replace(self, order=order)


@dataclasses.dataclass(frozen=True)
class FilterSet:
    """Output of one build pass: facets in display order plus chosen values."""

    filters: tuple[Facet, ...] = ()
    chosen: tuple[tuple[str, ValueId], ...] = ()

    def __len__(self) -> int:
        return len(self.filters)

    @property
    def option_names(self) -> list[str]:
        return [f.option_name for f in self.filters]

    def get(self, option_name: str) -> Facet | None:
        for facet in self.filters:
            if facet.option_name == option_name:
                return facet
        return None


__all__ = ["SENTINEL_IDS", "Facet", "FacetValue", "FilterSet", "ValueId"]
