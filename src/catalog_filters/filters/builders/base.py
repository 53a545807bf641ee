"""Facet builders – FacetBuilder port and the single-key base implementation."""
from __future__ import annotations

import abc
from typing import ClassVar

from catalog_filters.filters.condition import Condition
from catalog_filters.filters.ports import Searcher
from catalog_filters.filters.values import Facet


class FacetBuilder(abc.ABC):
    """Port: produce the raw facets of one facet type.

    An empty list means "no applicable values"; the orchestrator never emits
    a facet without values. ``region_gated`` builders only run when the
    injected :class:`~catalog_filters.filters.ports.RegionPolicy` allows it.
    """

    region_gated: ClassVar[bool] = False

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Identifier used in logs; the facet key for single-facet builders."""

    @abc.abstractmethod
    def build(self, condition: Condition, searcher: Searcher, category_id: int) -> list[Facet]: ...


class SingleFacetBuilder(FacetBuilder):
    """Build one facet from ``searcher.count_values`` for ``option_name``."""

    option_name: ClassVar[str] = ""
    option_title: ClassVar[str] = ""
    with_auto_ranking: ClassVar[bool] = True
    disallow_auto_ranking: ClassVar[bool] = False

    @property
    def name(self) -> str:
        return self.option_name

    def build(self, condition: Condition, searcher: Searcher, category_id: int) -> list[Facet]:
        values = searcher.count_values(condition, category_id, self.option_name)
        if not values:
            return []
        return [
            Facet(
                option_name=self.option_name,
                option_title=self.option_title,
                values=tuple(values),
                with_auto_ranking=self.with_auto_ranking,
                disallow_auto_ranking=self.disallow_auto_ranking,
            )
        ]


__all__ = ["FacetBuilder", "SingleFacetBuilder"]
