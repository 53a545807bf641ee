"""Filters – facet building, ranking, short-listing and ordering."""
from catalog_filters.filters.builder import FiltersBuilder
from catalog_filters.filters.builders import FacetBuilder, SingleFacetBuilder, default_builders
from catalog_filters.filters.condition import Condition
from catalog_filters.filters.ordering import OrderSequencer, OrderSpec, load_order_spec
from catalog_filters.filters.ports import RegionPolicy, Searcher, StaticRegionPolicy
from catalog_filters.filters.ranking import RankedValues, sort_values_by_rank
from catalog_filters.filters.short_list import ShortListComposer
from catalog_filters.filters.values import Facet, FacetValue, FilterSet

__all__ = [
    "Condition",
    "Facet",
    "FacetBuilder",
    "FacetValue",
    "FilterSet",
    "FiltersBuilder",
    "OrderSequencer",
    "OrderSpec",
    "RankedValues",
    "RegionPolicy",
    "Searcher",
    "ShortListComposer",
    "SingleFacetBuilder",
    "StaticRegionPolicy",
    "default_builders",
    "load_order_spec",
    "sort_values_by_rank",
]
