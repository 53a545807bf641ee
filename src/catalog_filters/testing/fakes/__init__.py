"""Testing fakes – in-memory doubles for the filters ports."""
from catalog_filters.filters.ports import StaticRegionPolicy
from catalog_filters.testing.fakes.searcher import InMemorySearcher

__all__ = ["InMemorySearcher", "StaticRegionPolicy"]
