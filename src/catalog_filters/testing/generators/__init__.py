"""Testing generators – hypothesis strategies for facet values and keys."""
from catalog_filters.testing.generators.strategies import (
    facet_keys_strategy,
    facet_value_strategy,
    facet_values_strategy,
)

__all__ = ["facet_keys_strategy", "facet_value_strategy", "facet_values_strategy"]
