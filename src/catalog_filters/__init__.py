"""
catalog_filters – catalog search facet ranking and ordering.

Import path convention::

    from catalog_filters.filters import FiltersBuilder, OrderSpec
    from catalog_filters.kernel.errors import AggregationUnavailableError
    from catalog_filters.config.settings import FiltersSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
