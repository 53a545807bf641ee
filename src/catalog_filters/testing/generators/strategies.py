"""Testing generators – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package:

    pip install hypothesis
    # or
    pip install "catalog-filters[test]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]

    from catalog_filters.filters.values import FacetValue


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


_TITLES: tuple[str, ...] = (
    "Apple", "apple", "Bosch", "Canon", "Dell", "epson", "Fujitsu", "HP", "Lenovo", "Sony",
)


def facet_value_strategy(value_id: int, *, titles: tuple[str, ...] = _TITLES) -> "SearchStrategy[FacetValue]":
    """Strategy for a single :class:`FacetValue` with the given id.

    Ranks are drawn from a small integer range so equal ranks (and hence the
    stability of the rank sorter) show up often.
    """
    from catalog_filters.filters.values import FacetValue

    st = _require_hypothesis()
    return st.builds(
        FacetValue,
        id=st.just(value_id),
        title=st.sampled_from(titles),
        is_rank=st.booleans(),
        disabled=st.booleans(),
        rank=st.integers(min_value=0, max_value=5),
        count=st.integers(min_value=0, max_value=500),
    )


def facet_values_strategy(*, min_size: int = 0, max_size: int = 30) -> "SearchStrategy[list[FacetValue]]":
    """Strategy for a list of facet values with unique ids ``1..n``."""
    st = _require_hypothesis()

    def _values(size: int) -> Any:
        return st.tuples(*(facet_value_strategy(i) for i in range(1, size + 1))).map(list)

    return st.integers(min_value=min_size, max_value=max_size).flatmap(_values)


def facet_keys_strategy(*, max_size: int = 12) -> "SearchStrategy[list[str]]":
    """Strategy for a list of unique facet keys in arbitrary build order."""
    st = _require_hypothesis()
    alphabet = st.sampled_from(
        ["category", "size", "brand", "price", "color", "seller", "state", "series", "producer"]
    )
    extra = st.text(alphabet="abcdefgh", min_size=1, max_size=4)
    return st.lists(st.one_of(alphabet, extra), unique=True, max_size=max_size)


__all__ = ["facet_keys_strategy", "facet_value_strategy", "facet_values_strategy"]
