"""Testing fakes – InMemorySearcher."""
from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping, Sequence

from catalog_filters.filters.condition import Condition
from catalog_filters.filters.values import FacetValue
from catalog_filters.kernel.errors import AggregationUnavailableError


class InMemorySearcher:
    """Searcher returning canned values per facet key.

    ``unavailable`` facet keys raise :class:`AggregationUnavailableError`,
    which lets tests exercise the orchestrator's error policy. Calls are
    recorded in ``calls`` / ``primed`` for assertions.
    """

    def __init__(
        self,
        values: Mapping[str, Sequence[FacetValue]] | None = None,
        *,
        unavailable: Iterable[str] = (),
    ) -> None:
        self._values: dict[str, tuple[FacetValue, ...]] = {
            key: tuple(vals) for key, vals in (values or {}).items()
        }
        self._unavailable = set(unavailable)
        self._lock = threading.Lock()
        self.calls: list[tuple[int, str]] = []
        self.primed: list[Condition] = []

    def add(self, facet_key: str, values: Sequence[FacetValue]) -> None:
        self._values[facet_key] = tuple(values)

    def make_unavailable(self, facet_key: str) -> None:
        self._unavailable.add(facet_key)

    def set_filters(self, condition: Condition) -> None:
        self.primed.append(condition)

    def count_values(
        self, condition: Condition, category_id: int, facet_key: str
    ) -> Sequence[FacetValue]:
        with self._lock:
            self.calls.append((category_id, facet_key))
        if facet_key in self._unavailable:
            raise AggregationUnavailableError(facet_key, detail={"category_id": category_id})
        return self._values.get(facet_key, ())


__all__ = ["InMemorySearcher"]
