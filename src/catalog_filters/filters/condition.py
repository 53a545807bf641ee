"""Filters – Condition: the active selections of one build pass."""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from catalog_filters.filters.values import FacetValue, ValueId
from catalog_filters.kernel.errors import InvalidConditionError


def _is_scalar_id(value: Any) -> bool:
    return isinstance(value, (int, str)) and not isinstance(value, bool)


class Condition(Mapping[str, tuple[ValueId, ...]]):
    """Immutable mapping of facet key to the selected value ids.

    Build it with :meth:`from_mapping`, which rejects malformed input with
    :class:`InvalidConditionError` before any facet builder runs::

        Condition.from_mapping({"producer": [12, 14], "price": "100-500"})
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, tuple[ValueId, ...]] | None = None) -> None:
        self._data: dict[str, tuple[ValueId, ...]] = dict(data or {})

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "Condition":
        if raw is None:
            return cls()
        if not isinstance(raw, Mapping):
            raise InvalidConditionError(
                f"Condition must be a mapping, got {type(raw).__name__}"
            )

        errors: list[dict[str, Any]] = []
        data: dict[str, tuple[ValueId, ...]] = {}
        for key, selected in raw.items():
            if not isinstance(key, str) or not key.strip():
                errors.append({"field": repr(key), "error": "facet key must be a non-empty string"})
                continue
            if _is_scalar_id(selected):
                data[key] = (selected,)
                continue
            if isinstance(selected, (list, tuple, set, frozenset)):
                bad = [v for v in selected if not _is_scalar_id(v)]
                if bad:
                    errors.append({"field": key, "error": f"unsupported value ids {bad!r}"})
                    continue
                # sets have no order of their own
                items = sorted(selected, key=str) if isinstance(selected, (set, frozenset)) else selected
                data[key] = tuple(items)
                continue
            errors.append({"field": key, "error": f"unsupported value {selected!r}"})

        if errors:
            raise InvalidConditionError("Malformed filter condition", errors=errors)
        return cls(data)

    def __getitem__(self, key: str) -> tuple[ValueId, ...]:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Condition({self._data!r})"

    def __hash__(self) -> int:
        return hash(tuple(sorted(self._data.items())))

    @property
    def has_condition(self) -> bool:
        """True when at least one facet key holds a selection."""
        return any(self._data.values())

    def is_selected(self, facet_key: str, value: FacetValue) -> bool:
        """Whether *value* of *facet_key* is part of the active selection.

        Ids are compared as strings so ``"12"`` from a query string matches
        the integer id ``12`` reported by the searcher.
        """
        selected = self._data.get(facet_key)
        if not selected or value.id is None:
            return False
        return str(value.id) in {str(v) for v in selected}


__all__ = ["Condition"]
