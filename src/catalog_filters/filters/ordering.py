"""Filters – OrderSpec and OrderSequencer.

The display order of facets is product configuration: a few facets always
come first, some always come last, and some ("slaves") must sit right after
the facet that activates them ("master"), e.g. a size facet after category.
"""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from catalog_filters.kernel.errors import ConfigurationError, InvariantViolationError


def _as_keys(bucket: str, raw: Any) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str) or not isinstance(raw, Iterable):
        raise ConfigurationError(
            f"Order bucket '{bucket}' must be a sequence of facet keys",
            detail={"bucket": bucket, "value": repr(raw)},
        )
    keys = tuple(raw)
    bad = [k for k in keys if not isinstance(k, str) or not k]
    if bad:
        raise ConfigurationError(
            f"Order bucket '{bucket}' holds non-string keys",
            detail={"bucket": bucket, "keys": repr(bad)},
        )
    if len(set(keys)) != len(keys):
        raise ConfigurationError(
            f"Order bucket '{bucket}' lists a facet key twice",
            detail={"bucket": bucket, "keys": list(keys)},
        )
    return keys


@dataclasses.dataclass(frozen=True)
class OrderSpec:
    """Static facet ordering rules.

    Attributes:
        firsts_order: keys always shown first, in this order, when present.
        dependencies: master key -> slave keys spliced right after the master.
        lasts_order: keys always shown last, in this order, when present.
    """

    firsts_order: tuple[str, ...] = ()
    dependencies: Mapping[str, tuple[str, ...]] = dataclasses.field(default_factory=dict)
    lasts_order: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "firsts_order", _as_keys("firsts", self.firsts_order))
        object.__setattr__(self, "lasts_order", _as_keys("lasts", self.lasts_order))
        if not isinstance(self.dependencies, Mapping):
            raise ConfigurationError("Order dependencies must be a mapping of master -> slaves")
        deps: dict[str, tuple[str, ...]] = {}
        for master, slaves in self.dependencies.items():
            if not isinstance(master, str) or not master:
                raise ConfigurationError(
                    "Order dependency master must be a non-empty string",
                    detail={"master": repr(master)},
                )
            deps[master] = _as_keys(f"dependencies.{master}", slaves)
        object.__setattr__(self, "dependencies", deps)

        if not (self.firsts_order or self.dependencies or self.lasts_order):
            raise ConfigurationError("Order spec is empty: define firsts, dependencies or lasts")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "OrderSpec":
        """Build from ``{"firsts": [...], "dependencies": {...}, "lasts": [...]}``."""
        if data is None:
            raise ConfigurationError("Order spec is missing")
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"Order spec must be a mapping, got {type(data).__name__}")
        unknown = set(data) - {"firsts", "dependencies", "lasts"}
        if unknown:
            raise ConfigurationError(
                "Order spec has unknown sections", detail={"sections": sorted(unknown)}
            )
        return cls(
            firsts_order=data.get("firsts") or (),
            dependencies=data.get("dependencies") or {},
            lasts_order=data.get("lasts") or (),
        )

    def to_mapping(self) -> dict[str, Any]:
        return {
            "firsts": list(self.firsts_order),
            "dependencies": {k: list(v) for k, v in self.dependencies.items()},
            "lasts": list(self.lasts_order),
        }


def load_order_spec(path: str | Path) -> OrderSpec:
    """Read an :class:`OrderSpec` from a JSON document."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"Cannot read order spec from {path}", cause=exc) from exc
    return OrderSpec.from_mapping(data)


class OrderSequencer:
    """Turn the facet keys of one build into their display order.

    Four passes over the keys, each consuming what it places:

    1. firsts, in ``firsts_order``;
    2. dependencies: present slaves attached after their already placed
       master, in slave-list order (a placed slave can be a master too);
    3. remaining keys that are not lasts, in build order;
    4. lasts, in ``lasts_order``.

    Example::

        spec = OrderSpec(firsts_order=("category",), dependencies={"category": ("size",)})
        OrderSequencer(spec).sequence(["brand", "size", "category"])
        # ['category', 'size', 'brand']
    """

    def __init__(self, order_spec: OrderSpec) -> None:
        if not isinstance(order_spec, OrderSpec):
            raise ConfigurationError("Order spec is missing")
        self._spec = order_spec

    @property
    def order_spec(self) -> OrderSpec:
        return self._spec

    def sequence(self, marks: Sequence[str]) -> list[str]:
        if len(set(marks)) != len(marks):
            raise InvariantViolationError(
                "Facet keys must be unique within a build", detail={"marks": list(marks)}
            )

        pending = set(marks)
        heads: list[str] = []
        attached: dict[str, list[str]] = {}

        for key in self._spec.firsts_order:
            if key in pending:
                heads.append(key)
                pending.discard(key)

        placed = set(heads)
        for master, slaves in self._spec.dependencies.items():
            if master not in placed:
                continue
            for slave in slaves:
                if slave in pending:
                    attached.setdefault(master, []).append(slave)
                    pending.discard(slave)
                    placed.add(slave)

        result: list[str] = []

        def emit(key: str) -> None:
            result.append(key)
            for slave in attached.get(key, ()):
                emit(slave)

        for key in heads:
            emit(key)

        lasts = set(self._spec.lasts_order)
        for key in marks:
            if key in pending and key not in lasts:
                result.append(key)
                pending.discard(key)

        for key in self._spec.lasts_order:
            if key in pending:
                result.append(key)
                pending.discard(key)

        assert not pending and len(result) == len(marks), "sequencer dropped facet keys"
        return result

    def positions(self, marks: Sequence[str]) -> dict[str, int]:
        """Map each facet key to its display index."""
        return {key: index for index, key in enumerate(self.sequence(marks))}


__all__ = ["OrderSequencer", "OrderSpec", "load_order_spec"]
