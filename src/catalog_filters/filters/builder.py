"""Filters – FiltersBuilder, the orchestrator of one filters build pass."""
from __future__ import annotations

import contextvars
import dataclasses
import uuid
from collections.abc import Mapping, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

import structlog

from catalog_filters.config.settings import ErrorPolicy, FiltersSettings
from catalog_filters.filters.builders import FacetBuilder, default_builders
from catalog_filters.filters.condition import Condition
from catalog_filters.filters.ordering import OrderSequencer, OrderSpec
from catalog_filters.filters.ports import RegionPolicy, Searcher, StaticRegionPolicy
from catalog_filters.filters.short_list import ShortListComposer
from catalog_filters.filters.values import Facet, FilterSet, ValueId
from catalog_filters.kernel.errors import AggregationUnavailableError
from catalog_filters.observability.logging import get_logger

_log = get_logger(__name__)


class FiltersBuilder:
    """Build the ordered facets of a catalog listing for one condition.

    Typical use::

        builder = FiltersBuilder(
            category_id=80004,
            searcher=searcher,
            condition={"producer": [12]},
            order_spec=OrderSpec.from_mapping(config["filters_order"]),
        )
        filter_set = builder.build_filters()
        builder.get_chosen()  # (("producer", 12),)

    Every call to :meth:`build_filters` starts from scratch; nothing built by
    a previous pass is reused.
    """

    def __init__(
        self,
        category_id: int,
        searcher: Searcher,
        condition: Condition | Mapping[str, Any] | None = None,
        *,
        order_spec: OrderSpec,
        settings: FiltersSettings | None = None,
        region_policy: RegionPolicy | None = None,
        builders: Sequence[FacetBuilder] | None = None,
    ) -> None:
        self._settings = settings or FiltersSettings()
        self._sequencer = OrderSequencer(order_spec)
        self._composer = ShortListComposer(self._settings.default_short_list_size)
        self._region_policy = region_policy or StaticRegionPolicy()
        self._builders: tuple[FacetBuilder, ...] = tuple(
            default_builders() if builders is None else builders
        )
        self._searcher = searcher
        self._category_id = category_id
        self._condition = self._coerce_condition(condition)
        self._filter_set = FilterSet()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    @staticmethod
    def _coerce_condition(condition: Condition | Mapping[str, Any] | None) -> Condition:
        if isinstance(condition, Condition):
            return condition
        return Condition.from_mapping(condition)

    def set_category_id(self, category_id: int) -> "FiltersBuilder":
        self._category_id = category_id
        self._filter_set = FilterSet()
        return self

    def set_condition(self, condition: Condition | Mapping[str, Any] | None) -> "FiltersBuilder":
        self._condition = self._coerce_condition(condition)
        self._filter_set = FilterSet()
        return self

    @property
    def category_id(self) -> int:
        return self._category_id

    @property
    def condition(self) -> Condition:
        return self._condition

    @property
    def has_condition(self) -> bool:
        return self._condition.has_condition

    @property
    def builders(self) -> tuple[FacetBuilder, ...]:
        return self._builders

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def get_filters(self) -> tuple[Facet, ...]:
        return self._filter_set.filters

    def get_chosen(self) -> tuple[tuple[str, ValueId], ...]:
        """(facet key, value id) pairs of the facets' values that are selected."""
        return self._filter_set.chosen

    @property
    def filter_set(self) -> FilterSet:
        return self._filter_set

    # ------------------------------------------------------------------
    # Build pass
    # ------------------------------------------------------------------

    def build_filters(self) -> FilterSet:
        self._filter_set = FilterSet()
        log = _log.bind(category_id=self._category_id)

        with structlog.contextvars.bound_contextvars(
            category_id=self._category_id, build_id=uuid.uuid4().hex
        ):
            log.info("filters.build.start", has_condition=self.has_condition)
            self._searcher.set_filters(self._condition)

            built = self._run_builders(self._enabled_builders(log), log)
            facets = [self._composer.compose(facet) for facet in built if facet.values]
            ordered = self._assign_order(facets)

            self._filter_set = FilterSet(filters=ordered, chosen=self._chosen(ordered))
            log.info(
                "filters.build.done",
                facets=len(ordered),
                chosen=len(self._filter_set.chosen),
            )
        return self._filter_set

    def mark_filters_order(self, marks: Sequence[str] | None = None) -> FilterSet:
        """Re-assign ``order`` of the built facets.

        Without *marks* the configured order spec is applied again. With an
        explicit sequence, facets named in it get their index there; the
        others keep their current order.
        """
        facets = list(self._filter_set.filters)
        if marks is None:
            ordered = self._assign_order(facets)
        else:
            index = {key: position for position, key in enumerate(marks)}
            ordered = tuple(
                sorted(
                    (
                        f.with_order(index[f.option_name]) if f.option_name in index else f
                        for f in facets
                    ),
                    key=lambda f: (f.order is None, f.order or 0),
                )
            )
        self._filter_set = dataclasses.replace(self._filter_set, filters=ordered)
        return self._filter_set

    def _enabled_builders(self, log: Any) -> list[FacetBuilder]:
        enabled: list[FacetBuilder] = []
        for builder in self._builders:
            if builder.region_gated and not self._region_policy.is_seller_facet_enabled():
                log.debug("filters.builder.region_skipped", builder=builder.name)
                continue
            enabled.append(builder)
        return enabled

    def _run_builders(self, builders: Sequence[FacetBuilder], log: Any) -> list[Facet]:
        if self._settings.max_workers > 1 and len(builders) > 1:
            results = self._run_parallel(builders, log)
        else:
            results = [self._run_one(builder, log) for builder in builders]
        return [facet for group in results for facet in group]

    def _run_one(self, builder: FacetBuilder, log: Any) -> list[Facet]:
        try:
            facets = builder.build(self._condition, self._searcher, self._category_id)
        except AggregationUnavailableError as exc:
            if self._settings.policy is ErrorPolicy.FAIL_FAST:
                raise
            log.warning("filters.builder.skipped", builder=builder.name, **exc.log_fields())
            return []
        if not facets:
            log.debug("filters.builder.empty", builder=builder.name)
        return facets

    def _run_parallel(self, builders: Sequence[FacetBuilder], log: Any) -> list[list[Facet]]:
        executor = ThreadPoolExecutor(
            max_workers=self._settings.max_workers, thread_name_prefix="facet-builder"
        )
        futures: list[Future[list[Facet]]] = [
            # each task runs in its own copy of the build context
            executor.submit(contextvars.copy_context().run, self._run_one, builder, log)
            for builder in builders
        ]
        try:
            # joined in registration order so the main pass keeps its tie-break
            return [future.result() for future in futures]
        except BaseException:
            executor.shutdown(wait=True, cancel_futures=True)
            raise
        finally:
            executor.shutdown(wait=True)

    def _assign_order(self, facets: Sequence[Facet]) -> tuple[Facet, ...]:
        positions = self._sequencer.positions([f.option_name for f in facets])
        return tuple(
            sorted((f.with_order(positions[f.option_name]) for f in facets), key=lambda f: f.order)
        )

    def _chosen(self, facets: Sequence[Facet]) -> tuple[tuple[str, ValueId], ...]:
        if not self.has_condition:
            return ()
        return tuple(
            (facet.option_name, value.id)
            for facet in facets
            for value in facet.values
            if value.id is not None and self._condition.is_selected(facet.option_name, value)
        )


__all__ = ["FiltersBuilder"]
