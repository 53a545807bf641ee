"""Infrastructure errors – failures of the aggregation backend."""

from __future__ import annotations

from typing import Any

from catalog_filters.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class AggregationUnavailableError(InfrastructureError):
    """The searcher could not aggregate values for a facet (I/O, timeout, …)."""

    default_code = "aggregation_unavailable"

    def __init__(
        self,
        facet_key: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Aggregation for facet '{facet_key}' is unavailable", **kwargs)
        self.facet_key = facet_key
        self.detail.setdefault("facet_key", facet_key)


__all__ = ["AggregationUnavailableError", "InfrastructureError"]
