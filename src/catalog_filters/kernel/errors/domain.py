"""Domain errors – invalid input and broken invariants."""

from __future__ import annotations

from typing import Any

from catalog_filters.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """An internal invariant was violated (programmer error)."""

    default_code = "invariant_violation"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidConditionError(ValidationError):
    """The filter condition handed to a build pass is malformed."""

    default_code = "invalid_condition"


__all__ = [
    "DomainError",
    "InvalidConditionError",
    "InvariantViolationError",
    "ValidationError",
]
