"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                  (domain.py)
    │   ├── InvariantViolationError
    │   └── ValidationError
    │       └── InvalidConditionError
    ├── ApplicationError             (application.py)
    │   └── ConfigurationError
    └── InfrastructureError          (infrastructure.py)
        └── AggregationUnavailableError
"""

from catalog_filters.kernel.errors.application import ApplicationError, ConfigurationError
from catalog_filters.kernel.errors.base import BaseError
from catalog_filters.kernel.errors.domain import (
    DomainError,
    InvalidConditionError,
    InvariantViolationError,
    ValidationError,
)
from catalog_filters.kernel.errors.infrastructure import (
    AggregationUnavailableError,
    InfrastructureError,
)

__all__ = [
    "AggregationUnavailableError",
    "ApplicationError",
    "BaseError",
    "ConfigurationError",
    "DomainError",
    "InfrastructureError",
    "InvalidConditionError",
    "InvariantViolationError",
    "ValidationError",
]
