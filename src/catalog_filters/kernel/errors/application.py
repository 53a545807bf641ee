"""Application-layer errors – wiring and configuration problems."""

from __future__ import annotations

from catalog_filters.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ConfigurationError(ApplicationError):
    """Configuration is missing or invalid; raised at construction time."""

    default_code = "configuration_error"


__all__ = ["ApplicationError", "ConfigurationError"]
