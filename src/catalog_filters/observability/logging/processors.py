"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class BuildContextProcessor:
    """structlog processor that copies build-pass context into every event.

    Values bound through :func:`structlog.contextvars.bind_contextvars` under
    ``category_id`` and ``build_id`` are surfaced even for loggers created
    before the build started.

    Usage::

        import structlog
        from catalog_filters.observability.logging.processors import BuildContextProcessor

        structlog.configure(processors=[BuildContextProcessor(), ...])
    """

    keys: tuple[str, ...] = ("category_id", "build_id")

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        ctx = structlog.contextvars.get_contextvars()
        for key in self.keys:
            if key in ctx:
                event_dict.setdefault(key, ctx[key])
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["BuildContextProcessor", "get_logger"]
