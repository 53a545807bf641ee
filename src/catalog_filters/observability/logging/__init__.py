"""Observability – structured logging ports and helpers."""
from catalog_filters.observability.logging.factory import JsonLoggerFactory
from catalog_filters.observability.logging.processors import BuildContextProcessor, get_logger

__all__ = ["BuildContextProcessor", "JsonLoggerFactory", "get_logger"]
