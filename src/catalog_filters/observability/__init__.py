"""Observability – structured logging helpers."""
