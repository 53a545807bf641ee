"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from catalog_filters.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for env-loaded settings.

    ``_prefix`` names the environment namespace (``FILTERS`` ->
    ``FILTERS_<FIELD>``). Subclasses validate in :meth:`_validate`, which runs
    on construction so a bad value never reaches a build pass.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def _require_positive_int(self, name: str) -> int:
        value = getattr(self, name)
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise InvalidSettingValueError(name, value, "must be a positive integer")
        return value


__all__ = ["Settings"]
